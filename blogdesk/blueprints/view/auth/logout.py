from __future__ import annotations

from flask import flash, redirect, url_for
from flask_login import logout_user

from blogdesk.blueprints.auth import bp


@bp.route("/logout")
def logout():
    logout_user()
    flash("You have been logged out.", "info")
    return redirect(url_for("auth.login"))
