from __future__ import annotations

from flask import flash, redirect, render_template, request, url_for
from flask_login import login_user

from blogdesk.extensions import limiter
from blogdesk.forms.auth import LoginForm
from blogdesk.services import auth as auth_svc

from blogdesk.blueprints.auth import bp


def _safe_next(target: str | None) -> str | None:
    # Only same-site paths; "//host" would leave the site
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


@bp.route("/login", methods=["GET", "POST"])
@limiter.limit("5 per minute; 20 per hour", methods=["POST"])
def login():
    form = LoginForm()

    if form.validate_on_submit():
        user, error_message = auth_svc.authenticate(form.username.data, form.password.data)
        if not user:
            flash(error_message or "Invalid credentials", "error")
            return render_template("auth/login.html", form=form)

        login_user(user, remember=False)
        return redirect(_safe_next(request.args.get("next")) or url_for("posts.index"))

    return render_template("auth/login.html", form=form)
