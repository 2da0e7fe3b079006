from __future__ import annotations

from functools import wraps
from typing import Callable, Any

from flask_login import current_user, login_required, logout_user

from blogdesk.extensions import login_manager
from blogdesk.services.auth import is_admin


def admin_required(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Send anyone who is not a logged-in admin to the login page.

    A signed-in account without the admin flag is signed out first so the
    login page can be used to switch accounts.
    """
    @wraps(fn)
    @login_required
    def wrapper(*args, **kwargs):
        if not is_admin(current_user):
            logout_user()
            return login_manager.unauthorized()
        return fn(*args, **kwargs)

    return wrapper
