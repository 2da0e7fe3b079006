from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

import structlog
from flask_login import current_user

from blogdesk.extensions import db
from blogdesk.models.user import User
from blogdesk.repositories.user import get_user_by_username
from blogdesk.schemas.listing import AdminIdentity
from blogdesk.utils.crypto import verify_password

logger = structlog.get_logger(__name__)


def authenticate(username: str, password: str) -> tuple[User | None, str | None]:
    """
    Check credentials.
    Returns (user, error_message) tuple.
    """
    user = get_user_by_username(username)
    if not user or not verify_password(password, user.password_hash):
        logger.info("login_failed", username=username)
        return None, "Invalid username or password"

    user.last_login = datetime.now(timezone.utc)
    db.session.commit()
    return user, None


def is_admin(user) -> bool:
    return bool(getattr(user, "is_authenticated", False) and getattr(user, "is_admin", False))


def current_admin_identity() -> Optional[AdminIdentity]:
    """The logged-in admin, or None for anonymous visitors and non-admin accounts."""
    if not is_admin(current_user):
        return None
    return AdminIdentity.model_validate(current_user._get_current_object())
