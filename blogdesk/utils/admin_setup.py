from __future__ import annotations

from typing import Optional

import structlog
from sqlalchemy import inspect

from blogdesk.extensions import db
from blogdesk.models.user import User
from blogdesk.repositories.user import create_user, get_user_by_username
from blogdesk.utils.crypto import hash_password

logger = structlog.get_logger(__name__)


def ensure_admin_user() -> Optional[str]:
    """
    Check whether an admin account exists and log the outcome.

    Admins are created with the ``flask create-admin`` CLI command; this only
    reports. Returns a status message when no admin exists, otherwise None.
    """
    # Skip check if the users table doesn't exist yet (e.g., before migrations)
    if not inspect(db.engine).has_table("users"):
        logger.info("admin_check_skipped", reason="users table missing")
        return None

    admin_count = db.session.execute(
        db.select(db.func.count(User.id)).filter_by(is_admin=True)
    ).scalar()
    if admin_count:
        logger.info("admin_check_passed", admins=admin_count)
        return None

    logger.warning("admin_missing", hint="flask create-admin")
    return "No admin user found. Use 'flask create-admin' to create one."


def create_admin_user(username: str, password: str) -> Optional[User]:
    """Create an admin account, or return None if the username is taken."""
    if get_user_by_username(username):
        return None
    return create_user(username=username, password_hash=hash_password(password), is_admin=True)
