from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError

from blogdesk.extensions import db
from blogdesk.models.user import User


def get_user_by_id(user_id: int) -> Optional[User]:
    return db.session.get(User, user_id)


def get_user_by_username(username: str) -> Optional[User]:
    return db.session.execute(db.select(User).filter_by(username=username)).scalar_one_or_none()


def create_user(*, username: str, password_hash: str, is_admin: bool = False) -> User:
    user = User(username=username, password_hash=password_hash, is_admin=is_admin)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("username_conflict")
    return user
