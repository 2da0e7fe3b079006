from __future__ import annotations

from blogdesk.models.user import User
from blogdesk.models.post import Post

__all__ = [
    "User",
    "Post",
]
