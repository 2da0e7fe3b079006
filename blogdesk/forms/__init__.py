from __future__ import annotations

from .auth import LoginForm  # noqa: F401

__all__ = [
    "LoginForm",
]
