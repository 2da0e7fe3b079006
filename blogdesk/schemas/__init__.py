from __future__ import annotations

# Re-export common schema classes for convenient imports
from .posts import (  # noqa: F401
    NEW_POST_SLUG,
    FieldErrors,
    Intent,
    PostFields,
    PostSubmission,
    decode_submission,
)
from .listing import AdminIdentity, PostListing, PostOut  # noqa: F401

__all__ = [
    # posts
    "NEW_POST_SLUG",
    "FieldErrors",
    "Intent",
    "PostFields",
    "PostSubmission",
    "decode_submission",
    # listing
    "AdminIdentity",
    "PostListing",
    "PostOut",
]
