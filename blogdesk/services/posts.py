"""Post listing and the admin create/update/delete flow.

Route handlers stay thin: they hand the route slug and the raw form to
:func:`apply_submission` and either redirect (``None`` back) or re-render the
form with the returned :class:`FieldErrors`.
"""
from __future__ import annotations

from typing import Mapping, Optional

import structlog

from blogdesk.errors import PostNotFound, invariant
from blogdesk.models.post import Post
from blogdesk.repositories.posts import (
    create_post,
    delete_post,
    get_post,
    get_posts,
    update_post,
)
from blogdesk.schemas.listing import AdminIdentity, PostListing, PostOut
from blogdesk.schemas.posts import (
    NEW_POST_SLUG,
    FieldErrors,
    Intent,
    PostSubmission,
    decode_submission,
)

logger = structlog.get_logger(__name__)

SLUG_TAKEN_MESSAGE = "A post with this slug already exists"


def build_listing(admin_user: Optional[AdminIdentity] = None) -> PostListing:
    posts = get_posts()
    return PostListing(
        posts=[PostOut.model_validate(p) for p in posts],
        admin_user=admin_user,
    )


def load_admin_post(slug: str | None) -> Optional[Post]:
    """Post to prefill the admin form with; None means a blank creation form."""
    invariant(slug, "params.slug is required")
    if slug == NEW_POST_SLUG:
        return None

    post = get_post(slug)
    if post is None:
        raise PostNotFound(slug)
    return post


def apply_submission(route_slug: str | None, form: Mapping[str, str]) -> Optional[FieldErrors]:
    """Decode and apply one admin form submission.

    Returns None when the store was updated and the caller should redirect to
    the admin listing, or the field errors to show next to the form.
    """
    invariant(route_slug, "params.slug is required")

    result = decode_submission(form, route_slug)
    if isinstance(result, FieldErrors):
        logger.info("post_validation_failed", route_slug=route_slug, errors=result.model_dump(exclude_none=True))
        return result

    if result.intent is Intent.DELETE:
        deleted = delete_post(route_slug)
        logger.info("post_deleted", slug=route_slug, existed=deleted)
        return None

    try:
        _save(route_slug, result)
    except ValueError as e:
        if str(e) != "slug_conflict":
            raise
        return FieldErrors(slug=SLUG_TAKEN_MESSAGE)
    return None


def _save(route_slug: str, submission: PostSubmission) -> None:
    fields = submission.fields
    invariant(fields is not None, "create and update submissions carry fields")

    if submission.intent is Intent.CREATE:
        create_post(title=fields.title, slug=fields.slug, markdown=fields.markdown)
        logger.info("post_created", slug=fields.slug)
        return

    key = route_slug or fields.slug
    updated = update_post(key, title=fields.title, slug=fields.slug, markdown=fields.markdown)
    if updated is None:
        raise PostNotFound(key)
    logger.info("post_updated", slug=key, new_slug=fields.slug)
