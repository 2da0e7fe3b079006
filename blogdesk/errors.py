"""Failure types raised by the post handlers.

Validation problems are not exceptions: they come back as
:class:`blogdesk.schemas.posts.FieldErrors` values. The types here cover the
two raised channels, contract violations (programmer errors) and lookups that
miss.
"""
from __future__ import annotations

from werkzeug.exceptions import NotFound


class InvariantViolation(Exception):
    """A handler was called in a state its caller should have ruled out."""


def invariant(condition: object, message: str) -> None:
    if not condition:
        raise InvariantViolation(message)


class PostNotFound(NotFound):
    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(description=f'Uh oh! the post with the slug "{slug}" is not found')
