from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from werkzeug.datastructures import MultiDict

from blogdesk.errors import InvariantViolation, invariant

# Route slug that means "render a blank creation form"
NEW_POST_SLUG = "new"

POST_FIELD_LABELS = {
    "title": "Title",
    "slug": "Slug",
    "markdown": "Markdown",
}


class Intent(str, Enum):
    DELETE = "delete"
    CREATE = "create"
    UPDATE = "update"


class PostFields(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    slug: str = Field(min_length=1, max_length=220)
    markdown: str = Field(min_length=1)

    @field_validator("slug")
    @classmethod
    def slug_routable(cls, v: str) -> str:
        if v == NEW_POST_SLUG:
            raise ValueError(f'Slug "{NEW_POST_SLUG}" is reserved')
        if "/" in v:
            raise ValueError("Slug cannot contain /")
        return v


class FieldErrors(BaseModel):
    """Per-field messages for a rejected submission; ``None`` means the field is fine."""

    title: Optional[str] = None
    slug: Optional[str] = None
    markdown: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return any(self.model_dump().values())

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "FieldErrors":
        messages: dict[str, str] = {}
        for err in exc.errors():
            name = str(err["loc"][0])
            if name in messages:
                continue
            label = POST_FIELD_LABELS.get(name, name)
            if err["type"] == "string_too_long":
                messages[name] = f"{label} must be at most {err['ctx']['max_length']} characters"
            elif err["type"] == "value_error":
                messages[name] = str(err["ctx"]["error"])
            else:
                messages[name] = f"{label} is required"
        return cls(**messages)


class PostSubmission(BaseModel):
    """A decoded admin form submission. ``fields`` is unset for deletes."""

    model_config = ConfigDict(frozen=True)

    intent: Intent
    fields: Optional[PostFields] = None


def resolve_intent(raw: str | None, route_slug: str) -> Intent:
    # Forms submitted without a button value fall back to what the route implies
    if not raw:
        return Intent.CREATE if route_slug == NEW_POST_SLUG else Intent.UPDATE
    try:
        return Intent(raw)
    except ValueError:
        raise InvariantViolation(f'intent must be one of delete, create, update (got "{raw}")') from None


def decode_submission(form: Mapping[str, str], route_slug: str) -> PostSubmission | FieldErrors:
    """Turn raw form data into either a submission to apply or the errors to show.

    Missing fields are reported together in one :class:`FieldErrors`. A field
    submitted more than once is a malformed request and raises
    :class:`blogdesk.errors.InvariantViolation` instead.
    """
    if not isinstance(form, MultiDict):
        form = MultiDict(form)

    intent = resolve_intent(form.get("intent"), route_slug)
    if intent is Intent.DELETE:
        return PostSubmission(intent=intent)

    data = {name: form.get(name) for name in POST_FIELD_LABELS if form.get(name)}
    try:
        fields = PostFields.model_validate(data)
    except ValidationError as e:
        return FieldErrors.from_validation_error(e)

    for name in POST_FIELD_LABELS:
        invariant(len(form.getlist(name)) == 1, f"{name} must be a string")

    return PostSubmission(intent=intent, fields=fields)
