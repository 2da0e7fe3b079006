from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    slug: str
    title: str
    markdown: str


class AdminIdentity(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    username: str


class PostListing(BaseModel):
    posts: list[PostOut]
    admin_user: Optional[AdminIdentity] = None
