from __future__ import annotations

from typing import Optional

from sqlalchemy.exc import IntegrityError

from blogdesk.extensions import db
from blogdesk.models.post import Post


def get_posts() -> list[Post]:
    return list(db.session.execute(db.select(Post).order_by(Post.id)).scalars())


def get_post(slug: str) -> Optional[Post]:
    return db.session.execute(db.select(Post).filter_by(slug=slug)).scalar_one_or_none()


def create_post(*, title: str, slug: str, markdown: str) -> Post:
    p = Post(title=title, slug=slug, markdown=markdown)
    db.session.add(p)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("slug_conflict")
    return p


def update_post(current_slug: str, *, title: str, slug: str, markdown: str) -> Optional[Post]:
    """Overwrite every field of the post stored under ``current_slug``.

    ``slug`` may differ from ``current_slug``; the post is then re-keyed and
    the old slug stops resolving. Returns ``None`` when nothing is stored
    under ``current_slug``.
    """
    p = get_post(current_slug)
    if p is None:
        return None
    p.title = title
    p.slug = slug
    p.markdown = markdown
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("slug_conflict")
    return p


def delete_post(slug: str) -> bool:
    p = get_post(slug)
    if p is None:
        return False
    db.session.delete(p)
    db.session.commit()
    return True
