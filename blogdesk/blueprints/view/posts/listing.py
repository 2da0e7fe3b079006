from __future__ import annotations

from flask import jsonify, redirect, render_template, request, url_for

from blogdesk.errors import PostNotFound
from blogdesk.extensions import limiter
from blogdesk.repositories.posts import get_post
from blogdesk.services.auth import current_admin_identity
from blogdesk.services.posts import build_listing

from blogdesk.blueprints.posts import bp


@bp.get("/")
def home():
    return redirect(url_for("posts.index"))


@bp.get("/posts")
@limiter.limit("120 per minute")
def index():
    """Public post listing"""
    listing = build_listing(admin_user=current_admin_identity())
    if request.args.get("format") == "json":
        return jsonify({"status": "ok", "page": "posts", **listing.model_dump()})
    return render_template("posts/index.html", listing=listing)


@bp.get("/posts/<slug>")
@limiter.limit("120 per minute")
def detail(slug: str):
    post = get_post(slug)
    if not post:
        raise PostNotFound(slug)
    if request.args.get("format") == "json":
        return jsonify({
            "status": "ok",
            "page": "post",
            "post": {
                "slug": post.slug,
                "title": post.title,
                "markdown": post.markdown,
                "created_at": post.created_at.isoformat() if post.created_at else None,
                "updated_at": post.updated_at.isoformat() if post.updated_at else None,
            },
        })
    return render_template("posts/detail.html", post=post)
