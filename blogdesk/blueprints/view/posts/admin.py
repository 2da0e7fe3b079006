from __future__ import annotations

import time

from flask import current_app, jsonify, redirect, render_template, request, url_for

from blogdesk.decorators import admin_required
from blogdesk.extensions import limiter
from blogdesk.repositories.posts import get_posts
from blogdesk.schemas.posts import NEW_POST_SLUG, POST_FIELD_LABELS
from blogdesk.services import posts as posts_svc

from blogdesk.blueprints.posts import bp


def _pause_before_write() -> None:
    delay = float(current_app.config.get("POST_WRITE_DELAY_SECONDS", 0) or 0)
    if delay > 0:
        time.sleep(delay)


@bp.get("/posts/admin")
@admin_required
def admin_index():
    """Admin post list with edit links"""
    return render_template("posts/admin_index.html", posts=get_posts())


@bp.route("/posts/admin/<slug>", methods=["GET", "POST"])
@limiter.limit("30 per minute", methods=["POST"])
@admin_required
def admin_post(slug: str):
    """Blank form for "new", edit form otherwise; POST applies the submitted intent."""
    if request.method == "GET":
        post = posts_svc.load_admin_post(slug)
        values = {name: getattr(post, name) for name in POST_FIELD_LABELS} if post else {}
        return render_template(
            "posts/admin_form.html", post_slug=None if post is None else post.slug, values=values, errors=None
        )

    _pause_before_write()
    errors = posts_svc.apply_submission(slug, request.form)
    if errors is None:
        return redirect(url_for("posts.admin_index"))

    if request.args.get("format") == "json":
        return jsonify(errors.model_dump()), 400
    is_new = slug == NEW_POST_SLUG
    return render_template(
        "posts/admin_form.html",
        post_slug=None if is_new else slug,
        values=request.form,
        errors=errors,
    )
