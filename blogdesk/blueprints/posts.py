from __future__ import annotations

from flask import Blueprint, current_app, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

bp = Blueprint("posts", __name__)

import blogdesk.blueprints.view.posts  # noqa: E402,F401

# App-wide handlers are keyed by status code and would otherwise win over a
# class-keyed blueprint handler, so the common codes are registered here too.
STATUS_PAGE_CODES = (400, 404, 405, 413, 429)


def status_error(e: HTTPException):
    """Not-found and other status failures: show the status and message."""
    if e.code is None or e.code < 400:
        return e
    if request.args.get("format") == "json":
        return jsonify({"error": e.name.lower().replace(" ", "_"), "message": e.description}), e.code
    return render_template("posts/error_status.html", status=e.code, message=e.description), e.code


bp.register_error_handler(HTTPException, status_error)
for _code in STATUS_PAGE_CODES:
    bp.register_error_handler(_code, status_error)


@bp.errorhandler(Exception)
def unexpected_error(e: Exception):
    current_app.logger.exception(f"Unhandled error on {request.method} {request.path}: {e}")
    if request.args.get("format") == "json":
        return jsonify({"error": "server_error", "message": str(e)}), 500
    return render_template("posts/error_generic.html", message=str(e) or "Unknown error"), 500
