from __future__ import annotations

from flask import Blueprint

bp = Blueprint("auth", __name__)

import blogdesk.blueprints.view.auth  # noqa: E402,F401
