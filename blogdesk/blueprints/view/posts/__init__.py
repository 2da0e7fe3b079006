from __future__ import annotations

# Import routes to register them with the posts blueprint
# Each module imports `bp` from blogdesk.blueprints.posts
from blogdesk.blueprints.view.posts import admin  # noqa: E402,F401
from blogdesk.blueprints.view.posts import listing  # noqa: E402,F401
