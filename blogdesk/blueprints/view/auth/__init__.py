from __future__ import annotations

from blogdesk.blueprints.view.auth import login  # noqa: E402,F401
from blogdesk.blueprints.view.auth import logout  # noqa: E402,F401
