# hostprompt/auth/utils.py
from __future__ import annotations

from typing import Optional

from flask import current_app, request, session

from hostprompt.errors import Forbidden

# ---------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------

def _as_int(value) -> Optional[int]:
    try:
        return int(value) if value not in (None, "") else None
    except (TypeError, ValueError):
        return None


def _resolve_user_id() -> int:
    """
    Resolution order:
      1) session["user_id"] (set by whatever login layer fronts the API)
      2) X-User-Id header
      3) ?userId= query parameter
      4) DEFAULT_USER_ID from config
    """
    for candidate in (
        session.get("user_id"),
        request.headers.get("X-User-Id"),
        request.args.get("userId"),
    ):
        uid = _as_int(candidate)
        if uid is not None:
            return uid
    return int(current_app.config.get("DEFAULT_USER_ID", 1))


# ---------------------------------------------------------------------
# Public helpers consumed by blueprints
# ---------------------------------------------------------------------

_USER_ID_KEY = "hostprompt.user_id"


def current_user_id() -> int:
    """Resolved once per request and cached on the WSGI environ (not g, which is per app context)."""
    if _USER_ID_KEY not in request.environ:
        request.environ[_USER_ID_KEY] = _resolve_user_id()
    return request.environ[_USER_ID_KEY]


def ensure_owner(owner_id: int, what: str = "resource") -> None:
    """Raise Forbidden unless the current user owns the record."""
    if owner_id != current_user_id():
        raise Forbidden(f"Not authorized to modify this {what}")
