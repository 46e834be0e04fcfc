from __future__ import annotations

from functools import wraps

from flask import g, jsonify

from ..common.http import bearer_token
from .service import AuthService


def session_required(auth_service: AuthService):
    """Resolve the bearer token to ``g.session``/``g.session_id`` or answer 401."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            session_id = bearer_token()
            session = auth_service.verify_session(session_id)
            if not session:
                return jsonify({"error": "Unauthorized"}), 401
            g.session = session
            g.session_id = session_id
            return view(*args, **kwargs)

        return wrapper

    return decorator
