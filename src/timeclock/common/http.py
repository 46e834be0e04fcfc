from __future__ import annotations

from functools import wraps
from typing import Any, Dict, Optional

from flask import current_app, jsonify, request

from ..core.constants import UNKNOWN
from ..core.exceptions import DomainError


def bearer_token() -> Optional[str]:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def client_ip() -> str:
    return request.headers.get("X-Forwarded-For") or request.headers.get("X-Real-IP") or UNKNOWN


def json_errors(failure_message: str):
    """Map DomainError to ``{error}`` with its status; anything else becomes a logged 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return jsonify({"error": str(e)}), e.status_code
            except Exception:
                current_app.logger.exception("%s %s failed", request.method, request.path)
                return jsonify({"error": failure_message}), 500

        return wrapper

    return decorator
