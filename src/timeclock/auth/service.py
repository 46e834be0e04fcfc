from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_utc, parse_iso_datetime, to_iso
from ..common.ids import generate_id
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from ..users.model import User
from ..users.repository import UserRepository
from .model import Session
from .repository import SessionRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class SessionGrant:
    """What login/register/impersonate hand back to the client."""

    session_id: str
    user: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {"sessionId": self.session_id, "user": self.user}


class AuthService:
    """Use cases: register, login, logout, session lookup, impersonation."""

    def __init__(self, users: UserRepository, sessions: SessionRepository, *, session_ttl_hours: int = 0):
        self._users = users
        self._sessions = sessions
        self._ttl = timedelta(hours=session_ttl_hours) if session_ttl_hours > 0 else None

    def _open_session(self, user: User, *, now: datetime, **extra: Any) -> str:
        session_id = generate_id()
        self._sessions.save(session_id, Session.for_user(user, created_at=to_iso(now), **extra))
        return session_id

    def register(self, *, email: str, password: str, name: str, now: Optional[datetime] = None) -> SessionGrant:
        now = now or now_utc()
        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        name = require_non_empty(name, "Name")

        if self._users.get_by_email(email):
            raise ConflictError("User already exists")

        # Self-registered users start unassigned; an admin picks them up later.
        user = User(
            user_id=generate_id(),
            email=email,
            password_hash=generate_password_hash(password),
            role=Role.AGENT,
            name=name,
        )
        self._users.save(user)
        session_id = self._open_session(user, now=now)
        return SessionGrant(session_id=session_id, user=user.to_public_dict())

    def login(self, *, email: str, password: str, now: Optional[datetime] = None) -> SessionGrant:
        if not isinstance(email, str) or not isinstance(password, str):
            raise AuthenticationError(INVALID_CREDENTIALS)

        user = self._users.get_by_email(email)
        if not user:
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. an empty or legacy unsalted hash
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS)

        session_id = self._open_session(user, now=now or now_utc())
        return SessionGrant(session_id=session_id, user=user.to_public_dict())

    def logout(self, session_id: str) -> None:
        if session_id:
            self._sessions.delete(session_id)

    def verify_session(self, session_id: Optional[str], *, now: Optional[datetime] = None) -> Optional[Session]:
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if not session:
            return None

        if self._ttl and session.created_at:
            if parse_iso_datetime(session.created_at) + self._ttl < (now or now_utc()):
                self._sessions.delete(session_id)
                return None

        return session

    def impersonate(
        self,
        *,
        actor: Session,
        actor_session_id: str,
        target_user_id: str,
        now: Optional[datetime] = None,
    ) -> SessionGrant:
        if not actor.is_superadmin:
            raise AuthenticationError("Unauthorized - Only super admin can impersonate")

        target = self._users.get_by_id(require_non_empty(target_user_id, "userId"))
        if not target:
            raise NotFoundError("User not found")

        session_id = self._open_session(
            target,
            now=now or now_utc(),
            is_impersonating=True,
            original_session_id=actor_session_id,
            original_user_id=actor.user_id,
        )
        logger.info("User %s started impersonating %s", actor.user_id, target.user_id)

        user = target.to_public_dict()
        user["isImpersonating"] = True
        return SessionGrant(session_id=session_id, user=user)

    def exit_impersonation(self, *, session: Session, session_id: str) -> SessionGrant:
        if not session.is_impersonating or not session.original_session_id:
            raise ValidationError("Not impersonating")

        original = self._sessions.get(session.original_session_id)
        if not original:
            raise NotFoundError("Original session not found")

        self._sessions.delete(session_id)
        logger.info("User %s stopped impersonating %s", original.user_id, session.user_id)

        original_user = self._users.get_by_id(original.user_id)
        user = original_user.to_public_dict() if original_user else {
            "id": original.user_id,
            "email": original.email,
            "role": original.role.value,
            "name": original.name,
            "team": original.team,
            "assignedTo": original.assigned_to,
        }
        return SessionGrant(session_id=session.original_session_id, user=user)
