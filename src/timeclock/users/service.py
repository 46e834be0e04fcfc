from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional

from werkzeug.security import generate_password_hash

from ..auth.model import Session
from ..common.ids import generate_id
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from .model import User
from .repository import UserRepository


class UserService:
    """Use case: manage users and the team directory."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_user(
        self,
        *,
        actor: Session,
        email: str,
        password: str,
        name: str,
        role: str,
        assigned_to: Optional[str] = None,
        team: Optional[str] = None,
    ) -> User:
        if actor.role == Role.AGENT:
            raise AuthorizationError("Agents cannot create users")

        try:
            new_role = Role(role or Role.AGENT.value)
        except ValueError:
            raise ValidationError("Role is not valid")

        if actor.role == Role.ADMIN and new_role != Role.AGENT:
            raise AuthorizationError("Admins can only create agents")
        if new_role == Role.SUPERADMIN:
            raise AuthorizationError("Cannot create another super admin")

        email = require_email(email)
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        name = require_non_empty(name, "Name")

        if self._users.get_by_email(email):
            raise ConflictError("User already exists")

        owner: Optional[str] = None
        if new_role == Role.AGENT:
            owner = (assigned_to or "").strip() or None
            if actor.role == Role.ADMIN and not owner:
                owner = actor.user_id
            if owner and not self._users.get_by_id(owner):
                raise ValidationError("Assigned admin does not exist")

        user = User(
            user_id=generate_id(),
            email=email,
            password_hash=generate_password_hash(password),
            role=new_role,
            name=name,
            team=(team or "").strip() or None,
            assigned_to=owner,
        )
        self._users.save(user)
        return user

    def reset_password(self, *, actor: Session, user_id: str, new_password: str) -> None:
        if not actor.is_superadmin:
            raise AuthenticationError("Unauthorized")

        user = self._users.get_by_id(require_non_empty(user_id, "userId"))
        if not user:
            raise NotFoundError("User not found")

        require_min_length(new_password, "Password", MIN_PASSWORD_LENGTH)
        self._users.save(replace(user, password_hash=generate_password_hash(new_password)))

    def list_users(self, *, actor: Session) -> List[Dict[str, Any]]:
        users = self._users.list_all()
        if actor.role == Role.ADMIN:
            users = [u for u in users if u.assigned_to == actor.user_id or u.user_id == actor.user_id]
        elif actor.role == Role.AGENT:
            users = [u for u in users if u.user_id == actor.user_id]
        return [u.to_public_dict() for u in users]

    def list_teams(self) -> List[str]:
        teams: List[str] = []
        for user in self._users.list_all():
            if user.team and user.team not in teams:
                teams.append(user.team)
        return teams
