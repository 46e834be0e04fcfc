from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.enums import MANAGER_ROLES, Role
from ..users.model import User


@dataclass(frozen=True)
class Session:
    """Cached identity behind an opaque bearer token (``session:<id>``)."""

    user_id: str
    email: str
    role: Role
    name: str
    assigned_to: Optional[str] = None
    team: Optional[str] = None
    created_at: Optional[str] = None
    is_impersonating: bool = False
    original_session_id: Optional[str] = None
    original_user_id: Optional[str] = None

    @property
    def is_manager(self) -> bool:
        return self.role in MANAGER_ROLES

    @property
    def is_superadmin(self) -> bool:
        return self.role == Role.SUPERADMIN

    @classmethod
    def for_user(cls, user: User, *, created_at: str, **extra: Any) -> "Session":
        return cls(
            user_id=user.user_id,
            email=user.email,
            role=user.role,
            name=user.name,
            assigned_to=user.assigned_to,
            team=user.team,
            created_at=created_at,
            **extra,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        return cls(
            user_id=str(data["userId"]),
            email=str(data.get("email") or ""),
            role=Role(data["role"]),
            name=str(data.get("name") or ""),
            assigned_to=data.get("assignedTo"),
            team=data.get("team"),
            created_at=data.get("createdAt"),
            is_impersonating=bool(data.get("isImpersonating", False)),
            original_session_id=data.get("originalSessionId"),
            original_user_id=data.get("originalUserId"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "userId": self.user_id,
            "email": self.email,
            "role": self.role.value,
            "name": self.name,
            "assignedTo": self.assigned_to,
            "team": self.team,
            "createdAt": self.created_at,
        }
        if self.is_impersonating:
            data["isImpersonating"] = True
            data["originalSessionId"] = self.original_session_id
            data["originalUserId"] = self.original_user_id
        return data
