from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object; ``to_dict`` is the stored shape, ``to_public_dict`` what the API returns.
    """

    user_id: str
    email: str
    password_hash: str
    role: Role
    name: str
    team: Optional[str] = None
    assigned_to: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            user_id=str(data["id"]),
            email=str(data["email"]),
            password_hash=str(data.get("passwordHash") or ""),
            role=Role(data.get("role", Role.AGENT.value)),
            name=str(data.get("name") or ""),
            team=data.get("team"),
            assigned_to=data.get("assignedTo"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = self.to_public_dict()
        data["passwordHash"] = self.password_hash
        return data

    def to_public_dict(self) -> Dict[str, Any]:
        return {
            "id": self.user_id,
            "email": self.email,
            "role": self.role.value,
            "name": self.name,
            "team": self.team,
            "assignedTo": self.assigned_to,
        }
