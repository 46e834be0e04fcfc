from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Category:
    """Expense category; visibility follows the owner."""

    category_id: str
    name: str
    owner: str
    created_at: str
    subcategories: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Category":
        return cls(
            category_id=str(data["id"]),
            name=str(data.get("name") or ""),
            owner=str(data.get("owner") or ""),
            created_at=str(data.get("createdAt") or ""),
            subcategories=list(data.get("subcategories") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.category_id,
            "name": self.name,
            "subcategories": list(self.subcategories),
            "owner": self.owner,
            "createdAt": self.created_at,
        }
