from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Schedule:
    """Named work schedule template (hours plus allowed break types and activities)."""

    schedule_id: str
    name: str
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    break_types: List[str] = field(default_factory=list)
    activities: List[str] = field(default_factory=list)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Schedule":
        return cls(
            schedule_id=str(data["id"]),
            name=str(data.get("name") or ""),
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
            break_types=list(data.get("break_types") or []),
            activities=list(data.get("activities") or []),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.schedule_id,
            "name": self.name,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "break_types": list(self.break_types),
            "activities": list(self.activities),
            "createdAt": self.created_at,
        }
        if self.updated_at:
            data["updatedAt"] = self.updated_at
        return data
