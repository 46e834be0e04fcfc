from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.enums import PresenceStatus


@dataclass(frozen=True)
class TodaySummary:
    total_agents: int
    logged_in: int
    on_break: int
    avg_hours: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalAgents": self.total_agents,
            "loggedIn": self.logged_in,
            "onBreak": self.on_break,
            "avgHours": f"{self.avg_hours:.1f}",
        }


@dataclass(frozen=True)
class MonthSummary:
    """Month roll-up.

    ``avg_attendance`` is records / (agents x distinct days) and is not a true
    attendance rate; it can exceed 100.
    """

    total_days: int
    avg_attendance: int
    total_hours: float
    avg_hours_per_day: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalDays": self.total_days,
            "avgAttendance": self.avg_attendance,
            "totalHours": f"{self.total_hours:.0f}",
            "avgHoursPerDay": f"{self.avg_hours_per_day:.1f}",
        }


@dataclass(frozen=True)
class AgentLiveStatus:
    user_id: str
    name: str
    team: Optional[str]
    status: PresenceStatus
    activity: Optional[str]
    login_time: Optional[str]
    hours_today: float

    def to_dict(self, *, include_team: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "userId": self.user_id,
            "name": self.name,
            "status": self.status.value,
            "activity": self.activity,
            "loginTime": self.login_time,
            "hoursToday": f"{self.hours_today:.1f}",
        }
        if include_team:
            data["team"] = self.team
        return data
