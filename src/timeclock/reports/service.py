from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..attendance.model import AttendanceRecord, BreakRecord
from ..attendance.repository import AttendanceRepository, BreakRepository
from ..auth.model import Session
from ..common.datetime_utils import date_key, hours_between, now_utc, parse_iso_datetime
from ..core.enums import PresenceStatus, Role
from ..core.exceptions import AuthenticationError
from ..users.model import User
from ..users.repository import UserRepository
from .model import AgentLiveStatus, MonthSummary, TodaySummary


def presence_for(attendance: Optional[AttendanceRecord], active_break: Optional[BreakRecord]) -> PresenceStatus:
    """on-break > logged-in > offline."""
    if active_break:
        return PresenceStatus.ON_BREAK
    if attendance and attendance.is_open:
        return PresenceStatus.LOGGED_IN
    return PresenceStatus.OFFLINE


class ReportService:
    """Live dashboards, recomputed from full prefix scans on every call."""

    def __init__(self, users: UserRepository, attendance: AttendanceRepository, breaks: BreakRepository):
        self._users = users
        self._attendance = attendance
        self._breaks = breaks

    def live_status(self, *, actor: Session, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Organisation-wide view (super admin)."""
        if not actor.is_superadmin:
            raise AuthenticationError("Unauthorized")

        agents = self._users.list_by_role(Role.AGENT)
        payload = self._build(agents, now=now or now_utc(), include_team=True)
        payload["teams"] = sorted({a.team for a in agents if a.team})
        return payload

    def team_live_status(self, *, actor: Session, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Admins see their assigned agents; the super admin sees all agents."""
        if not actor.is_manager:
            raise AuthenticationError("Unauthorized")

        agents = self._users.list_by_role(Role.AGENT)
        if actor.role == Role.ADMIN:
            agents = [a for a in agents if a.assigned_to == actor.user_id]
        return self._build(agents, now=now or now_utc(), include_team=False)

    def _build(self, agents: List[User], *, now: datetime, include_team: bool) -> Dict[str, Any]:
        agent_ids = {a.user_id for a in agents}
        today = date_key(now)
        month = today[:7]

        records = [r for r in self._attendance.list_all() if r.user_id in agent_ids]
        today_records = {r.user_id: r for r in records if r.date == today}
        month_records = [r for r in records if r.date.startswith(month)]

        active_breaks: Dict[str, BreakRecord] = {}
        on_break = 0
        for b in self._breaks.list_active():
            if b.user_id in agent_ids:
                on_break += 1
                active_breaks.setdefault(b.user_id, b)

        return {
            "todaySummary": self._today_summary(agents, list(today_records.values()), on_break, now).to_dict(),
            "monthSummary": self._month_summary(agents, month_records).to_dict(),
            "liveStatus": [
                self._agent_status(a, today_records.get(a.user_id), active_breaks.get(a.user_id), now).to_dict(
                    include_team=include_team
                )
                for a in agents
            ],
        }

    @staticmethod
    def _today_summary(
        agents: List[User],
        records: List[AttendanceRecord],
        on_break: int,
        now: datetime,
    ) -> TodaySummary:
        total = sum(hours_between(r.login_time, r.logout_time, now=now) for r in records if r.login_time)
        return TodaySummary(
            total_agents=len(agents),
            logged_in=sum(1 for r in records if r.is_open),
            on_break=on_break,
            avg_hours=total / len(records) if records else 0.0,
        )

    @staticmethod
    def _month_summary(agents: List[User], records: List[AttendanceRecord]) -> MonthSummary:
        total_days = len({r.date for r in records})
        total_hours = sum(
            hours_between(r.login_time, r.logout_time)
            for r in records
            if r.login_time and r.logout_time
        )
        avg_attendance = 0
        if agents and total_days:
            # .5 rounds up
            avg_attendance = int(math.floor(len(records) / (len(agents) * total_days) * 100 + 0.5))
        return MonthSummary(
            total_days=total_days,
            avg_attendance=avg_attendance,
            total_hours=total_hours,
            avg_hours_per_day=total_hours / len(records) if records else 0.0,
        )

    @staticmethod
    def _agent_status(
        agent: User,
        attendance: Optional[AttendanceRecord],
        active_break: Optional[BreakRecord],
        now: datetime,
    ) -> AgentLiveStatus:
        hours = 0.0
        login_time = None
        if attendance and attendance.login_time:
            hours = hours_between(attendance.login_time, attendance.logout_time, now=now)
            login_time = parse_iso_datetime(attendance.login_time).strftime("%H:%M:%S")

        return AgentLiveStatus(
            user_id=agent.user_id,
            name=agent.name,
            team=agent.team,
            status=presence_for(attendance, active_break),
            activity=attendance.activity if attendance else None,
            login_time=login_time,
            hours_today=hours,
        )
