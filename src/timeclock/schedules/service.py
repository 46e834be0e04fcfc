from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from ..auth.model import Session
from ..common.datetime_utils import now_utc, require_hhmm, to_iso
from ..common.ids import generate_id
from ..common.validators import require_non_empty, require_string_list
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from .model import Schedule
from .repository import ScheduleRepository


class ScheduleService:
    """CRUD over schedule templates: managers read, the super admin writes."""

    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    @staticmethod
    def _fields(payload: Mapping[str, Any], *, partial: bool) -> Dict[str, Any]:
        if not isinstance(payload, Mapping):
            raise ValidationError("Schedule must be an object")

        out: Dict[str, Any] = {}
        if "name" in payload or not partial:
            out["name"] = require_non_empty(payload.get("name"), "Name")
        for f in ("start_time", "end_time"):
            if f in payload:
                out[f] = require_hhmm(payload.get(f), f)
        for f in ("break_types", "activities"):
            if f in payload:
                out[f] = require_string_list(payload.get(f) or [], f)
        return out

    def list(self, *, actor: Session) -> List[Dict[str, Any]]:
        if not actor.is_manager:
            raise AuthenticationError("Unauthorized")
        return [s.to_dict() for s in self._schedules.list_all()]

    def create(self, *, actor: Session, payload: Mapping[str, Any], now: Optional[datetime] = None) -> Schedule:
        if not actor.is_superadmin:
            raise AuthenticationError("Unauthorized")

        schedule = Schedule(
            schedule_id=generate_id(),
            created_at=to_iso(now or now_utc()),
            **self._fields(payload, partial=False),
        )
        self._schedules.save(schedule)
        return schedule

    def update(
        self,
        *,
        actor: Session,
        schedule_id: str,
        payload: Mapping[str, Any],
        now: Optional[datetime] = None,
    ) -> Schedule:
        if not actor.is_superadmin:
            raise AuthenticationError("Unauthorized")

        existing = self._schedules.get(schedule_id)
        if not existing:
            raise NotFoundError("Schedule not found")

        schedule = replace(existing, updated_at=to_iso(now or now_utc()), **self._fields(payload, partial=True))
        self._schedules.save(schedule)
        return schedule

    def delete(self, *, actor: Session, schedule_id: str) -> None:
        if not actor.is_superadmin:
            raise AuthenticationError("Unauthorized")

        if not self._schedules.delete(schedule_id):
            raise NotFoundError("Schedule not found")
