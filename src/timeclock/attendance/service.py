from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, Optional

from ..auth.model import Session
from ..common.datetime_utils import date_key, month_key, now_utc, to_iso
from ..common.ids import generate_id
from ..common.validators import require_non_empty
from ..core.enums import RecordStatus, RequestStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..requests.repository import RequestRepository
from .model import AttendanceRecord, BreakRecord, DeviceInfo
from .repository import AttendanceRepository, BreakRepository


class AttendanceService:
    """Clock-in/out, activities and breaks for the current UTC day."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        breaks: BreakRepository,
        requests: RequestRepository,
        *,
        single_active_break: bool = False,
    ):
        self._attendance = attendance
        self._breaks = breaks
        self._requests = requests
        self._single_active_break = bool(single_active_break)

    def clock_in(
        self,
        user_id: str,
        *,
        activity: str,
        device: Optional[DeviceInfo] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        now = now or now_utc()
        device = device or DeviceInfo()
        activity = require_non_empty(activity, "Activity")

        # One row per (user, day): a second clock-in replaces the first, login time included.
        record = AttendanceRecord(
            attendance_id=generate_id(),
            user_id=user_id,
            date=date_key(now),
            login_time=to_iso(now),
            logout_time=None,
            activity=activity,
            status=RecordStatus.ACTIVE,
            device_name=device.name,
            device_type=device.type,
            device_os=device.os,
            ip_address=device.ip_address,
        )
        self._attendance.save(record)
        return record

    def clock_out(self, user_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_utc()

        record = self._attendance.get_for_user_and_date(user_id, date_key(now))
        if not record:
            raise NotFoundError("No active attendance found")

        record = replace(record, logout_time=to_iso(now), status=RecordStatus.COMPLETED)
        self._attendance.save(record)
        return record

    def update_activity(self, user_id: str, *, activity: str, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_utc()
        activity = require_non_empty(activity, "Activity")

        record = self._attendance.get_for_user_and_date(user_id, date_key(now))
        if not record:
            raise NotFoundError("No active attendance found. Please clock in first.")

        record = replace(record, activity=activity)
        self._attendance.save(record)
        return record

    def start_break(
        self,
        user_id: str,
        *,
        break_type: str,
        activity: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> BreakRecord:
        now = now or now_utc()
        break_type = require_non_empty(break_type, "Break type")

        if self._single_active_break and self.get_current_break(user_id):
            raise ValidationError("A break is already active")

        record = BreakRecord(
            break_id=generate_id(),
            user_id=user_id,
            break_type=break_type,
            activity=activity,
            start_time=to_iso(now),
            end_time=None,
            status=RecordStatus.ACTIVE,
        )
        self._breaks.save(record)
        return record

    def end_break(
        self,
        user_id: str,
        *,
        break_id: str,
        activity: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> BreakRecord:
        now = now or now_utc()

        record = self._breaks.get(user_id, require_non_empty(break_id, "breakId"))
        if not record:
            raise NotFoundError("Break not found")

        record = replace(
            record,
            end_time=to_iso(now),
            status=RecordStatus.COMPLETED,
            resume_activity=activity,
        )
        self._breaks.save(record)
        return record

    def get_current_attendance(self, user_id: str, *, now: Optional[datetime] = None) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_user_and_date(user_id, date_key(now or now_utc()))

    def get_current_break(self, user_id: str) -> Optional[BreakRecord]:
        for record in self._breaks.list_for_user(user_id):
            if record.is_active:
                return record
        return None

    def get_month(self, *, actor: Session, user_id: str, year: int, month: int) -> Dict[str, Any]:
        """Calendar view: month attendance, every break of the user, approved leaves."""
        if actor.role == Role.AGENT and actor.user_id != user_id:
            raise AuthorizationError("Unauthorized")

        if not 1 <= int(month) <= 12:
            raise ValidationError("Month must be between 1 and 12")

        prefix = month_key(year, month)
        attendance = [r for r in self._attendance.list_for_user(user_id) if r.date.startswith(prefix)]
        attendance.sort(key=lambda r: r.date)

        return {
            "attendance": [r.to_dict() for r in attendance],
            "breaks": [b.to_dict() for b in self._breaks.list_for_user(user_id)],
            "leaves": [
                r.to_dict() for r in self._requests.list_leaves(status=RequestStatus.APPROVED, user_id=user_id)
            ],
        }
