from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..attendance.repository import AttendanceRepository
from ..auth.model import Session
from ..common.datetime_utils import now_utc, require_date, require_datetime, to_iso
from ..common.ids import generate_id
from ..common.validators import require_non_empty
from ..core.enums import RequestStatus, Role, TimeChangeType
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..store.repository import KeyValueStore
from ..users.repository import UserRepository
from .model import LeaveRequest, TimeChangeRequest
from .repository import RequestRepository

logger = logging.getLogger(__name__)


class RequestService:
    """Time-change and leave approval pipelines.

    Both follow ``pending -> approved | rejected``; decided requests cannot be re-opened.
    """

    def __init__(
        self,
        requests: RequestRepository,
        attendance: AttendanceRepository,
        users: UserRepository,
        store: KeyValueStore,
    ):
        self._requests = requests
        self._attendance = attendance
        self._users = users
        self._store = store

    def _owner_of(self, requester: Session) -> Optional[str]:
        user = self._users.get_by_id(requester.user_id)
        if not user:
            raise NotFoundError("User not found")
        return user.assigned_to

    @staticmethod
    def _require_manager(actor: Session) -> None:
        if not actor.is_manager:
            raise AuthenticationError("Unauthorized")

    @staticmethod
    def _require_pending(status: RequestStatus) -> None:
        if status != RequestStatus.PENDING:
            raise ValidationError("Request has already been processed")

    def submit_time_change(
        self,
        *,
        requester: Session,
        change_type: str,
        date: str,
        original_time: Optional[str],
        requested_time: str,
        reason: str,
        now: Optional[datetime] = None,
    ) -> TimeChangeRequest:
        try:
            kind = TimeChangeType(change_type)
        except ValueError:
            raise ValidationError("Type must be one of login, logout, break-start, break-end")

        req = TimeChangeRequest(
            request_id=generate_id(),
            user_id=requester.user_id,
            user_name=requester.name,
            type=kind,
            date=require_date(date, "Date"),
            original_time=require_datetime(original_time, "Original time") if original_time else None,
            requested_time=require_datetime(requested_time, "Requested time"),
            reason=require_non_empty(reason, "Reason"),
            status=RequestStatus.PENDING,
            assigned_to=self._owner_of(requester),
            created_at=to_iso(now or now_utc()),
        )
        self._requests.save_time_change(req)
        return req

    def submit_leave(
        self,
        *,
        requester: Session,
        start_date: str,
        end_date: str,
        reason: str,
        now: Optional[datetime] = None,
    ) -> LeaveRequest:
        start = require_date(start_date, "Start date")
        end = require_date(end_date, "End date")
        if end < start:
            raise ValidationError("End date must be on or after start date")

        req = LeaveRequest(
            request_id=generate_id(),
            user_id=requester.user_id,
            user_name=requester.name,
            start_date=start,
            end_date=end,
            reason=require_non_empty(reason, "Reason"),
            status=RequestStatus.PENDING,
            assigned_to=self._owner_of(requester),
            created_at=to_iso(now or now_utc()),
        )
        self._requests.save_leave(req)
        return req

    def decide_time_change(
        self,
        *,
        actor: Session,
        request_id: str,
        approved: bool,
        now: Optional[datetime] = None,
    ) -> TimeChangeRequest:
        self._require_manager(actor)

        req = self._requests.get_time_change(require_non_empty(request_id, "requestId"))
        if not req:
            raise NotFoundError("Request not found")
        self._require_pending(req.status)

        req = replace(
            req,
            status=RequestStatus.APPROVED if approved else RequestStatus.REJECTED,
            approved_by=actor.user_id,
            approved_at=to_iso(now or now_utc()),
        )
        entries = dict([self._requests.time_entry(req)])

        if approved and req.type in (TimeChangeType.LOGIN, TimeChangeType.LOGOUT):
            record = self._attendance.get_for_user_and_date(req.user_id, req.date)
            if record:
                if req.type == TimeChangeType.LOGIN:
                    record = replace(record, login_time=req.requested_time)
                else:
                    record = replace(record, logout_time=req.requested_time)
                key, value = self._attendance.entry(record)
                entries[key] = value
        elif approved:
            logger.info(
                "Approved %s request %s is recorded only; break records are not adjusted",
                req.type.value,
                req.request_id,
            )

        # Request row and attendance patch land together or not at all.
        self._store.set_many(entries)
        logger.info("Time change %s %s by %s", req.request_id, req.status.value, actor.user_id)
        return req

    def decide_leave(
        self,
        *,
        actor: Session,
        request_id: str,
        approved: bool,
        now: Optional[datetime] = None,
    ) -> LeaveRequest:
        self._require_manager(actor)

        req = self._requests.get_leave(require_non_empty(request_id, "requestId"))
        if not req:
            raise NotFoundError("Request not found")
        self._require_pending(req.status)

        req = replace(
            req,
            status=RequestStatus.APPROVED if approved else RequestStatus.REJECTED,
            approved_by=actor.user_id,
            approved_at=to_iso(now or now_utc()),
        )
        self._requests.save_leave(req)
        logger.info("Leave %s %s by %s", req.request_id, req.status.value, actor.user_id)
        return req

    def list_pending(self, *, actor: Session) -> Dict[str, List[Dict[str, Any]]]:
        time_requests = self._requests.list_time_changes(status=RequestStatus.PENDING)
        leave_requests = self._requests.list_leaves(status=RequestStatus.PENDING)

        if actor.role == Role.ADMIN:
            time_requests = [r for r in time_requests if r.assigned_to == actor.user_id]
            leave_requests = [r for r in leave_requests if r.assigned_to == actor.user_id]
        elif actor.role == Role.AGENT:
            time_requests = [r for r in time_requests if r.user_id == actor.user_id]
            leave_requests = [r for r in leave_requests if r.user_id == actor.user_id]

        return {
            "timeRequests": [r.to_dict() for r in time_requests],
            "leaveRequests": [r.to_dict() for r in leave_requests],
        }
