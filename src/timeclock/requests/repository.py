from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ..core.constants import LEAVE_REQUEST_PREFIX, TIME_REQUEST_PREFIX
from ..core.enums import RequestStatus
from ..store.repository import KeyValueStore
from .model import LeaveRequest, TimeChangeRequest


class RequestRepository:
    """Both approval pipelines: ``request:time:<id>`` and ``request:leave:<id>``."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    # Time change requests
    @staticmethod
    def time_key(request_id: str) -> str:
        return f"{TIME_REQUEST_PREFIX}{request_id}"

    def time_entry(self, req: TimeChangeRequest) -> Tuple[str, Any]:
        return self.time_key(req.request_id), req.to_dict()

    def get_time_change(self, request_id: str) -> Optional[TimeChangeRequest]:
        data = self._store.get(self.time_key(request_id))
        return TimeChangeRequest.from_dict(data) if data else None

    def list_time_changes(
        self,
        *,
        status: Optional[RequestStatus] = None,
        user_id: Optional[str] = None,
    ) -> List[TimeChangeRequest]:
        rows = [TimeChangeRequest.from_dict(d) for d in self._store.scan_prefix(TIME_REQUEST_PREFIX)]
        if status is not None:
            rows = [r for r in rows if r.status == status]
        if user_id is not None:
            rows = [r for r in rows if r.user_id == user_id]
        return sorted(rows, key=lambda r: r.created_at)

    def save_time_change(self, req: TimeChangeRequest) -> None:
        key, value = self.time_entry(req)
        self._store.set(key, value)

    # Leave requests
    @staticmethod
    def leave_key(request_id: str) -> str:
        return f"{LEAVE_REQUEST_PREFIX}{request_id}"

    def get_leave(self, request_id: str) -> Optional[LeaveRequest]:
        data = self._store.get(self.leave_key(request_id))
        return LeaveRequest.from_dict(data) if data else None

    def list_leaves(
        self,
        *,
        status: Optional[RequestStatus] = None,
        user_id: Optional[str] = None,
    ) -> List[LeaveRequest]:
        rows = [LeaveRequest.from_dict(d) for d in self._store.scan_prefix(LEAVE_REQUEST_PREFIX)]
        if status is not None:
            rows = [r for r in rows if r.status == status]
        if user_id is not None:
            rows = [r for r in rows if r.user_id == user_id]
        return sorted(rows, key=lambda r: r.created_at)

    def save_leave(self, req: LeaveRequest) -> None:
        self._store.set(self.leave_key(req.request_id), req.to_dict())
