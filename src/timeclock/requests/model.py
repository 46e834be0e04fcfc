from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.enums import RequestStatus, TimeChangeType


@dataclass(frozen=True)
class TimeChangeRequest:
    request_id: str
    user_id: str
    user_name: str
    type: TimeChangeType
    date: str
    original_time: Optional[str]
    requested_time: str
    reason: str
    status: RequestStatus
    assigned_to: Optional[str]
    created_at: str
    approved_by: Optional[str] = None
    approved_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeChangeRequest":
        return cls(
            request_id=str(data["id"]),
            user_id=str(data["userId"]),
            user_name=str(data.get("userName") or ""),
            type=TimeChangeType(data["type"]),
            date=str(data["date"]),
            original_time=data.get("originalTime"),
            requested_time=str(data["requestedTime"]),
            reason=str(data.get("reason") or ""),
            status=RequestStatus(data.get("status", RequestStatus.PENDING.value)),
            assigned_to=data.get("assignedTo"),
            created_at=str(data.get("createdAt") or ""),
            approved_by=data.get("approvedBy"),
            approved_at=data.get("approvedAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.request_id,
            "userId": self.user_id,
            "userName": self.user_name,
            "type": self.type.value,
            "date": self.date,
            "originalTime": self.original_time,
            "requestedTime": self.requested_time,
            "reason": self.reason,
            "status": self.status.value,
            "assignedTo": self.assigned_to,
            "createdAt": self.created_at,
        }
        if self.approved_by is not None:
            data["approvedBy"] = self.approved_by
            data["approvedAt"] = self.approved_at
        return data


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    user_id: str
    user_name: str
    start_date: str
    end_date: str
    reason: str
    status: RequestStatus
    assigned_to: Optional[str]
    created_at: str
    approved_by: Optional[str] = None
    approved_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeaveRequest":
        return cls(
            request_id=str(data["id"]),
            user_id=str(data["userId"]),
            user_name=str(data.get("userName") or ""),
            start_date=str(data["startDate"]),
            end_date=str(data["endDate"]),
            reason=str(data.get("reason") or ""),
            status=RequestStatus(data.get("status", RequestStatus.PENDING.value)),
            assigned_to=data.get("assignedTo"),
            created_at=str(data.get("createdAt") or ""),
            approved_by=data.get("approvedBy"),
            approved_at=data.get("approvedAt"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.request_id,
            "userId": self.user_id,
            "userName": self.user_name,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "reason": self.reason,
            "status": self.status.value,
            "assignedTo": self.assigned_to,
            "createdAt": self.created_at,
        }
        if self.approved_by is not None:
            data["approvedBy"] = self.approved_by
            data["approvedAt"] = self.approved_at
        return data
