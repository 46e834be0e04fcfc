from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.constants import UNKNOWN, UNKNOWN_DEVICE_NAME
from ..core.enums import RecordStatus


@dataclass(frozen=True)
class DeviceInfo:
    """Client-reported device plus the caller's IP."""

    name: str = UNKNOWN_DEVICE_NAME
    type: str = UNKNOWN
    os: str = UNKNOWN
    ip_address: str = UNKNOWN


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one clock-in/out row per (user, UTC day)."""

    attendance_id: str
    user_id: str
    date: str
    login_time: Optional[str]
    logout_time: Optional[str]
    activity: Optional[str]
    status: RecordStatus
    device_name: str = UNKNOWN_DEVICE_NAME
    device_type: str = UNKNOWN
    device_os: str = UNKNOWN
    ip_address: str = UNKNOWN

    @property
    def is_open(self) -> bool:
        return bool(self.login_time) and not self.logout_time

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AttendanceRecord":
        return cls(
            attendance_id=str(data.get("id") or ""),
            user_id=str(data["userId"]),
            date=str(data["date"]),
            login_time=data.get("loginTime"),
            logout_time=data.get("logoutTime"),
            activity=data.get("activity"),
            status=RecordStatus(data.get("status", RecordStatus.ACTIVE.value)),
            device_name=data.get("deviceName") or UNKNOWN_DEVICE_NAME,
            device_type=data.get("deviceType") or UNKNOWN,
            device_os=data.get("deviceOS") or UNKNOWN,
            ip_address=data.get("ipAddress") or UNKNOWN,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.attendance_id,
            "userId": self.user_id,
            "date": self.date,
            "loginTime": self.login_time,
            "logoutTime": self.logout_time,
            "activity": self.activity,
            "status": self.status.value,
            "deviceName": self.device_name,
            "deviceType": self.device_type,
            "deviceOS": self.device_os,
            "ipAddress": self.ip_address,
        }


@dataclass(frozen=True)
class BreakRecord:
    """Domain entity: a break, open until ``end_time`` is set."""

    break_id: str
    user_id: str
    break_type: str
    activity: Optional[str]
    start_time: str
    end_time: Optional[str]
    status: RecordStatus
    resume_activity: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == RecordStatus.ACTIVE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BreakRecord":
        return cls(
            break_id=str(data["id"]),
            user_id=str(data["userId"]),
            break_type=str(data.get("breakType") or ""),
            activity=data.get("activity"),
            start_time=str(data["startTime"]),
            end_time=data.get("endTime"),
            status=RecordStatus(data.get("status", RecordStatus.ACTIVE.value)),
            resume_activity=data.get("resumeActivity"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.break_id,
            "userId": self.user_id,
            "breakType": self.break_type,
            "activity": self.activity,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "status": self.status.value,
        }
        if self.resume_activity is not None:
            data["resumeActivity"] = self.resume_activity
        return data
