from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ..core.constants import ATTENDANCE_PREFIX, BREAK_PREFIX
from ..store.repository import KeyValueStore
from .model import AttendanceRecord, BreakRecord


class AttendanceRepository:
    """Attendance rows keyed ``attendance:<userId>:<YYYY-MM-DD>``.

    Saving a row for a day that already has one overwrites it.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def key(user_id: str, work_date: str) -> str:
        return f"{ATTENDANCE_PREFIX}{user_id}:{work_date}"

    def entry(self, record: AttendanceRecord) -> Tuple[str, Any]:
        """(key, value) pair for composite writes through ``KeyValueStore.set_many``."""
        return self.key(record.user_id, record.date), record.to_dict()

    def get_for_user_and_date(self, user_id: str, work_date: str) -> Optional[AttendanceRecord]:
        data = self._store.get(self.key(user_id, work_date))
        return AttendanceRecord.from_dict(data) if data else None

    def list_for_user(self, user_id: str) -> List[AttendanceRecord]:
        return [AttendanceRecord.from_dict(d) for d in self._store.scan_prefix(f"{ATTENDANCE_PREFIX}{user_id}:")]

    def list_all(self) -> List[AttendanceRecord]:
        return [AttendanceRecord.from_dict(d) for d in self._store.scan_prefix(ATTENDANCE_PREFIX)]

    def save(self, record: AttendanceRecord) -> None:
        key, value = self.entry(record)
        self._store.set(key, value)


class BreakRepository:
    """Append-only break rows keyed ``break:<userId>:<breakId>``."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def key(user_id: str, break_id: str) -> str:
        return f"{BREAK_PREFIX}{user_id}:{break_id}"

    def get(self, user_id: str, break_id: str) -> Optional[BreakRecord]:
        data = self._store.get(self.key(user_id, break_id))
        return BreakRecord.from_dict(data) if data else None

    def list_for_user(self, user_id: str) -> List[BreakRecord]:
        return [BreakRecord.from_dict(d) for d in self._store.scan_prefix(f"{BREAK_PREFIX}{user_id}:")]

    def list_all(self) -> List[BreakRecord]:
        return [BreakRecord.from_dict(d) for d in self._store.scan_prefix(BREAK_PREFIX)]

    def list_active(self) -> List[BreakRecord]:
        return [b for b in self.list_all() if b.is_active]

    def save(self, record: BreakRecord) -> None:
        self._store.set(self.key(record.user_id, record.break_id), record.to_dict())
