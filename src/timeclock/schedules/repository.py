from __future__ import annotations

from typing import List, Optional

from ..core.constants import SCHEDULE_PREFIX
from ..store.repository import KeyValueStore
from .model import Schedule


class ScheduleRepository:
    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def key(schedule_id: str) -> str:
        return f"{SCHEDULE_PREFIX}{schedule_id}"

    def get(self, schedule_id: str) -> Optional[Schedule]:
        data = self._store.get(self.key(schedule_id))
        return Schedule.from_dict(data) if data else None

    def list_all(self) -> List[Schedule]:
        return [Schedule.from_dict(d) for d in self._store.scan_prefix(SCHEDULE_PREFIX)]

    def save(self, schedule: Schedule) -> None:
        self._store.set(self.key(schedule.schedule_id), schedule.to_dict())

    def delete(self, schedule_id: str) -> bool:
        if self._store.get(self.key(schedule_id)) is None:
            return False
        self._store.delete(self.key(schedule_id))
        return True
