from __future__ import annotations

from typing import List, Sequence

from ..core.constants import SETTINGS_ACTIVITIES_KEY, SETTINGS_BREAK_TYPES_KEY
from ..store.repository import KeyValueStore


class SettingsRepository:
    """Two global ordered vocabularies; writes replace the whole list."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get_break_types(self) -> List[str]:
        return list(self._store.get(SETTINGS_BREAK_TYPES_KEY) or [])

    def set_break_types(self, values: Sequence[str]) -> None:
        self._store.set(SETTINGS_BREAK_TYPES_KEY, list(values))

    def get_activities(self) -> List[str]:
        return list(self._store.get(SETTINGS_ACTIVITIES_KEY) or [])

    def set_activities(self, values: Sequence[str]) -> None:
        self._store.set(SETTINGS_ACTIVITIES_KEY, list(values))
