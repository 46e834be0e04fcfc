from __future__ import annotations

import copy
import threading
from typing import Any, Dict, List, Mapping, Optional

from .repository import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store for tests and ``STORE_BACKEND=memory`` dev runs.

    Values are deep-copied in and out so callers never share mutable state with the store.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = {}
        self._lock = threading.Lock()
        if initial:
            self.set_many(initial)

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    def set_many(self, entries: Mapping[str, Any]) -> None:
        staged = {k: copy.deepcopy(v) for k, v in entries.items()}
        with self._lock:
            self._data.update(staged)

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def scan_prefix(self, prefix: str) -> List[Any]:
        with self._lock:
            return [copy.deepcopy(self._data[k]) for k in sorted(self._data) if k.startswith(prefix)]

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(self._data)
