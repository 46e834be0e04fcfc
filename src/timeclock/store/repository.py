from __future__ import annotations

from typing import Any, List, Mapping, Optional, Protocol


class KeyValueStore(Protocol):
    """Flat string-keyed namespace every repository is built on.

    Values are JSON-compatible (dicts, lists, strings). Writes are last-write-wins per key.
    """

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def set_many(self, entries: Mapping[str, Any]) -> None:
        """Write several keys atomically (all or nothing)."""

        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def scan_prefix(self, prefix: str) -> List[Any]:
        """Return values of every key starting with ``prefix``, ordered by key."""

        raise NotImplementedError
