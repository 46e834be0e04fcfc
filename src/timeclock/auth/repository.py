from __future__ import annotations

from typing import Optional

from ..core.constants import SESSION_PREFIX
from ..store.repository import KeyValueStore
from .model import Session


class SessionRepository:
    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def key(session_id: str) -> str:
        return f"{SESSION_PREFIX}{session_id}"

    def get(self, session_id: str) -> Optional[Session]:
        data = self._store.get(self.key(session_id))
        return Session.from_dict(data) if data else None

    def save(self, session_id: str, session: Session) -> None:
        self._store.set(self.key(session_id), session.to_dict())

    def delete(self, session_id: str) -> None:
        self._store.delete(self.key(session_id))
