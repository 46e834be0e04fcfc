from __future__ import annotations

from typing import List, Optional

from ..core.constants import USER_PREFIX
from ..core.enums import Role
from ..store.repository import KeyValueStore
from .model import User


class UserRepository:
    """Users stored under ``user:<id>``.

    Email lookups are a full prefix scan; the roster is small.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def key(user_id: str) -> str:
        return f"{USER_PREFIX}{user_id}"

    def get_by_id(self, user_id: str) -> Optional[User]:
        data = self._store.get(self.key(user_id))
        return User.from_dict(data) if data else None

    def get_by_email(self, email: str) -> Optional[User]:
        email = (email or "").strip().lower()
        for user in self.list_all():
            if user.email.lower() == email:
                return user
        return None

    def list_all(self) -> List[User]:
        return [User.from_dict(d) for d in self._store.scan_prefix(USER_PREFIX)]

    def list_by_role(self, role: Role) -> List[User]:
        return [u for u in self.list_all() if u.role == role]

    def is_empty(self) -> bool:
        return not self._store.scan_prefix(USER_PREFIX)

    def save(self, user: User) -> None:
        self._store.set(self.key(user.user_id), user.to_dict())
