from __future__ import annotations

from typing import List, Optional

from ..core.constants import CATEGORY_PREFIX
from ..store.repository import KeyValueStore
from .model import Category


class CategoryRepository:
    def __init__(self, store: KeyValueStore):
        self._store = store

    @staticmethod
    def key(category_id: str) -> str:
        return f"{CATEGORY_PREFIX}{category_id}"

    def get(self, category_id: str) -> Optional[Category]:
        data = self._store.get(self.key(category_id))
        return Category.from_dict(data) if data else None

    def list_all(self) -> List[Category]:
        return [Category.from_dict(d) for d in self._store.scan_prefix(CATEGORY_PREFIX)]

    def save(self, category: Category) -> None:
        self._store.set(self.key(category.category_id), category.to_dict())

    def delete(self, category_id: str) -> None:
        self._store.delete(self.key(category_id))
