from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, escape_like, fetchall, fetchone
from .repository import KeyValueStore


def _decode(raw: Any) -> Any:
    # mysql-connector may hand JSON columns back as str, bytes or bytearray.
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    return json.loads(raw) if isinstance(raw, str) else raw


class MySQLKeyValueStore(KeyValueStore):
    """KV namespace stored in a single ``kv_store(k, v JSON)`` table."""

    def __init__(self, conn_factory: DatabaseConnection, *, table: str = "kv_store"):
        self._conn_factory = conn_factory
        self._table = table

    def get(self, key: str) -> Optional[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT v FROM {self._table} WHERE k=%s", (key,))
            r = fetchone(cur)
            return _decode(r["v"]) if r else None

    def set(self, key: str, value: Any) -> None:
        self.set_many({key: value})

    def set_many(self, entries: Mapping[str, Any]) -> None:
        if not entries:
            return
        # One connection, one commit: either every row lands or the rollback in db_cursor undoes all.
        with db_cursor(self._conn_factory) as (_, cur):
            for key, value in entries.items():
                cur.execute(
                    f"""
                    INSERT INTO {self._table}(k, v)
                    VALUES(%s, %s)
                    ON DUPLICATE KEY UPDATE v=VALUES(v)
                    """,
                    (key, json.dumps(value)),
                )

    def delete(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self._table} WHERE k=%s", (key,))

    def scan_prefix(self, prefix: str) -> List[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT k, v FROM {self._table} WHERE k LIKE %s ORDER BY k ASC",
                (escape_like(prefix) + "%",),
            )
            return [_decode(r["v"]) for r in fetchall(cur)]
