from __future__ import annotations

import json

import pytest

from timeclock.store.mysql_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.closed = False

    def execute(self, sql, params=None):
        if self._conn.fail_on and self._conn.fail_on in sql:
            raise RuntimeError("boom")
        self._conn.executed.append((" ".join(sql.split()), params))

    def fetchone(self):
        return self._conn.rows[0] if self._conn.rows else None

    def fetchall(self):
        return list(self._conn.rows)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, rows=None, fail_on=None):
        self.rows = rows or []
        self.fail_on = fail_on
        self.executed = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self, dictionary=False):
        assert dictionary is True
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.connections = []

    def connect(self, *, with_database=True):
        conn = FakeConnection(**self.kwargs)
        self.connections.append(conn)
        return conn


def test_scan_prefix_escapes_like_wildcards():
    factory = FakeConnFactory(rows=[{"k": "break:1714_ab:1", "v": '{"id": "1"}'}])
    store = MySQLKeyValueStore(factory)

    assert store.scan_prefix("break:1714_ab:") == [{"id": "1"}]

    sql, params = factory.connections[0].executed[0]
    assert "LIKE %s" in sql
    assert "ORDER BY k" in sql
    assert params == ("break:1714\\_ab:%",)


def test_get_decodes_bytes_json():
    factory = FakeConnFactory(rows=[{"v": b'{"email": "a@example.com"}'}])
    store = MySQLKeyValueStore(factory)

    assert store.get("user:1") == {"email": "a@example.com"}


def test_get_missing_returns_none():
    store = MySQLKeyValueStore(FakeConnFactory(rows=[]))
    assert store.get("user:missing") is None


def test_set_many_runs_in_one_transaction():
    factory = FakeConnFactory()
    store = MySQLKeyValueStore(factory)

    store.set_many({"request:time:1": {"status": "approved"}, "attendance:u:2024-05-01": {"loginTime": "x"}})

    assert len(factory.connections) == 1
    conn = factory.connections[0]
    assert len(conn.executed) == 2
    assert conn.commits == 1
    assert conn.rollbacks == 0
    assert conn.closed
    assert json.loads(conn.executed[0][1][1]) == {"status": "approved"}


def test_set_many_rolls_back_on_failure():
    factory = FakeConnFactory(fail_on="INSERT")
    store = MySQLKeyValueStore(factory)

    with pytest.raises(RuntimeError):
        store.set_many({"a": 1, "b": 2})

    conn = factory.connections[0]
    assert conn.commits == 0
    assert conn.rollbacks == 1
    assert conn.closed


def test_set_many_with_nothing_to_write_skips_the_database():
    factory = FakeConnFactory()
    MySQLKeyValueStore(factory).set_many({})
    assert factory.connections == []


def test_delete_issues_delete_by_key():
    factory = FakeConnFactory()
    MySQLKeyValueStore(factory).delete("session:abc")

    sql, params = factory.connections[0].executed[0]
    assert sql.startswith("DELETE FROM kv_store")
    assert params == ("session:abc",)
