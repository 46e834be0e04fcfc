from __future__ import annotations

import mysql.connector
import pytest

from timeclock.database.bootstrap import apply_schema, list_tables

DB_CONFIG = {"host": "db", "port": 3307, "user": "app", "password": "pw", "database": "timeclock_test"}


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn

    def execute(self, sql, params=None):
        self._conn.executed.append(" ".join(sql.split()))

    def fetchall(self):
        return [("kv_store",)]


class FakeConnection:
    def __init__(self, kwargs):
        self.kwargs = kwargs
        self.executed = []
        self.commits = 0
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def close(self):
        self.closed = True


@pytest.fixture
def connections(monkeypatch):
    opened = []

    def fake_connect(**kwargs):
        conn = FakeConnection(kwargs)
        opened.append(conn)
        return conn

    monkeypatch.setattr(mysql.connector, "connect", fake_connect)
    return opened


def test_apply_schema_creates_database_then_table(connections):
    apply_schema(DB_CONFIG)

    server, db = connections
    assert "database" not in server.kwargs
    assert server.kwargs == {"host": "db", "port": 3307, "user": "app", "password": "pw"}
    assert server.executed[0].startswith("CREATE DATABASE IF NOT EXISTS `timeclock_test`")

    assert db.kwargs["database"] == "timeclock_test"
    assert db.executed[0].startswith("CREATE TABLE IF NOT EXISTS kv_store")
    assert all(c.commits == 1 and c.closed for c in connections)


def test_list_tables(connections):
    assert list_tables(DB_CONFIG) == ["kv_store"]
    assert connections[0].kwargs["database"] == "timeclock_test"
    assert connections[0].closed
