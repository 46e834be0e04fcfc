"""Backup the key-value namespace.

Note: Writes every ``kv_store`` row to ``backups/timeclock_<ts>.json`` as ``{key: value}``.
Restore by loading the file and passing it to ``store.set_many``.
"""

from __future__ import annotations

import importlib
import json
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from timeclock.config import get_settings_module
from timeclock.database.connection import DBConfig, DatabaseConnection
from timeclock.database.mysql_base import db_cursor, fetchall


def dump_rows(conn_factory: DatabaseConnection, *, table: str = "kv_store") -> dict:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(f"SELECT k, v FROM {table} ORDER BY k ASC")
        rows = fetchall(cur)

    out = {}
    for r in rows:
        v = r["v"]
        if isinstance(v, (bytes, bytearray)):
            v = v.decode("utf-8")
        out[r["k"]] = json.loads(v) if isinstance(v, str) else v
    return out


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    conn_factory = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"timeclock_{ts}.json"

    data = dump_rows(conn_factory)
    out_file.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(data)} keys)")


if __name__ == "__main__":
    main()
