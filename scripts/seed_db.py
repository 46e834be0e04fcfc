from __future__ import annotations

import argparse
import importlib

from dotenv import load_dotenv

from timeclock.config import get_settings_module
from timeclock.container import build_store
from timeclock.database.seed import ensure_seed_data


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the super admin, default settings and optional demo data.")
    parser.add_argument("--demo", action="store_true", help="also create demo admins, agents and history")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    store = build_store(backend=getattr(settings, "STORE_BACKEND", "mysql"), db_config=db_config)
    demo = args.demo or bool(getattr(settings, "SEED_DEMO_DATA", False))

    if ensure_seed_data(store, demo=demo):
        print(
            "OK: Seeded store -> "
            f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
            f" (demo={demo})"
        )
    else:
        print("SKIP: users already exist, nothing seeded")


if __name__ == "__main__":
    main()
