from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Blueprint, Flask, request
from flask_cors import CORS

from .config import get_settings_module
from .container import build_container, build_store
from .database.bootstrap import apply_schema, list_tables
from .database.seed import ensure_seed_data
from .store.repository import KeyValueStore

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .categories.controller import register as register_categories
from .reports.controller import register as register_reports
from .requests.controller import register as register_requests
from .schedules.controller import register as register_schedules
from .settings.controller import register as register_settings
from .users.controller import register as register_users


def create_app(settings_module: Optional[str] = None, *, store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    db_config = getattr(settings, "DB_CONFIG")
    backend = getattr(settings, "STORE_BACKEND", "mysql")
    api_prefix = getattr(settings, "API_PREFIX", "/api")

    CORS(
        app,
        resources={f"{api_prefix}/*": {"origins": getattr(settings, "CORS_ORIGINS", "*")}},
        allow_headers=["Content-Type", "Authorization"],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        expose_headers=["Content-Length"],
        max_age=600,
    )

    app.logger.info(
        "settings=%s store=%s db=%s@%s:%s/%s",
        settings_module,
        "injected" if store is not None else backend,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if store is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        store = build_store(backend=backend, db_config=db_config)

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        if ensure_seed_data(store, demo=bool(getattr(settings, "SEED_DEMO_DATA", False))):
            app.logger.info("seed data ready")

    container = build_container(
        store=store,
        session_ttl_hours=int(getattr(settings, "SESSION_TTL_HOURS", 0)),
        single_active_break=bool(getattr(settings, "ENFORCE_SINGLE_ACTIVE_BREAK", False)),
    )
    app.extensions["timeclock"] = container

    bp = Blueprint("api", __name__, url_prefix=api_prefix)
    register_auth(bp, container)
    register_users(bp, container)
    register_attendance(bp, container)
    register_requests(bp, container)
    register_settings(bp, container)
    register_schedules(bp, container)
    register_categories(bp, container)
    register_reports(bp, container)
    app.register_blueprint(bp)

    @app.after_request
    def log_request(response):
        app.logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    return app
