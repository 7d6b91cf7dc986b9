from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import BACKEND_MEMORY, build_container
from .core.constants import DEFAULT_SESSION_HOURS
from .database.bootstrap import apply_schema, ensure_demo_employees, ensure_demo_users, list_tables
from .common.web import register_error_handlers
from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .employees.controller import register as register_employees
from .leaves.controller import register as register_leaves
from .reminders.controller import register as register_reminders
from .tasks.controller import register as register_tasks

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"

_SETTING_NAMES = (
    "SECRET_KEY",
    "DB_CONFIG",
    "DEBUG",
    "TESTING",
    "STORAGE_BACKEND",
    "AUTO_INIT_DB",
    "AUTO_SEED_DB",
    "SESSION_HOURS",
    "LOG_LEVEL",
)


def load_settings(overrides: Optional[dict] = None) -> dict:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name, None) for name in _SETTING_NAMES}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def create_app(settings_overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(settings_overrides)

    logging.basicConfig(
        level=str(settings.get("LOG_LEVEL") or "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG"))
    app.config["TESTING"] = bool(settings.get("TESTING"))
    app.permanent_session_lifetime = timedelta(hours=int(settings.get("SESSION_HOURS") or DEFAULT_SESSION_HOURS))

    backend = str(settings.get("STORAGE_BACKEND") or "mysql").lower()
    db_config = settings.get("DB_CONFIG")
    logger.info("settings=%s backend=%s", settings["SETTINGS_MODULE"], backend)

    if backend == BACKEND_MEMORY:
        container = build_container(backend=backend)
        if settings.get("AUTO_SEED_DB"):
            ensure_demo_employees(container.employees_repo)
    else:
        if settings.get("AUTO_INIT_DB"):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if settings.get("AUTO_SEED_DB"):
            ensure_demo_users(db_config)
        container = build_container(db_config=db_config, backend=backend)

    app.extensions["employee_portal"] = container

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_error_handlers(app)
    register_employees(app, container)
    register_attendance(app, container)
    register_tasks(app, container)
    register_leaves(app, container)
    register_reminders(app, container)
    register_analytics(app, container)

    return app
