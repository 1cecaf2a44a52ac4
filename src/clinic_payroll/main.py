from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.web import register_error_handlers
from .container import build_container, build_store
from .logging_utils import setup_logging
from .payroll.controller import register as register_payroll
from .settings.controller import register as register_settings
from .staff.controller import register as register_staff
from .storage.bootstrap import apply_schema, ensure_default_settings
from .storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


def create_app(*, store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    setup_logging(
        json_output=bool(getattr(settings, "LOG_JSON", False)),
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
    )

    if store is None:
        backend = str(getattr(settings, "STORAGE_BACKEND", "mysql"))
        if backend == "mysql" and getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(db_config)
        store = build_store(backend=backend, db_config=db_config)
        logger.info("storage ready: settings=%s backend=%s", settings_module, backend)

    if getattr(settings, "AUTO_SEED_DB", False):
        ensure_default_settings(store)

    container = build_container(store=store)
    app.extensions["clinic_payroll"] = container

    register_error_handlers(app)
    register_staff(app, container)
    register_attendance(app, container)
    register_settings(app, container)
    register_payroll(app, container)

    return app
