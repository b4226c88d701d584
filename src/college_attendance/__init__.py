"""College attendance management.

Feature packages (users, roster, subjects, attendance, recovery) each hold a
model, a repository interface with a key-value implementation, a service and
a thin Flask controller.
"""
from __future__ import annotations

import importlib
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.web import EXTENSION_KEY
from .container import Container, build_container, build_store, build_verifier
from .core.enums import PersistenceLifetime
from .recovery.controller import register as register_recovery
from .roster.controller import register as register_roster
from .seed import seed_demo_data
from .settings import get_settings_module
from .storage.bootstrap import ensure_schema, reset_session_keys
from .subjects.controller import register as register_subjects
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file: str = "") -> None:
    root = logging.getLogger("college_attendance")
    root.setLevel(level.upper())
    if root.handlers:
        return

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    stream = logging.StreamHandler()
    stream.setFormatter(formatter)
    root.addHandler(stream)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=10)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FILE", ""))
    logger.info("settings=%s", settings_module)

    if container is None:
        store, conn = build_store(
            backend=getattr(settings, "STORE_BACKEND", "memory"),
            db_config=getattr(settings, "DB_CONFIG", None),
            namespace=getattr(settings, "STORE_NAMESPACE", "college_attendance"),
        )
        if conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_schema(conn)

        verifier = build_verifier(
            backend=getattr(settings, "CREDENTIALS_BACKEND", "static"),
            accounts=getattr(settings, "ACCOUNTS", []),
        )
        container = build_container(store=store, verifier=verifier)

    lifetime = PersistenceLifetime(getattr(settings, "PERSISTENCE_LIFETIME", PersistenceLifetime.DURABLE.value))
    if lifetime == PersistenceLifetime.SESSION:
        reset_session_keys(container.store)

    if bool(getattr(settings, "AUTO_SEED", False)):
        seed_demo_data(container.roster_service, container.subject_service)

    app.extensions[EXTENSION_KEY] = container

    register_users(app, container)
    register_roster(app, container)
    register_subjects(app, container)
    register_attendance(app, container)
    register_recovery(app, container)

    return app
