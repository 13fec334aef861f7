from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .common.web import EXTENSION_KEY
from .config import get_settings_module
from .container import build_container
from .core.constants import DEFAULT_FACULTY_ID, DEFAULT_SESSION_TTL_MINUTES
from .attendance.controller import register as register_attendance
from .marks.controller import register as register_marks
from .subjects.controller import register as register_subjects
from .timetable.controller import register as register_timetable
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = dict(getattr(settings, "DB_CONFIG"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_FACULTY_ID"] = getattr(settings, "DEFAULT_FACULTY_ID", DEFAULT_FACULTY_ID)

    use_database = bool(getattr(settings, "USE_DATABASE", True))
    logger.info(
        "settings=%s db=%s@%s:%s/%s use_database=%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
        use_database,
    )

    container = build_container(
        db_config=db_config,
        use_database=use_database,
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
        admin_password=str(getattr(settings, "DEFAULT_ADMIN_PASSWORD", "admin123")),
        session_ttl_minutes=int(getattr(settings, "SESSION_TTL_MINUTES", DEFAULT_SESSION_TTL_MINUTES)),
    )
    app.extensions[EXTENSION_KEY] = container
    app.config["STORAGE_MODE"] = container.mode.value

    register_users(app, container)
    register_subjects(app, container)
    register_timetable(app, container)
    register_attendance(app, container)
    register_marks(app, container)

    return app
