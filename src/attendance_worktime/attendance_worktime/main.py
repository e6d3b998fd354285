from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.settings import load_engine_settings


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Raises InvalidConfiguration before serving anything.
    engine_settings = load_engine_settings(settings)
    container = build_container(db_config=getattr(settings, "DB_CONFIG"), engine_settings=engine_settings)

    if app.config["DEBUG"]:
        logging.getLogger(__name__).info(
            "settings=%s db=%s tz=%s",
            settings_module,
            container.conn.config.describe(),
            engine_settings.timezone_name or f"UTC{engine_settings.utc_offset_minutes:+d}min",
        )

    register_attendance(app, container)

    return app
