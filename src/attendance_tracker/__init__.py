"""Attendance Tracker package.

Organized by feature modules (users, attendance, analytics) with a thin Flask
controller layer over service/repository layers.
"""
from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .common.datetime_utils import parse_hhmm
from .container import Container, build_container
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        backend = getattr(settings, "STORAGE_BACKEND", "memory")
        db_config = getattr(settings, "DB_CONFIG", {})
        logger.info("settings=%s backend=%s", settings_module, backend)
        if backend == "mysql":
            logger.info(
                "db=%s@%s:%s/%s",
                db_config.get("user"), db_config.get("host"), db_config.get("port", 3306), db_config.get("database"),
            )

        container = build_container(
            storage_backend=backend,
            db_config=db_config,
            seed_demo=bool(getattr(settings, "SEED_DEMO_DATA", True)),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
            schema_path=SCHEMA_PATH,
            work_start=parse_hhmm(getattr(settings, "WORK_START_TIME", "09:00")),
        )

    app.extensions["attendance_container"] = container

    register_users(app, container)
    register_attendance(app, container)
    register_analytics(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"success": False, "error": e.description}), e.code

    return app
