from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.exceptions import NotFoundError, ValidationError
from .insights.controller import register as register_insights
from .reports.controller import register as register_reports
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(
        "settings=%s model=%s demo_data=%s",
        settings_module,
        getattr(settings, "GEMINI_MODEL", "-"),
        bool(getattr(settings, "SEED_DEMO_DATA", False)),
    )
    if not getattr(settings, "GEMINI_API_KEY", ""):
        logger.warning("GEMINI_API_KEY is not set; insights will use the fallback message")

    container = container or build_container(settings=settings)

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    register_insights(app, container)

    return app
