from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import server_error
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/analytics", methods=["GET"], endpoint="analytics")
    def analytics():
        try:
            report = container.analytics_service.build_report()
            return jsonify(report.to_dict())
        except Exception:
            logger.exception("Analytics error")
            return server_error()
