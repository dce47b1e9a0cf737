from __future__ import annotations

from typing import Any

from flask import jsonify, request


def read_json() -> dict[str, Any]:
    """Request body as a dict; malformed or non-object bodies count as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def json_error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def server_error():
    return json_error("Internal server error", 500)
