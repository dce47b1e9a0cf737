from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.http import json_error, read_json, server_error
from ..core.exceptions import AuthenticationError, NotFoundError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        try:
            data = read_json()
            email = data.get("email")
            password = data.get("password")
            if not email or not password:
                return json_error("Email and password are required", 400)

            user = container.auth_service.authenticate(str(email), str(password))
            return jsonify({"success": True, "user": user.to_public_dict()})
        except AuthenticationError as e:
            return json_error(str(e), 401)
        except Exception:
            logger.exception("Login error")
            return server_error()

    @app.route("/api/auth/me", methods=["GET"], endpoint="current_user")
    def current_user():
        try:
            user_id = request.args.get("userId")
            if not user_id:
                return json_error("User ID is required", 400)

            user = container.auth_service.get_current_user(user_id)
            return jsonify({"user": user.to_public_dict()})
        except NotFoundError as e:
            return json_error(str(e), 404)
        except Exception:
            logger.exception("Get current user error")
            return server_error()

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    def list_users():
        try:
            users = container.user_service.list_users()
            return jsonify({"users": [u.to_public_dict() for u in users]})
        except Exception:
            logger.exception("Get users error")
            return server_error()
