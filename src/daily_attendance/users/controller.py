from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import MSG_HEALTH, MSG_LOGIN_FAILED, MSG_REGISTER_FAILED
from ..core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _json_object() -> dict:
    data = request.get_json(silent=True)
    # Arrays and scalars carry no named fields.
    return data if isinstance(data, dict) else {}


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"message": MSG_HEALTH})

    @app.route("/register", methods=["POST"], endpoint="register")
    def register_user():
        data = _json_object()
        try:
            user = container.auth_service.register(
                name=data.get("name"),
                email=data.get("email"),
                phone=data.get("phone"),
                department=data.get("department"),
                pin=data.get("pin"),
            )
            return jsonify(
                {
                    "message": f"Welcome aboard, {data.get('name')}! Your account has been created successfully.",
                    "user": {"id": user.user_id, "email": user.email},
                }
            )
        except (ValidationError, DuplicateEmailError) as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Registration failed")
            return jsonify({"error": MSG_REGISTER_FAILED}), 500

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = _json_object()
        try:
            result = container.auth_service.login(email=data.get("email"), pin=data.get("pin"))
            return jsonify({"message": result.message})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except InvalidCredentialsError as e:
            return jsonify({"error": str(e)}), 401
        except Exception:
            logger.exception("Login failed")
            return jsonify({"error": MSG_LOGIN_FAILED}), 500
