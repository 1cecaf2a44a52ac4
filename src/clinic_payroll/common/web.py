"""Flask helpers shared by the feature controllers."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import Flask, jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, DomainError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def ok(data: Any = None, status: int = 200):
    payload: dict[str, Any] = {"success": True}
    if data is not None:
        payload["data"] = data
    return jsonify(payload), status


def fail(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def json_body() -> dict[str, Any]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("JSON object body required")
    return body


def current_role() -> Role:
    """Role placed in the session by the identity provider."""
    try:
        return Role(session.get("role"))
    except ValueError:
        raise AuthorizationError("Unknown role") from None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session or "role" not in session:
            return fail("Unauthorized", 401)
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = set(roles)

    def decorator(view):
        @wraps(view)
        @login_required
        def wrapper(*args, **kwargs):
            if current_role() not in allowed:
                return fail("Forbidden", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


admin_required = roles_required(Role.SYSTEM_ADMIN, Role.ADMIN)
system_admin_required = roles_required(Role.SYSTEM_ADMIN)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return fail(str(e), 400)

    @app.errorhandler(AuthorizationError)
    def _authorization(e: AuthorizationError):
        return fail(str(e), 403)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return fail(str(e), 404)

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return fail(str(e), 400)
