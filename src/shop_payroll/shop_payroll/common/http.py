"""Shared helpers for the JSON controllers."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..access import Actor
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from .datetime_utils import parse_range
from .validators import require_int

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        for cls, status in _STATUS_BY_ERROR:
            if isinstance(e, cls):
                return error_response(str(e), status)
        return error_response(str(e), 400)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        # Unknown route, wrong method...: keep their HTTP status.
        if isinstance(e, HTTPException):
            return error_response(e.description or e.name, e.code or 500)

        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return error_response(f"Internal error: {e}", 500)
        return error_response("Internal server error", 500)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "admin_id" not in session:
            return error_response("Not authorized, please log in", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "admin_id" not in session:
            return error_response("Not authorized, please log in", 401)
        if session.get("role") != Role.ADMIN.value:
            return error_response("Admin only route", 403)
        return view(*args, **kwargs)

    return wrapper


def current_actor() -> Actor:
    return Actor(admin_id=int(session["admin_id"]), role=Role(session["role"]))


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")
    return data


def query_int(name: str) -> Optional[int]:
    value = request.args.get(name)
    if value is None or value == "":
        return None
    return require_int(value, name)


def query_range(required: bool = True) -> tuple[Any, Any]:
    """Read ?from=&to= as an inclusive datetime range."""
    from_s = request.args.get("from")
    to_s = request.args.get("to")
    if not from_s or not to_s:
        if required:
            raise ValidationError("from and to query params required")
        if not from_s and not to_s:
            return None, None
        raise ValidationError("from and to must be given together")
    return parse_range(from_s, to_s)
