"""Flask glue shared by every controller: session identity, guards, error mapping."""
from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request, session
from werkzeug.exceptions import HTTPException

from ..access.policy import Caller
from ..core.enums import Role
from ..core.exceptions import (
    AttendanceError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFound,
    ValidationError,
)

logger = logging.getLogger(__name__)

SESSION_ID = "id"
SESSION_EMPLOYEE_ID = "employee_id"
SESSION_NAME = "name"
SESSION_ROLE = "role"

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AttendanceError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFound, 404),
)


def error_response(message: str, code: str, status: int):
    return jsonify({"error": message, "code": code}), status


def current_caller() -> Optional[Caller]:
    employee_id = session.get(SESSION_EMPLOYEE_ID)
    role = session.get(SESSION_ROLE)
    if not employee_id or not role:
        return None
    try:
        return Caller(employee_id=employee_id, role=Role(role))
    except ValueError:
        # role string from an older session cookie
        return None


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_caller() is None:
            return error_response("Authentication required", AuthenticationError.__name__, 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        caller = current_caller()
        if caller is None:
            return error_response("Authentication required", AuthenticationError.__name__, 401)
        if not caller.is_admin:
            return error_response("Access denied. Admin only.", "AccessDenied", 403)
        return view(*args, **kwargs)

    return wrapper


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        for exc_type, status in _STATUS_BY_ERROR:
            if isinstance(exc, exc_type):
                return error_response(str(exc), type(exc).__name__, status)
        return error_response(str(exc), type(exc).__name__, 400)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            # routing errors (404 unknown path, 405 wrong method) keep their status
            return error_response(exc.description, type(exc).__name__, exc.code)
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500
