from __future__ import annotations

import logging
from typing import Any, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest, MethodNotAllowed, NotFound

from ..core.exceptions import (
    ConfigurationError,
    ConflictError,
    ConnectionUnavailableError,
    DataAccessError,
    DomainError,
    NotFoundError,
    OperationFailedError,
    SchemaError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first: ConflictError is an OperationFailedError.
_STATUS_BY_ERROR: list[tuple[type, int]] = [
    (ValidationError, 400),
    (NotFoundError, 404),
    (ConflictError, 409),
    (ConnectionUnavailableError, 503),
    (ConfigurationError, 503),
    (SchemaError, 500),
    (OperationFailedError, 500),
]


def status_for(exc: Exception) -> int:
    for kind, status in _STATUS_BY_ERROR:
        if isinstance(exc, kind):
            return status
    return 500


def json_body() -> Any:
    return request.get_json(silent=True)


def int_arg(name: str, default: Optional[int] = None, *, required: bool = False) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None or raw == "":
        if required:
            raise ValidationError(f"query parameter '{name}' is required")
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"query parameter '{name}' must be an integer")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        return jsonify({"error": str(e)}), status_for(e)

    @app.errorhandler(DataAccessError)
    def _data_access_error(e: DataAccessError):
        status = status_for(e)
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, e)
        return jsonify({"error": str(e)}), status

    @app.errorhandler(MethodNotAllowed)
    def _method_not_allowed(e: MethodNotAllowed):
        allowed = sorted(m for m in (e.valid_methods or []) if m not in {"HEAD", "OPTIONS"})
        response = jsonify({"error": f"Method {request.method} Not Allowed"})
        response.status_code = 405
        response.headers["Allow"] = ", ".join(allowed)
        return response

    @app.errorhandler(NotFound)
    def _not_found(e: NotFound):
        return jsonify({"error": "Not Found"}), 404

    @app.errorhandler(BadRequest)
    def _bad_request(e: BadRequest):
        return jsonify({"error": e.description or "Bad Request"}), 400
