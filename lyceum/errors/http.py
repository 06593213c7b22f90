# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

from __future__ import annotations

from flask import Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from lyceum.config import load_config
from lyceum.logging import logger

from .base import HttpFailure

_MIN_BODY_STATUS = 200
_MAX_STATUS = 599
# 1xx are below _MIN_BODY_STATUS; werkzeug also strips the body of these.
_BODYLESS_STATUSES = frozenset({204, 304})


def _carries_body(status: int) -> bool:
    return _MIN_BODY_STATUS <= status <= _MAX_STATUS and status not in _BODYLESS_STATUSES


def _response_status(status: int, default_status: int) -> int:
    if _carries_body(status):
        return int(status)
    logger.warning(
        f"Failure status {status} cannot be sent with a JSON error body, "
        f"responding with {default_status}"
    )
    return default_status


def _check_default_status(status: int) -> int:
    if not 500 <= status <= 599:
        raise ValueError(f"default_status must be a 5xx status, got {status}")
    return status


def handle_http_failure(
    failure: HttpFailure, *, default_status: int = 500
) -> tuple[Response, int]:
    response = jsonify(failure.to_dict())
    return response, _response_status(failure.status, default_status)


def register_error_handler(app, *, default_status: int | None = None) -> None:
    """Translate errors raised by ``app`` views into JSON responses.

    ``default_status`` is used for unexpected exceptions and for failures
    whose status cannot carry a JSON body. ``None`` means the
    ``ERROR_DEFAULT_STATUS`` setting.
    """
    config = load_config()
    debug_mode = config.debug_logging
    if default_status is None:
        default_status = config.error_default_status
    fallback_status = _check_default_status(default_status)

    @app.errorhandler(HttpFailure)
    def _handle_http_failure(exc: HttpFailure):
        g.http_failure = exc
        logger.warning(
            f"HTTP failure {exc.status} on {request.method} {request.path}: {exc.message}"
        )
        return handle_http_failure(exc, default_status=fallback_status)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled {type(exc).__name__} on {request.method} {request.path} "
                f"from {request.remote_addr or 'unknown'}, "
                f"query={request.args.to_dict()}, body_size={len(request.get_data())}"
            )
        else:
            logger.error(f"Unhandled {type(exc).__name__} on {request.method} {request.path}")

        return jsonify({"error": "internal_error"}), fallback_status
