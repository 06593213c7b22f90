# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

"""Loguru configuration plus per-request correlation ids."""

from __future__ import annotations

import logging
import sys
import time
import uuid
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _loguru

from lyceum.config import load_config

from .sensitive_filter import redact_record

REQUEST_ID_HEADER = "X-Request-ID"
NO_CORRELATION_ID = "-"

LINE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | <level>{level: <8}</level> | "
    "{extra[correlation_id]} | {name}:{function}:{line} | <level>{message}</level>"
)

_correlation_id: ContextVar[str] = ContextVar("lyceum_correlation_id", default=NO_CORRELATION_ID)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or NO_CORRELATION_ID)


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(NO_CORRELATION_ID)


def _attach_correlation_id(record: dict[str, Any]) -> None:
    record["extra"].setdefault("correlation_id", _correlation_id.get())


logger = _loguru.patch(_attach_correlation_id)


class _StdlibBridge(logging.Handler):
    """Forwards stdlib records (werkzeug, third-party libraries) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _loguru.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Point loguru at the caller of the stdlib logging call.
        frame, depth = logging.currentframe(), 0
        while frame is not None and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        # No args or kwargs: loguru must not str.format() the message.
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str | None = None, log_file: str | Path | None = None) -> None:
    config = load_config()
    level = (level or config.log_level).upper()
    log_file = log_file or config.log_file

    _loguru.remove()
    _loguru.configure(extra={"correlation_id": NO_CORRELATION_ID})
    sink_options: dict[str, Any] = {
        "level": level,
        "format": LINE_FORMAT,
        "filter": redact_record,
        "backtrace": False,
        "diagnose": False,
    }
    _loguru.add(sys.stderr, colorize=True, **sink_options)
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _loguru.add(path, colorize=False, enqueue=True, encoding="utf-8", **sink_options)

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)


def install_request_logging(app) -> None:
    """Tag each request with a correlation id and write one access line for it.

    The id comes from the ``X-Request-ID`` header or is generated, and is
    echoed back on the response. Requests that ended in an ``HttpFailure``
    are logged at WARNING together with the failure.
    """
    from flask import g, request

    from lyceum.errors.base import HttpFailure

    @app.before_request
    def _open_request() -> None:
        g.lyceum_started = time.perf_counter()
        set_correlation_id(request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex)

    @app.after_request
    def _close_request(response):
        elapsed_ms = (time.perf_counter() - g.get("lyceum_started", time.perf_counter())) * 1000.0
        line = f"{request.method} {request.path} -> {response.status_code} in {elapsed_ms:.1f} ms"

        failure = g.get("http_failure")
        if isinstance(failure, HttpFailure):
            logger.warning(f"{line} (failure {failure.status}: {failure.message})")
        else:
            logger.info(line)

        response.headers[REQUEST_ID_HEADER] = get_correlation_id()
        return response

    @app.teardown_request
    def _reset_correlation_id(_exc) -> None:
        clear_correlation_id()
