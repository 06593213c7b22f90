# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

"""Logging for lyceum: loguru sinks, correlation ids, secret redaction."""

from lyceum.logging.logger import (
    NO_CORRELATION_ID,
    REQUEST_ID_HEADER,
    clear_correlation_id,
    get_correlation_id,
    install_request_logging,
    logger,
    set_correlation_id,
    setup_logging,
)
from lyceum.logging.sensitive_filter import REDACTED, sanitize_message

__all__ = (
    "NO_CORRELATION_ID",
    "REDACTED",
    "REQUEST_ID_HEADER",
    "clear_correlation_id",
    "get_correlation_id",
    "install_request_logging",
    "logger",
    "sanitize_message",
    "set_correlation_id",
    "setup_logging",
)
