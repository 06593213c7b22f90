# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

from __future__ import annotations

from flask import Flask

from lyceum.errors import register_error_handler
from lyceum.logging import install_request_logging


def configure_error_handling(app: Flask, *, request_logging: bool = True) -> None:
    """Register the JSON error handlers and, by default, per-request logging."""
    register_error_handler(app)
    if request_logging:
        install_request_logging(app)
