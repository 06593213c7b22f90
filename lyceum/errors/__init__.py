# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

from .base import HttpFailure
from .http import handle_http_failure, register_error_handler

__all__ = [
    "HttpFailure",
    "handle_http_failure",
    "register_error_handler",
]
