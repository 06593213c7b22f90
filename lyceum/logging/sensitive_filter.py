# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

"""Redaction of credentials that leak into failure messages and request logs."""

from __future__ import annotations

import re
from typing import Any

REDACTED = "***REDACTED***"


def _rule(pattern: str, replacement: str, flags: int = re.IGNORECASE) -> tuple[re.Pattern[str], str]:
    return re.compile(pattern, flags), replacement


# Order matters: the authorization header swallows a bearer token whole.
_RULES = (
    _rule(r"(authorization\s*:\s*['\"]?)[^'\"\r\n]{10,}", rf"\1{REDACTED}"),
    _rule(r"(bearer\s+)[\w\-.]{20,}", rf"\1{REDACTED}"),
    _rule(r"((?:api[_-]?key|secret[_-]?key|token)\s*[:=]\s*['\"]?)[\w\-.]{20,}", rf"\1{REDACTED}"),
    _rule(r"(password\s*[:=]\s*['\"]?)[^'\"\s]{6,}", rf"\1{REDACTED}"),
    _rule(r"\b(postgres(?:ql)?|mysql|mongodb)://([^:/\s]+):[^@\s]+@", rf"\1://\2:{REDACTED}@", 0),
)


def sanitize_message(message: str) -> str:
    for pattern, replacement in _RULES:
        message = pattern.sub(replacement, message)
    return message


def redact_record(record: dict[str, Any]) -> bool:
    """Loguru sink filter: scrub the message in place, never drop the record."""
    record["message"] = sanitize_message(record["message"])
    return True
