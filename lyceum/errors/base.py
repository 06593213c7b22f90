# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

from __future__ import annotations

from http import HTTPStatus
from typing import Any


class HttpFailure(Exception):
    """Failure signal carrying an HTTP status code and a message.

    Neither value is validated: any integer status and any string message
    are stored exactly as given and cannot be reassigned afterwards.
    """

    __slots__ = ("_status", "_message")

    def __init__(self, status: int, message: str) -> None:
        super().__init__(status, message)
        self._status = status
        self._message = message

    @classmethod
    def from_status(cls, status: int, message: str | None = None) -> HttpFailure:
        if message is None:
            try:
                message = HTTPStatus(status).phrase
            except ValueError:
                message = ""
        return cls(status, message)

    @property
    def status(self) -> int:
        return self._status

    @property
    def message(self) -> str:
        return self._message

    def to_dict(self) -> dict[str, Any]:
        return {"status": self._status, "message": self._message}

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self._status!r}, message={self._message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpFailure) or type(other) is not type(self):
            return NotImplemented
        return (self._status, self._message) == (other._status, other._message)

    def __hash__(self) -> int:
        return hash((type(self), self._status, self._message))
