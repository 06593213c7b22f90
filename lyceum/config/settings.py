# SPDX-License-Identifier: Apache-2.0
# Copyright 2026 The lyceum Authors

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = frozenset({"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"})


class AppConfig(BaseSettings):
    """Settings read from the process environment, then ``.env``."""

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")
    # pydantic accepts 1/0, true/false, yes/no, on/off
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    error_default_status: int = Field(500, ge=500, le=599, alias="ERROR_DEFAULT_STATUS")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {sorted(LOG_LEVELS)}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def _blank_means_no_file(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    """Build the settings once per process; tests reset with ``cache_clear()``."""
    return AppConfig()  # type: ignore[call-arg]


__all__ = ("AppConfig", "LOG_LEVELS", "load_config")
