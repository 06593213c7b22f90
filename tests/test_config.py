from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from lyceum.config import AppConfig, load_config


def test_defaults() -> None:
    config = load_config()
    assert config.log_level == "INFO"
    assert config.log_file is None
    assert config.debug_logging is False
    assert config.error_default_status == 500


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FILE", "/tmp/lyceum.log")
    monkeypatch.setenv("DEBUG_LOGGING", "yes")
    monkeypatch.setenv("ERROR_DEFAULT_STATUS", "502")

    config = load_config()

    assert config.log_level == "DEBUG"
    assert config.log_file == Path("/tmp/lyceum.log")
    assert config.debug_logging is True
    assert config.error_default_status == 502


def test_load_config_is_cached() -> None:
    assert load_config() is load_config()


def test_rejects_non_server_default_status(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ERROR_DEFAULT_STATUS", "404")
    with pytest.raises(ValidationError):
        load_config()


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        AppConfig(LOG_LEVEL="chatty")  # type: ignore[call-arg]


def test_blank_log_file_means_no_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", "  ")
    assert load_config().log_file is None


def test_rejects_unparseable_debug_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG_LOGGING", "maybe")
    with pytest.raises(ValidationError):
        load_config()
