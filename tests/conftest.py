from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger as loguru_logger

from lyceum.config import load_config


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("LOG_LEVEL", "LOG_FILE", "DEBUG_LOGGING", "ERROR_DEFAULT_STATUS"):
        monkeypatch.delenv(name, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture()
def captured_logs() -> Iterator[list[dict]]:
    records: list[dict] = []
    sink_id = loguru_logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    loguru_logger.remove(sink_id)
