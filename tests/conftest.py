import logging
from collections.abc import Iterator

import pytest
from loguru import logger

from settings import get_settings


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def verbose(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPOSER_VERBOSE", "true")
    get_settings.cache_clear()


@pytest.fixture
def cars() -> list[dict]:
    return [
        {"name": "Aston Martin One-77", "horsepower": 100},
        {"name": "Ferrari FF", "horsepower": 300},
        {"name": "Jaguar XKR-S", "horsepower": 200},
    ]
