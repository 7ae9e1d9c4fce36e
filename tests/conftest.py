"""Test configuration."""

import sys
from collections.abc import Generator
from typing import Any
from unittest.mock import Mock

import pytest
from loguru import logger

from relaylog.facade import FRAMEWORK_DIAGNOSTICS
from relaylog.models import Level, LogRecord
from relaylog.sinks import InMemorySink

TEST_TIMESTAMP = 1_704_164_645_678


@pytest.fixture
def facade(monkeypatch: pytest.MonkeyPatch) -> Mock:
    """Replace the loguru facade handed to new facade sinks with a mock."""
    mock = Mock()
    monkeypatch.setattr("relaylog.sinks.get_facade_logger", lambda _name: mock)
    return mock


@pytest.fixture
def memory_sink() -> InMemorySink:
    """Create an empty in-memory sink."""
    return InMemorySink()


@pytest.fixture
def record() -> LogRecord:
    """Create a record with fixed metadata."""
    return LogRecord(
        level=Level.INFO,
        message="hello",
        timestamp=TEST_TIMESTAMP,
        thread_name="worker-1",
        logger_name="tests",
    )


@pytest.fixture
def loguru_records() -> Generator[list[dict[str, Any]], None, None]:
    """Capture loguru records emitted during a test."""
    records: list[dict[str, Any]] = []
    handler_id = logger.add(
        lambda message: records.append(message.record),
        level="TRACE",
        format="{message}",
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture
def restore_loguru() -> Generator[None, None, None]:
    """Restore loguru's default handler after a test reconfigures it."""
    yield
    logger.remove()
    logger.configure(extra={})
    logger.disable(FRAMEWORK_DIAGNOSTICS)
    logger.add(lambda message: sys.stderr.write(message))

