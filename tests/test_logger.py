"""Tests for the fan-out logger."""

import threading
from unittest.mock import Mock

import pytest

from relaylog.logger import Logger
from relaylog.models import Level, LogRecord
from relaylog.sinks import InMemorySink


class FailingSink:
    """Sink that always raises."""

    def deliver(self, record: LogRecord) -> None:
        raise RuntimeError(f"cannot deliver {record.message}")


@pytest.fixture
def sinks() -> list[InMemorySink]:
    """Create three in-memory sinks."""
    return [InMemorySink() for _ in range(3)]


class TestLogger:
    """Tests for Logger."""

    def test_every_sink_receives_every_call_in_order(
        self, sinks: list[InMemorySink]
    ) -> None:
        """Test each sink sees all records in call order with matching levels."""
        logger = Logger("svc", sinks)

        logger.trace("a")
        logger.debug("b")
        logger.info("c")
        logger.warn("d")
        logger.error("e")

        for sink in sinks:
            records = sink.snapshot()
            assert [r.message for r in records] == ["a", "b", "c", "d", "e"]
            assert [r.level for r in records] == list(Level)
            assert all(r.logger_name == "svc" for r in records)

    def test_sinks_share_one_record(self, sinks: list[InMemorySink]) -> None:
        """Test all sinks receive the identical record for a call."""
        Logger("svc", sinks).info("ready")

        first = sinks[0].snapshot()[0]
        assert all(sink.snapshot()[0] is first for sink in sinks)

    def test_sinks_called_in_list_order(self) -> None:
        """Test delivery follows the sink list order."""
        manager = Mock()
        Logger("svc", [manager.first, manager.second]).info("x")

        assert [call[0] for call in manager.mock_calls] == [
            "first.deliver",
            "second.deliver",
        ]

    def test_no_sinks(self) -> None:
        """Test a logger without sinks emits nothing and does not fail."""
        logger = Logger("quiet", [])
        logger.error("nobody listens")
        assert logger.sinks == ()

    def test_sink_list_is_fixed(self, memory_sink: InMemorySink) -> None:
        """Test changes to the source list do not reach the logger."""
        source = [memory_sink]
        logger = Logger("svc", source)
        source.append(InMemorySink())

        assert logger.sinks == (memory_sink,)

    def test_failing_sink_aborts_delivery(self, sinks: list[InMemorySink]) -> None:
        """Test a sink error propagates and later sinks are skipped."""
        logger = Logger("svc", [sinks[0], FailingSink(), sinks[1]])

        with pytest.raises(RuntimeError, match="cannot deliver boom"):
            logger.error("boom")

        assert len(sinks[0].snapshot()) == 1
        assert sinks[1].snapshot() == []

    def test_warning_alias(self, memory_sink: InMemorySink) -> None:
        """Test warning() logs at WARN level."""
        Logger("svc", [memory_sink]).warning("careful")
        assert memory_sink.snapshot()[0].level == Level.WARN

    def test_records_calling_thread(self, memory_sink: InMemorySink) -> None:
        """Test the record carries the name of the logging thread."""
        logger = Logger("svc", [memory_sink])
        worker = threading.Thread(target=logger.info, args=("hi",), name="worker-3")
        worker.start()
        worker.join()

        assert memory_sink.snapshot()[0].thread_name == "worker-3"

    def test_name(self) -> None:
        """Test the name property and repr."""
        logger = Logger("svc", [])
        assert logger.name == "svc"
        assert repr(logger) == "Logger(name='svc', sinks=0)"
