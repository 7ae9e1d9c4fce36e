"""Sinks that log records are delivered to."""

import sys
import threading
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from .facade import get_facade_logger
from .formatters import Formatter
from .models import Level, LogRecord

FACADE_LOGGER_NAME = "relaylog.facade"

# Shared by every console sink so that lines from concurrent loggers never mix.
_stdout_lock = threading.Lock()


@runtime_checkable
class Sink(Protocol):
    """Anything that can consume a log record."""

    def deliver(self, record: LogRecord) -> None:
        """Consume a single record."""


class ConsoleSink:
    """Writes formatted records to standard output, one line per record."""

    def __init__(self, formatter: Formatter) -> None:
        self.formatter = formatter

    def deliver(self, record: LogRecord) -> None:
        """Render the record and write it as one line.

        Args:
            record: The record to write
        """
        line = self.formatter.format(record) + "\n"
        with _stdout_lock:
            # Looked up per call so redirected stdout is honoured
            stream = sys.stdout
            stream.write(line)
            stream.flush()


class FacadeSink:
    """Forwards record messages to a loguru logger.

    Only the message is forwarded, at the matching severity. The thread name,
    timestamp and logger name of the record are not passed on.
    """

    def __init__(self, facade: Any = None) -> None:  # noqa: ANN401
        """Bind the facade logger once.

        Args:
            facade: Logger to forward to. If None, binds the loguru logger
                named ``FACADE_LOGGER_NAME``.
        """
        if facade is None:
            facade = get_facade_logger(FACADE_LOGGER_NAME)
        self.facade = facade
        self._methods = {
            Level.TRACE: facade.trace,
            Level.DEBUG: facade.debug,
            Level.INFO: facade.info,
            Level.WARN: facade.warning,
            Level.ERROR: facade.error,
        }

    def deliver(self, record: LogRecord) -> None:
        """Call the facade method matching the record's level.

        Args:
            record: The record to forward
        """
        method = self._methods.get(record.level)
        if method is None:
            # Unknown level: nothing to forward
            return
        method(record.message)


class InMemorySink:
    """Keeps delivered records in a list instead of writing them anywhere.

    Useful as an extra appender when a caller wants to inspect what a logger
    emitted. Safe to share between threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[LogRecord] = []

    def deliver(self, record: LogRecord) -> None:
        with self._lock:
            self._records.append(record)

    def snapshot(self) -> Sequence[LogRecord]:
        """Get the records delivered so far, oldest first.

        Returns:
            A new list; later deliveries do not change it
        """
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
