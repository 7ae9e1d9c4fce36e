"""The fan-out logger."""

from collections.abc import Iterable

from .models import Level, LogRecord
from .sinks import Sink


class Logger:
    """A named logger that delivers every record to its sinks in order.

    Delivery is synchronous and happens on the calling thread. Every sink
    receives the same record instance. An exception raised by a sink
    propagates to the caller and later sinks do not receive the record.
    """

    def __init__(self, name: str, sinks: Iterable[Sink]) -> None:
        self._name = name
        self._sinks = tuple(sinks)

    @property
    def name(self) -> str:
        """Get the logger name."""
        return self._name

    @property
    def sinks(self) -> tuple[Sink, ...]:
        """Get the sinks, in delivery order."""
        return self._sinks

    def _log(self, level: Level, message: str) -> None:
        record = LogRecord.capture(level, message, self._name)
        for sink in self._sinks:
            sink.deliver(record)

    def trace(self, message: str) -> None:
        """Log a message at TRACE level."""
        self._log(Level.TRACE, message)

    def debug(self, message: str) -> None:
        """Log a message at DEBUG level."""
        self._log(Level.DEBUG, message)

    def info(self, message: str) -> None:
        """Log a message at INFO level."""
        self._log(Level.INFO, message)

    def warn(self, message: str) -> None:
        """Log a message at WARN level."""
        self._log(Level.WARN, message)

    warning = warn

    def error(self, message: str) -> None:
        """Log a message at ERROR level."""
        self._log(Level.ERROR, message)

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, sinks={len(self._sinks)})"
