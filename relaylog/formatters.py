"""Record formatters."""

from datetime import datetime
from typing import Protocol, runtime_checkable

from .models import LogRecord

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@runtime_checkable
class Formatter(Protocol):
    """Renders a record to a display line."""

    def format(self, record: LogRecord) -> str:
        """Render a record without a trailing newline."""


class SimpleFormatter:
    """Renders a record as a single display line.

    The line looks like ``[2024-01-01 12:00:00] [INFO] [MainThread] message``.
    Thread name and message are inserted verbatim.
    """

    def format(self, record: LogRecord) -> str:
        """Format a record.

        Args:
            record: The record to render

        Returns:
            The rendered line, without a trailing newline
        """
        timestamp = datetime.fromtimestamp(record.timestamp // 1000).strftime(
            TIMESTAMP_FORMAT
        )
        return (
            f"[{timestamp}] [{record.level.value}] "
            f"[{record.thread_name}] {record.message}"
        )
