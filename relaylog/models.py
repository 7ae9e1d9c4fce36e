"""Log levels and the immutable log record."""

import threading
import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Level(str, Enum):
    """Log levels, ordered by severity."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def severity(self) -> int:
        """Get the numeric severity (TRACE lowest)."""
        return _SEVERITY[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Level):
            return NotImplemented
        return self.severity >= other.severity


_SEVERITY = {level: rank for rank, level in enumerate(Level)}


def _now_millis() -> int:
    """Get the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def _current_thread_name() -> str:
    """Get the name of the calling thread."""
    return threading.current_thread().name


class LogRecord(BaseModel):
    """One captured log event.

    Timestamp and thread name are taken from the calling context when the
    record is constructed.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    level: Level
    timestamp: int = Field(default_factory=_now_millis)
    thread_name: str = Field(default_factory=_current_thread_name)
    logger_name: str

    @classmethod
    def capture(cls, level: Level, message: str, logger_name: str) -> "LogRecord":
        """Capture a record for the calling thread at the current instant."""
        return cls(level=level, message=message, logger_name=logger_name)
