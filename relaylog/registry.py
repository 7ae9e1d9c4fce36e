"""Registry of shared, named loggers."""

import threading

from loguru import logger as facade_logger

from .builder import LoggerBuilder, name_of
from .logger import Logger

_log = facade_logger.bind(context="relaylog")


class LoggerRegistry:
    """Hands out one shared logger per name.

    The first request for a name builds a logger with the default sinks; later
    requests return that same instance. Entries are never replaced or removed.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._lock = threading.Lock()
        self._loggers: dict[str, Logger] = {}

    def _create(self, name: str) -> Logger:
        """Build the logger stored for a name on first request."""
        return LoggerBuilder.create(name).with_default_appenders().build()

    def get_logger(self, target: str | type) -> Logger:
        """Get the shared logger for a name or a class.

        Args:
            target: Logger name, or a class whose qualified name is used

        Returns:
            The logger registered under the name
        """
        name = name_of(target)
        # Lookup and insert under one lock: at most one logger per name
        with self._lock:
            existing = self._loggers.get(name)
            if existing is not None:
                return existing
            created = self._create(name)
            self._loggers[name] = created
        _log.debug(f"Registered logger {name}")
        return created

    def builder(self, target: str | type) -> LoggerBuilder:
        """Get a fresh builder; the result is not registered."""
        return LoggerBuilder.create(target)

    def names(self) -> list[str]:
        """Get the registered logger names."""
        with self._lock:
            return list(self._loggers)

    def __contains__(self, target: object) -> bool:
        if not isinstance(target, (str, type)):
            return False
        with self._lock:
            return name_of(target) in self._loggers

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)


default_registry = LoggerRegistry()


def get_logger(target: str | type) -> Logger:
    """Get the shared logger for a name or a class from the default registry."""
    return default_registry.get_logger(target)


def builder(target: str | type) -> LoggerBuilder:
    """Get a fresh builder for a name or a class."""
    return default_registry.builder(target)
