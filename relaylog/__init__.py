"""A small fan-out logging framework.

Loggers deliver each record, in order, to a list of sinks: a console sink,
a sink forwarding to loguru, or any object implementing ``deliver(record)``.
"""

from loguru import logger as _facade_logger

from .builder import LoggerBuilder
from .config import FacadeConfig, Settings
from .exceptions import BuilderSpentError, InvalidSinkError, RelaylogError
from .facade import FRAMEWORK_DIAGNOSTICS, get_facade_logger, setup_facade
from .formatters import Formatter, SimpleFormatter
from .logger import Logger
from .models import Level, LogRecord
from .registry import LoggerRegistry, builder, default_registry, get_logger
from .sinks import FACADE_LOGGER_NAME, ConsoleSink, FacadeSink, InMemorySink, Sink

_facade_logger.disable(FRAMEWORK_DIAGNOSTICS)

__all__ = [
    "FACADE_LOGGER_NAME",
    "BuilderSpentError",
    "ConsoleSink",
    "FacadeConfig",
    "FacadeSink",
    "Formatter",
    "InMemorySink",
    "InvalidSinkError",
    "Level",
    "LogRecord",
    "Logger",
    "LoggerBuilder",
    "LoggerRegistry",
    "RelaylogError",
    "Settings",
    "SimpleFormatter",
    "Sink",
    "builder",
    "default_registry",
    "get_facade_logger",
    "get_logger",
    "setup_facade",
]
