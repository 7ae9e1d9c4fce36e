"""Fluent construction of loggers."""

from .exceptions import BuilderSpentError, InvalidSinkError
from .formatters import Formatter, SimpleFormatter
from .logger import Logger
from .sinks import ConsoleSink, FacadeSink, Sink


def name_of(target: str | type) -> str:
    """Get a logger name for a string or a class.

    Classes are named by their module and qualified name, e.g.
    ``myapp.service.Worker``.
    """
    if isinstance(target, str):
        return target
    return f"{target.__module__}.{target.__qualname__}"


class LoggerBuilder:
    """Accumulates sinks for a logger.

    Every ``with_*`` method returns the builder itself so calls can be chained.
    A builder can be built once.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._sinks: list[Sink] = []
        self._built = False

    @classmethod
    def create(cls, target: str | type) -> "LoggerBuilder":
        """Create an empty builder for a name or a class."""
        return cls(name_of(target))

    def _add(self, sink: Sink) -> "LoggerBuilder":
        if self._built:
            raise BuilderSpentError(self.name)
        self._sinks.append(sink)
        return self

    def with_console_appender(
        self, formatter: Formatter | None = None
    ) -> "LoggerBuilder":
        """Add a console sink, with a new default formatter if none is given."""
        if formatter is None:
            formatter = SimpleFormatter()
        return self._add(ConsoleSink(formatter))

    def with_logger_appender(self) -> "LoggerBuilder":
        """Add a sink that forwards to the loguru facade."""
        return self._add(FacadeSink())

    def with_appender(self, sink: Sink) -> "LoggerBuilder":
        """Add any object implementing ``deliver(record)``.

        Raises:
            InvalidSinkError: If the object has no callable ``deliver``.
        """
        if not callable(getattr(sink, "deliver", None)):
            raise InvalidSinkError(sink)
        return self._add(sink)

    def with_default_appenders(self) -> "LoggerBuilder":
        """Add a console sink followed by a facade sink."""
        return self.with_console_appender().with_logger_appender()

    def build(self) -> Logger:
        """Build the logger.

        Falls back to the default sinks when none were added.

        Raises:
            BuilderSpentError: If the builder was already built.
        """
        if self._built:
            raise BuilderSpentError(self.name)
        if not self._sinks:
            self.with_default_appenders()
        self._built = True
        return Logger(self.name, self._sinks)
