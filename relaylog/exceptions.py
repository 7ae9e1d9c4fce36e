"""Exceptions raised by the logging framework."""


class RelaylogError(Exception):
    """Base class for framework errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BuilderSpentError(RelaylogError):
    """Error for a builder used after build() was called."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Builder for logger '{name}' was already built")


class InvalidSinkError(RelaylogError):
    """Error for an appender that cannot deliver records."""

    def __init__(self, sink: object) -> None:
        super().__init__(
            f"{type(sink).__name__} does not implement deliver(record)",
        )
