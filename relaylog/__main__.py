"""Demonstration: a registry logger, a console-only and a facade-only logger."""

from .facade import setup_facade
from .registry import builder, get_logger


class Application:
    """Owner of the registry logger used by the demonstration."""


def main() -> None:
    """Emit a few records through differently configured loggers."""
    setup_facade()

    app_logger = get_logger(Application)
    console_logger = builder("CustomLogger").with_console_appender().build()
    facade_logger = builder("FacadeOnly").with_logger_appender().build()

    app_logger.info("Application started successfully")
    app_logger.error("Application failed to start")
    app_logger.debug("Loading...")

    console_logger.info("This is from custom logger (console only)")
    facade_logger.info("This is from the facade only logger")


if __name__ == "__main__":
    main()
