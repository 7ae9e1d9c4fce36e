"""Access to the loguru facade that facade sinks forward records to."""

from typing import Any

from loguru import logger

from .config import FacadeConfig

FACADE_ROOT_CONTEXT = "root"

# Module whose debug messages stay silent until setup_facade() is called
FRAMEWORK_DIAGNOSTICS = "relaylog.registry"


def get_facade_logger(name: str) -> Any:  # noqa: ANN401
    """Get a loguru logger bound to a name.

    Args:
        name: Name stored under ``extra["context"]`` of every message.

    Returns:
        A bound loguru logger.
    """
    return logger.bind(context=name)


def setup_facade(config: FacadeConfig | None = None) -> int:
    """Replace loguru's handlers with a single configured handler.

    Also enables the framework's own debug messages, which are disabled
    on import.

    Args:
        config: Optional facade configuration. If None, reads it from settings.

    Returns:
        The loguru handler id of the installed handler.
    """
    if config is None:
        config = FacadeConfig.from_settings()

    # Remove default handler
    logger.remove()

    # Messages logged without a bound name still render the context column
    logger.configure(extra={"context": FACADE_ROOT_CONTEXT})
    logger.enable(FRAMEWORK_DIAGNOSTICS)

    return logger.add(
        config.sink,
        format=config.format,
        level=config.level,
        colorize=config.colorize,
        backtrace=True,
        diagnose=False,
    )
