"""Settings for the loguru facade that the facade sink forwards to."""

import sys
from dataclasses import dataclass, field
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FACADE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[context]}</cyan> | "
    "<level>{message}</level>"
)


class Settings(BaseSettings):
    """Environment driven settings."""

    model_config = SettingsConfigDict(
        env_prefix="RELAYLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    FACADE_LEVEL: str = Field(default="TRACE")
    FACADE_FORMAT: str = Field(default=DEFAULT_FACADE_FORMAT)
    FACADE_COLORIZE: bool | None = Field(default=None)


@dataclass
class FacadeConfig:
    """Configuration for the loguru handler installed by setup_facade()."""

    level: str = "TRACE"
    format: str = DEFAULT_FACADE_FORMAT
    colorize: bool | None = None
    sink: Any = field(default_factory=lambda: sys.stderr)

    def __post_init__(self) -> None:
        """Normalize the level name to loguru's upper case spelling."""
        self.level = self.level.upper()
        if self.level == "WARN":
            self.level = "WARNING"

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FacadeConfig":
        """Build a facade configuration from environment settings.

        Args:
            settings: Settings to read. If None, loads them from the environment.

        Returns:
            The matching facade configuration.
        """
        if settings is None:
            settings = Settings()
        return cls(
            level=settings.FACADE_LEVEL,
            format=settings.FACADE_FORMAT,
            colorize=settings.FACADE_COLORIZE,
        )
