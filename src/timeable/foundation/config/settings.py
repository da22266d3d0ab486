"""Environment-based configuration using pydantic-settings.

Holds the defaults every timed primitive falls back to when a caller
leaves an interval unset. All durations are seconds.

Example:
    >>> from timeable.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.poll.interval
    1.0
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # TIMEABLE_POLL_INTERVAL=0.25
    # TIMEABLE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PollSettings(BaseSettings):
    """Poller defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TIMEABLE_POLL_",
        extra="ignore",
    )

    interval: PositiveFloat = Field(default=1.0, description="Seconds between poll ticks")
    immediate_delay: PositiveFloat = Field(
        default=0.01,
        description="Kick-off delay for the extra run when polling immediately",
    )


class WaitSettings(BaseSettings):
    """Predicate waiter defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TIMEABLE_WAIT_",
        extra="ignore",
    )

    interval: PositiveFloat = Field(default=1.0, description="Seconds between predicate checks")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TIMEABLE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class TimeableSettings(BaseSettings):
    """Root settings for timeable.

    Loads configuration from environment variables with TIMEABLE_ prefix.

    Example environment variables:
        TIMEABLE_POLL_INTERVAL=0.5
        TIMEABLE_POLL_IMMEDIATE_DELAY=0.001
        TIMEABLE_WAIT_INTERVAL=0.1
        TIMEABLE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="TIMEABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    poll: PollSettings = Field(default_factory=PollSettings)
    wait: WaitSettings = Field(default_factory=WaitSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> TimeableSettings:
    """Get the global settings instance (cached)."""
    return TimeableSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
