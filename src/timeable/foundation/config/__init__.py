"""Configuration management using pydantic-settings.

Provides environment-based defaults for timed primitives.
"""

from .settings import (
    LoggingSettings,
    PollSettings,
    TimeableSettings,
    WaitSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "LoggingSettings",
    "PollSettings",
    "TimeableSettings",
    "WaitSettings",
    "clear_settings_cache",
    "get_settings",
]
