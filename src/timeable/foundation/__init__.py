"""Foundation layer: configuration, errors, logging and numeric coercion."""

from .config import TimeableSettings, clear_settings_cache, get_settings
from .errors import RejectedError, TimeableError
from .logging import configure_logging
from .numeric import to_number

__all__ = [
    "TimeableSettings",
    "clear_settings_cache",
    "get_settings",
    "RejectedError",
    "TimeableError",
    "configure_logging",
    "to_number",
]
