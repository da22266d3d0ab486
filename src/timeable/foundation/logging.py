"""Logging setup for the ``timeable`` logger hierarchy.

Library modules log through ``logging.getLogger("timeable.<area>")`` and never
install handlers themselves. Applications that want timeable's output call
``configure_logging()`` once at startup.

Example:
    >>> from timeable.foundation.logging import configure_logging
    >>> configure_logging(level="DEBUG")           # human-readable on stderr
    >>> configure_logging(format="json")           # JSON Lines on stdout
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from timeable.foundation.config import get_settings

ROOT_LOGGER = "timeable"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """JSON Lines formatter for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, option=orjson.OPT_NON_STR_KEYS, default=repr).decode()


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    output: TextIO | None = None,
) -> logging.Logger:
    """Attach a single handler to the ``timeable`` logger.

    Unset arguments come from ``LoggingSettings``. Calling again replaces the
    previously installed handler.
    """
    settings = get_settings().logging
    format = format or settings.format  # noqa: A001
    level = (level or settings.level).upper()

    match format:
        case "text":
            handler = logging.StreamHandler(output or sys.stderr)
            handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
        case "json":
            handler = logging.StreamHandler(output or sys.stdout)
            handler.setFormatter(JsonFormatter())
        case _:
            raise ValueError(f"Unknown format: {format}. Use 'text' or 'json'")

    logger = logging.getLogger(ROOT_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, "_timeable", False):
            logger.removeHandler(existing)
    handler._timeable = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level, logging.WARNING))
    return logger
