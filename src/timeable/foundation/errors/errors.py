"""Exception types raised by timeable primitives."""

from __future__ import annotations


class TimeableError(Exception):
    """Base class for errors raised by timeable itself."""


class RejectedError(TimeableError):
    """Raised when a race is rejected with a value that is not an exception.

    Executors may call ``reject("timeout")`` with any value. Awaiting code
    can only receive exceptions, so non-exception reasons are carried here
    unchanged on ``reason``.

    Example:
        >>> try:
        ...     await until_settled_or_timed_out(work, lambda _, reject: reject("timeout"), 1.0)
        ... except RejectedError as e:
        ...     e.reason
        'timeout'
    """

    def __init__(self, reason: object = None) -> None:
        super().__init__(f"rejected: {reason!r}")
        self.reason = reason


def as_exception(reason: object) -> BaseException:
    """Return reason itself when raisable, otherwise wrap it in RejectedError."""
    return reason if isinstance(reason, BaseException) else RejectedError(reason)
