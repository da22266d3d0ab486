"""Settled outcomes: failures turned into data.

Every batch runner records one ``Settled`` per executor invocation. A
``Settled`` is either ``Fulfilled(value)`` or ``Rejected(reason)``, mirroring
JavaScript's ``Promise.allSettled()`` results.

Example:
    >>> result = await outcome(fetch_user, 42)
    >>> match result:
    ...     case Fulfilled(value):
    ...         print(value)
    ...     case Rejected(reason):
    ...         print(f"failed: {reason}")
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, ClassVar, Generic, TypeAlias, TypeVar

from timeable.foundation.errors import as_exception

T = TypeVar("T")


class SettledStatus(StrEnum):
    """Status of a settled operation."""
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


@dataclass(slots=True, frozen=True)
class Fulfilled(Generic[T]):
    """Executor returned ``value``."""

    value: T
    status: ClassVar[SettledStatus] = SettledStatus.FULFILLED

    @property
    def is_fulfilled(self) -> bool: return True

    @property
    def is_rejected(self) -> bool: return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class Rejected:
    """Executor raised ``reason`` (the exception object itself, unwrapped)."""

    reason: object
    status: ClassVar[SettledStatus] = SettledStatus.REJECTED

    @property
    def is_fulfilled(self) -> bool: return False

    @property
    def is_rejected(self) -> bool: return True

    def unwrap(self) -> object:
        """Raise the stored reason."""
        raise as_exception(self.reason)

    def unwrap_or(self, default: T) -> T:
        return default


Settled: TypeAlias = Fulfilled[T] | Rejected


def fit_arity(executor: Callable[..., T]) -> Callable[..., T]:
    """Drop trailing positional arguments the executor cannot accept.

    Runners always offer ``(value, index, sequence[, accumulator])``; a
    one-argument lambda only gets ``value``. Callables accepting ``*args``
    receive everything. Callables whose signature cannot be inspected, such
    as ``int`` or ``float``, receive ``value`` alone.
    """
    try:
        params = inspect.signature(executor).parameters.values()
    except (TypeError, ValueError):
        params = None
    if params is None:
        positional = 1
    else:
        positional = 0
        for param in params:
            if param.kind is param.VAR_POSITIONAL:
                return executor
            if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
                positional += 1

    def call(*args: object) -> T:
        return executor(*args[:positional])

    return call


async def outcome(executor: Callable[..., T | Awaitable[T]], *args: object) -> Settled[T]:
    """Invoke ``executor(*args)`` and capture its result as a Settled.

    Sync and async executors are both accepted. Never raises for executor
    failures; ``asyncio.CancelledError`` still propagates.
    """
    try:
        value = executor(*args)
        if inspect.isawaitable(value):
            value = await value
    except Exception as e:
        return Rejected(e)
    return Fulfilled(value)
