"""Timer handles over the running asyncio loop.

The timed primitives need exactly four scheduler operations: schedule a
delayed callback, cancel it, schedule a repeating callback, cancel that.
``Timeout`` and ``Interval`` wrap ``loop.call_later`` to provide them, with
idempotent ``cancel()`` so every exit path can release its timer
unconditionally.

Example:
    >>> timer = set_timeout(lambda: print("late"), 5.0)
    >>> timer.cancel()          # never prints
    >>> ticker = set_interval(lambda: print("tick"), 0.5)
    >>> await sleep(1.6)        # tick, tick, tick
    >>> ticker.cancel()
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Callable

# Repeating timers never fire more often than this.
MIN_INTERVAL = 0.001


@dataclass(slots=True)
class Timeout:
    """One-shot delayed callback."""

    callback: Callable[[], object]
    delay: float
    _handle: asyncio.TimerHandle | None = field(default=None, repr=False)

    def start(self, loop: asyncio.AbstractEventLoop | None = None) -> Timeout:
        loop = loop or asyncio.get_running_loop()
        self._handle = loop.call_later(max(self.delay, 0.0), self._fire)
        return self

    @property
    def active(self) -> bool:
        """Whether the callback is still due to run."""
        return self._handle is not None

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self.callback()


@dataclass(slots=True)
class Interval:
    """Repeating callback, rescheduled before each run.

    The next run is booked before the callback executes, so a callback may
    cancel its own interval.
    """

    callback: Callable[[], object]
    interval: float
    _loop: asyncio.AbstractEventLoop | None = field(default=None, repr=False)
    _handle: asyncio.TimerHandle | None = field(default=None, repr=False)

    def start(self, loop: asyncio.AbstractEventLoop | None = None) -> Interval:
        self._loop = loop or asyncio.get_running_loop()
        self._schedule(self._loop)
        return self

    @property
    def active(self) -> bool:
        return self._handle is not None

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self, loop: asyncio.AbstractEventLoop) -> None:
        self._handle = loop.call_later(max(self.interval, MIN_INTERVAL), self._fire)

    def _fire(self) -> None:
        if self._loop is None:
            raise RuntimeError("Interval not started")
        self._schedule(self._loop)
        self.callback()


def set_timeout(callback: Callable[[], object], delay: float) -> Timeout:
    """Run callback once after ``delay`` seconds. Needs a running loop."""
    return Timeout(callback, delay).start()


def set_interval(callback: Callable[[], object], interval: float) -> Interval:
    """Run callback every ``interval`` seconds until cancelled. Needs a running loop."""
    return Interval(callback, interval).start()


async def sleep(duration: float) -> None:
    """Suspend the current task for ``duration`` seconds."""
    await asyncio.sleep(duration)
