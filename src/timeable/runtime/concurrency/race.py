"""Deadline races: an operation against a timeout-triggered fallback.

Provides:
    - until_settled_or_timed_out: primary executor vs. timeout executor,
      first to resolve/reject wins
    - wait_for: poll a predicate until it holds or the deadline passes

Neither primitive preempts running work. The primary executor is handed a
``pending()`` check and is expected to consult it before acting on results
that arrive after the deadline.

Example:
    >>> async def fetch(resolve, reject, pending):
    ...     data = await client.get("/status")
    ...     if pending():
    ...         resolve(data)
    >>>
    >>> status = await until_settled_or_timed_out(
    ...     fetch,
    ...     lambda resolve, reject: reject(TimeoutError("status")),
    ...     timeout=2.0,
    ... )
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from timeable.foundation.config import get_settings
from timeable.foundation.errors import as_exception

from .timers import Interval, Timeout, set_interval, set_timeout

logger = logging.getLogger("timeable.race")

T = TypeVar("T")

Resolve = Callable[..., None]
Reject = Callable[..., None]
Pending = Callable[[], bool]
PromiseExecutor = Callable[[Resolve, Reject, Pending], Awaitable[None] | None]
TimeoutExecutor = Callable[[Resolve, Reject], Awaitable[None] | None]


@dataclass(slots=True)
class _Race(Generic[T]):
    """State of one race: its future, its deadline timer and the expiry flag."""

    future: asyncio.Future[T]
    timer: Timeout | None = None
    timed_out: bool = False
    tasks: set[asyncio.Task[object]] = field(default_factory=set)

    def pending(self) -> bool:
        """True until the deadline fires."""
        return not self.timed_out

    def resolve(self, value: T | None = None) -> None:
        if not self.future.done():
            self.future.set_result(value)  # type: ignore[arg-type]

    def reject(self, reason: object = None) -> None:
        if not self.future.done():
            self.future.set_exception(as_exception(reason))

    def run(self, executor: Callable[..., object], *args: object) -> None:
        """Invoke an executor; errors reject the race while it is unsettled."""
        try:
            result = executor(*args)
        except Exception as e:
            self.reject(e)
            return
        if inspect.isawaitable(result):
            task = asyncio.ensure_future(result)
            self.tasks.add(task)
            task.add_done_callback(self._finished)

    def expire(self, timeout_executor: TimeoutExecutor) -> None:
        self.timer = None
        # Settled but not yet released: the awaiting side has not resumed.
        if self.future.done():
            return
        self.timed_out = True
        self.run(timeout_executor, self.resolve, self.reject)

    def release(self) -> None:
        """Cancel the deadline timer if it has not fired yet."""
        if not self.timed_out and self.timer is not None:
            self.timer.cancel()
        self.timer = None

    def _finished(self, task: asyncio.Task[object]) -> None:
        self.tasks.discard(task)
        if task.cancelled():
            return
        if (error := task.exception()) is None:
            return
        if self.future.done():
            logger.debug(f"executor failed after the race settled: {error!r}")
        else:
            self.reject(error)


async def until_settled_or_timed_out(
    executor: PromiseExecutor,
    timeout_executor: TimeoutExecutor,
    timeout: float,
) -> T:
    """Race ``executor`` against ``timeout_executor`` fired after ``timeout`` seconds.

    The deadline is scheduled first, then ``executor(resolve, reject, pending)``
    runs immediately. When the deadline passes, ``pending()`` turns False and
    ``timeout_executor(resolve, reject)`` runs. Whichever side settles first
    decides the result; later resolve/reject calls are ignored. The deadline
    timer is cancelled on every exit path, so a race that settles early never
    invokes ``timeout_executor``.

    Executors may be sync or ``async def``. An exception from either one
    rejects the race if it is still unsettled. ``reject`` accepts any value;
    non-exception reasons surface as ``RejectedError``.

    Args:
        executor: Primary work, given ``(resolve, reject, pending)``
        timeout_executor: Fallback, given ``(resolve, reject)``
        timeout: Deadline in seconds

    Returns:
        The value passed to the winning ``resolve``.

    Raises:
        RejectedError: If rejected with a non-exception reason
        Exception: Whatever the winning side rejected with or raised
    """
    loop = asyncio.get_running_loop()
    race: _Race[T] = _Race(loop.create_future())
    race.timer = set_timeout(lambda: race.expire(timeout_executor), timeout)
    try:
        race.run(executor, race.resolve, race.reject, race.pending)
        return await race.future
    finally:
        race.release()


# ─────────────────────────────────────────────────────────────────────────────
# Wait For: predicate polling with a deadline
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(slots=True)
class _Waiter:
    """Predicate check loop driven by an interval timer."""

    predicate: Callable[[], bool]
    interval: float
    ticker: Interval | None = None

    def start(self, resolve: Resolve, reject: Reject, pending: Pending) -> None:
        def check() -> None:
            try:
                ready = self.predicate()
            except Exception as e:
                self.stop()
                reject(e)
                return
            if ready:
                self.stop()
                if pending():
                    resolve()

        self.ticker = set_interval(check, self.interval)

    def expire(self, resolve: Resolve, reject: Reject) -> None:
        self.stop()
        resolve()

    def stop(self) -> None:
        if self.ticker is not None:
            self.ticker.cancel()
            self.ticker = None


async def wait_for(
    predicate: Callable[[], bool],
    timeout: float,
    interval: float | None = None,
) -> None:
    """Wait until ``predicate()`` is true or ``timeout`` seconds pass.

    The predicate is checked every ``interval`` seconds (first check after
    one interval). Reaching the deadline is not an error: the wait simply
    returns. Only an exception raised by the predicate propagates.

    Example:
        >>> await wait_for(lambda: queue.empty(), timeout=5.0, interval=0.1)
    """
    if interval is None:
        interval = get_settings().wait.interval
    waiter = _Waiter(predicate, interval)
    try:
        await until_settled_or_timed_out(waiter.start, waiter.expire, timeout)
    finally:
        waiter.stop()
