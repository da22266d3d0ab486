"""Non-overlapping periodic execution.

``poll`` runs an executor every ``interval`` seconds. A tick that arrives
while the previous run is still in flight is skipped, not queued, so runs
never overlap however long each one takes.

Example:
    >>> async def refresh(stopped):
    ...     for page in pages:
    ...         if stopped():
    ...             return
    ...         await sync_page(page)
    >>>
    >>> with poll(refresh, interval=30.0, immediately=True) as handle:
    ...     await shutdown_event.wait()
    >>> await handle.join()
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from timeable.foundation.config import get_settings

from .timers import Interval, Timeout, set_interval, set_timeout

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger("timeable.poll")

PollExecutor = Callable[[Callable[[], bool]], Awaitable[None] | None]
ErrorHandler = Callable[[Exception], None]


@dataclass(slots=True)
class PollHandle:
    """Control handle returned by ``poll``.

    Attributes:
        runs: Executor runs started so far
        skipped: Ticks dropped because a run was still in flight
    """

    executor: PollExecutor
    on_error: ErrorHandler | None = None
    runs: int = 0
    skipped: int = 0
    _timer: Interval | None = field(default=None, repr=False)
    _kickoff: Timeout | None = field(default=None, repr=False)
    _task: asyncio.Task[None] | None = field(default=None, repr=False)

    @property
    def inflight(self) -> bool:
        """Whether an executor run is in progress."""
        return self._task is not None

    def stopped(self) -> bool:
        """True once ``stop()`` has been called. Passed to the executor."""
        return self._timer is None

    def stop(self) -> None:
        """Stop scheduling runs. Safe to call repeatedly.

        A run already in flight is not interrupted; it can observe
        ``stopped()`` and finish early. Await ``join()`` to wait for it.
        """
        if self._kickoff is not None:
            self._kickoff.cancel()
            self._kickoff = None
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            logger.debug(f"poll stopped after {self.runs} runs, {self.skipped} skipped")

    async def join(self) -> None:
        """Wait for the in-flight run, if any, to finish."""
        if self._task is not None:
            await asyncio.shield(self._task)

    def _tick(self) -> None:
        if self._task is not None:
            self.skipped += 1
            logger.debug("poll tick skipped: previous run still in flight")
            return
        self.runs += 1
        self._task = asyncio.ensure_future(self._run())

    async def _run(self) -> None:
        try:
            result = self.executor(self.stopped)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.exception("poll executor failed")
            self._report(e)
        finally:
            self._task = None

    def _report(self, error: Exception) -> None:
        if self.on_error is None:
            return
        try:
            self.on_error(error)
        except Exception:
            logger.exception("poll on_error handler failed")

    def __enter__(self) -> PollHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.stop()


def poll(
    executor: PollExecutor,
    interval: float | None = None,
    immediately: bool = False,
    *,
    on_error: ErrorHandler | None = None,
) -> PollHandle:
    """Run ``executor(stopped)`` every ``interval`` seconds without overlap.

    Must be called with a running event loop.

    Args:
        executor: Sync or async callable receiving the handle's ``stopped``
        interval: Seconds between ticks (defaults to settings, 1.0)
        immediately: Also run once shortly after starting instead of
            waiting a full interval
        on_error: Called with any exception the executor raises. Failures
            are always logged and never stop polling. A failing
            ``on_error`` is logged as well.

    Returns:
        PollHandle; call ``stop()`` to end polling.
    """
    settings = get_settings().poll
    handle = PollHandle(executor, on_error)
    if immediately:
        handle._kickoff = set_timeout(handle._tick, settings.immediate_delay)
    handle._timer = set_interval(handle._tick, interval if interval is not None else settings.interval)
    return handle
