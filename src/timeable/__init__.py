"""timeable - timeout races, non-overlapping pollers and batch runners for asyncio.

Quick Start:
    >>> from timeable import parallel, poll, until_settled_or_timed_out, wait_for
    >>>
    >>> # Run a batch, two at a time, collecting successes and failures
    >>> results = await parallel(urls, fetch, 2)
    >>> [r.value for r in results if r.is_fulfilled]
    >>>
    >>> # Race work against a deadline
    >>> value = await until_settled_or_timed_out(
    ...     work, lambda resolve, reject: resolve("fallback"), timeout=1.0,
    ... )
    >>>
    >>> # Poll without overlapping runs
    >>> handle = poll(refresh, interval=5.0, immediately=True)
    >>> handle.stop()
    >>>
    >>> # Wait for a condition, at most 10 seconds
    >>> await wait_for(lambda: job.done, timeout=10.0, interval=0.2)

All durations are in seconds.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Foundation
from .foundation import (
    RejectedError,
    TimeableError,
    TimeableSettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
    to_number,
)

# Batch
from .runtime.batch import (
    Fulfilled,
    Rejected,
    Settled,
    SettledStatus,
    append,
    chunk,
    concurrent,
    concurrents,
    consecutive,
    consecutives,
    outcome,
    parallel,
    sequential,
)

# Timed primitives
from .runtime.concurrency import (
    PollHandle,
    poll,
    sleep,
    until_settled_or_timed_out,
    wait_for,
)

__all__ = [
    "__version__",
    # Foundation
    "RejectedError", "TimeableError",
    "TimeableSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "to_number",
    # Batch
    "Fulfilled", "Rejected", "Settled", "SettledStatus",
    "append", "chunk", "outcome",
    "concurrent", "concurrents", "consecutive", "consecutives", "parallel", "sequential",
    # Timed primitives
    "PollHandle", "poll", "sleep", "until_settled_or_timed_out", "wait_for",
]
