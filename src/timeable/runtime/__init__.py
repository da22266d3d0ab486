"""Runtime - batch runners and timed concurrency primitives.

Contains: batch (settled outcomes, runners), concurrency (race, wait, poll, timers).
"""

from __future__ import annotations

from .batch import (
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
from .concurrency import (
    Interval,
    PollHandle,
    Timeout,
    poll,
    set_interval,
    set_timeout,
    sleep,
    until_settled_or_timed_out,
    wait_for,
)

__all__ = [
    # Batch
    "Fulfilled", "Rejected", "Settled", "SettledStatus",
    "append", "chunk", "outcome",
    "concurrent", "concurrents", "consecutive", "consecutives", "parallel", "sequential",
    # Concurrency
    "Interval", "Timeout", "set_interval", "set_timeout", "sleep",
    "PollHandle", "poll",
    "until_settled_or_timed_out", "wait_for",
]
