"""Timed primitives on a single asyncio loop.

Key Components:
    - until_settled_or_timed_out: race work against a deadline fallback
    - wait_for: wait for a predicate, giving up quietly at a deadline
    - poll: periodic runs that never overlap
    - Timeout / Interval: cancellable timer handles; sleep

Example:
    >>> from timeable.runtime.concurrency import poll, wait_for
    >>> handle = poll(refresh, interval=5.0)
    >>> await wait_for(lambda: cache.ready, timeout=30.0, interval=0.5)
    >>> handle.stop()
"""

from __future__ import annotations

from .poll import PollHandle, poll
from .race import Pending, Reject, Resolve, until_settled_or_timed_out, wait_for
from .timers import Interval, Timeout, set_interval, set_timeout, sleep

__all__ = [
    "PollHandle",
    "poll",
    "Pending",
    "Reject",
    "Resolve",
    "until_settled_or_timed_out",
    "wait_for",
    "Interval",
    "Timeout",
    "set_interval",
    "set_timeout",
    "sleep",
]
