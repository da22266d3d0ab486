"""Batch execution with settled outcomes.

Run one executor over many items, concurrently or one at a time, optionally
in chunks, and collect a ``Settled`` per call instead of raising.
"""

from __future__ import annotations

from .runners import concurrent, concurrents, consecutive, consecutives, parallel, sequential
from .sequence import append, chunk
from .settled import Fulfilled, Rejected, Settled, SettledStatus, fit_arity, outcome

__all__ = [
    "concurrent",
    "concurrents",
    "consecutive",
    "consecutives",
    "parallel",
    "sequential",
    "append",
    "chunk",
    "Fulfilled",
    "Rejected",
    "Settled",
    "SettledStatus",
    "fit_arity",
    "outcome",
]
