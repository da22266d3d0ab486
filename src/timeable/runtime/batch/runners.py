"""Batch runners: run an executor over a sequence under an ordering policy.

Two families, each with a flat and a grouped variant:
    - concurrent / concurrents: start every call, then wait for all
    - consecutive / consecutives: one call at a time, in order
    - parallel / sequential: pick the flat or grouped variant from concurrency

Every runner resolves to one ``Settled`` per executor call, in the order the
calls were started. Executor failures become ``Rejected`` entries; a runner
never raises because an executor did.

Example:
    >>> results = await parallel(urls, fetch, concurrency=10)
    >>> failed = [r.reason for r in results if r.is_rejected]
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Sequence
from typing import Callable, TypeVar

from .sequence import append, chunk, group_size
from .settled import Settled, fit_arity, outcome

logger = logging.getLogger("timeable.batch")

T = TypeVar("T")
U = TypeVar("U")

Executor = Callable[..., U | Awaitable[U]]


def _report(name: str, results: list[Settled[U]]) -> list[Settled[U]]:
    if logger.isEnabledFor(logging.DEBUG):
        rejected = sum(1 for r in results if r.is_rejected)
        logger.debug(f"{name}: {len(results)} settled, {rejected} rejected")
    return results


# ─────────────────────────────────────────────────────────────────────────────
# Concurrent: all calls in flight at once
# ─────────────────────────────────────────────────────────────────────────────

async def concurrent(
    sequence: Sequence[T],
    executor: Executor[U],
    concurrency: object = 0,
) -> list[Settled[U]]:
    """Call executor on every item (or chunk) without waiting in between.

    With a usable ``concurrency`` the sequence is chunked first and the
    executor receives each chunk. The executor is offered
    ``(value, index, groups)``.

    Returns:
        Settled results in the order the calls were started.

    Example:
        >>> await concurrent(["a", "b", "c"], lambda v: v, 2)
        [Fulfilled(value=['a', 'b']), Fulfilled(value=['c'])]
    """
    groups = chunk(sequence, concurrency)
    invoke = fit_arity(executor)
    results = await asyncio.gather(
        *(outcome(invoke, value, index, groups) for index, value in enumerate(groups))
    )
    return _report("concurrent", list(results))


async def concurrents(
    groups: Sequence[Sequence[T]],
    executor: Executor[U],
    concurrency: object = 0,
) -> list[Settled[U]]:
    """Run ``concurrent`` over successive runs of groups, one run at a time.

    With a usable ``concurrency``, each run is a slice of ``concurrency``
    top-level elements handed to ``concurrent`` as a whole. Otherwise each
    top-level element is its own run and its items are executed concurrently.
    """
    accumulator: list[Settled[U]] = []
    step = group_size(concurrency)
    if step:
        for index in range(0, len(groups), step):
            append(accumulator, await concurrent(groups[index:index + step], executor))
    else:
        for group in groups:
            append(accumulator, await concurrent(group, executor))
    return _report("concurrents", accumulator)


# ─────────────────────────────────────────────────────────────────────────────
# Consecutive: strict turn-taking
# ─────────────────────────────────────────────────────────────────────────────

async def consecutive(
    sequence: Sequence[T],
    executor: Executor[U],
    concurrency: object = 0,
) -> list[Settled[U]]:
    """Call executor on every item (or chunk), one call at a time.

    The executor is offered ``(value, index, sequence, accumulator)`` where
    ``index`` is the start position in ``sequence`` and ``accumulator`` is the
    list of results recorded so far. Call ``k + 1`` starts only after call
    ``k``'s result has been appended.
    """
    accumulator: list[Settled[U]] = []
    invoke = fit_arity(executor)
    step = group_size(concurrency)
    if step:
        for index in range(0, len(sequence), step):
            accumulator.append(
                await outcome(invoke, sequence[index:index + step], index, sequence, accumulator)
            )
    else:
        for index, value in enumerate(sequence):
            accumulator.append(await outcome(invoke, value, index, sequence, accumulator))
    return _report("consecutive", accumulator)


async def consecutives(
    groups: Sequence[Sequence[T]],
    executor: Executor[U],
    concurrency: object = 0,
) -> list[Settled[U]]:
    """Run ``consecutive`` over successive runs of groups, one run at a time."""
    accumulator: list[Settled[U]] = []
    step = group_size(concurrency)
    if step:
        for index in range(0, len(groups), step):
            append(accumulator, await consecutive(groups[index:index + step], executor))
    else:
        for group in groups:
            append(accumulator, await consecutive(group, executor))
    return _report("consecutives", accumulator)


# ─────────────────────────────────────────────────────────────────────────────
# Facades
# ─────────────────────────────────────────────────────────────────────────────

async def parallel(
    sequence: Sequence[T],
    executor: Executor[U],
    concurrency: object = 0,
) -> list[Settled[U]]:
    """Run executor on every item, at most ``concurrency`` in flight at once.

    Without a usable ``concurrency`` all items run at once.

    Example:
        >>> await parallel(["a", "b", "c"], fetch, 2)   # a, b together; then c
    """
    if group_size(concurrency):
        return await concurrents(chunk(sequence, concurrency), executor, concurrency)
    return await concurrent(sequence, executor)


async def sequential(
    sequence: Sequence[T],
    executor: Executor[U],
    concurrency: object = 0,
) -> list[Settled[U]]:
    """Run executor on every item one at a time, in chunk-sized rounds if given."""
    if group_size(concurrency):
        return await consecutives(chunk(sequence, concurrency), executor, concurrency)
    return await consecutive(sequence, executor)
