"""Sequence helpers shared by the batch runners."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Iterable, TypeVar, overload

from timeable.foundation.numeric import to_number

T = TypeVar("T")
S = TypeVar("S", bound=Sequence[object])


def group_size(size: object) -> int:
    """Normalize a loose size/concurrency argument; 0 means grouping is off."""
    return max(int(to_number(size)), 0)


@overload
def chunk(sequence: None, size: object = 0) -> None: ...


@overload
def chunk(sequence: S, size: object = 0) -> S | list[S]: ...


def chunk(sequence: S | None, size: object = 0) -> S | list[S] | None:
    """Split sequence into consecutive slices of ``size`` items.

    The final slice holds the remainder. With no usable size the original
    sequence object is returned as-is, not a copy.

    Example:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
        >>> items = [1, 2]
        >>> chunk(items) is items
        True
    """
    if sequence is None:
        return None
    step = group_size(size)
    if not step:
        return sequence
    return [sequence[i:i + step] for i in range(0, len(sequence), step)]  # type: ignore[misc]


def append(accumulator: MutableSequence[T], sequence: Iterable[T]) -> MutableSequence[T]:
    """Append every item of sequence onto accumulator in place and return accumulator."""
    accumulator.extend(sequence)
    return accumulator
