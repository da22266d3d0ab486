"""Loose numeric coercion.

``to_number`` decides whether a loosely-typed "concurrency" or "size"
argument is switched on. It follows JavaScript's ``Number()`` conversion and
then keeps the result only when its reciprocal is finite. Zero passes that
test (``1/0`` is infinite), so every zero-like input comes back as ``0``
rather than as the default; ``nan`` and infinities fall back to the default.

    >>> to_number("2")
    2
    >>> to_number("a", 1)
    1
    >>> to_number([], 1)
    0
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence
from decimal import Decimal

Number = int | float

_RADIX_PREFIXES = ("0x", "0o", "0b")


def _coerce_str(text: str) -> Number | None:
    text = text.strip()
    if not text:
        return 0
    if text.lower().startswith(_RADIX_PREFIXES):
        try:
            return int(text, 0)
        except ValueError:
            return None
    if "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def _coerce(value: object) -> Number | None:
    """JavaScript-style ``Number(value)``; ``None`` stands for NaN."""
    match value:
        case None:
            return None
        case bool():
            return int(value)
        case int() | float():
            return value
        case Decimal() | numbers.Real():
            return float(value)
        case str():
            return _coerce_str(value)
        case Sequence() if not isinstance(value, (bytes, bytearray)):
            if len(value) == 0:
                return 0
            if len(value) == 1:
                item = value[0]
                # Read through the item's string form: [True] is "true", not 1.
                if item is None:
                    return 0
                if isinstance(item, bool):
                    return None
                return _coerce(item)
            return None
    return None


def to_number(value: object, default: Number = 0) -> Number:
    """Coerce value to a finite number, or return default.

    Args:
        value: Anything; ``None`` means absent.
        default: Returned when value has no finite numeric reading.

    Returns:
        The coerced number (``0`` included) or ``default``.
    """
    number = _coerce(value)
    if number is None or math.isnan(number) or math.isinf(number):
        return default
    return number
