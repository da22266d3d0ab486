"""Tests for loose numeric coercion."""

from __future__ import annotations

from decimal import Decimal

import pytest

from timeable import to_number


@pytest.mark.parametrize(
    ("value", "default", "expected"),
    [
        (None, 0, 0),
        (None, 1, 1),
        (False, 1, 0),
        (True, 1, 1),
        ("", 1, 0),
        ("a", 1, 1),
        ([], 1, 0),
        ({}, 0, 0),
        ({}, 1, 1),
        (0, 1, 0),
        (1, 1, 1),
        (2, 1, 2),
    ],
)
def test_truth_table(value: object, default: int, expected: int) -> None:
    """Zero-like inputs come back as 0, unreadable ones as the default."""
    assert to_number(value, default) == expected


def test_default_is_zero() -> None:
    assert to_number(None) == 0
    assert to_number("x") == 0


def test_strings() -> None:
    assert to_number("1") == 1
    assert to_number(" 2.5 ") == 2.5
    assert to_number("   ", 7) == 0
    assert to_number("0x10") == 16
    assert to_number("1e3") == 1000.0
    assert to_number("1_000", 3) == 3


def test_non_finite_falls_back() -> None:
    assert to_number(float("nan"), 4) == 4
    assert to_number(float("inf"), 4) == 4
    assert to_number("Infinity", 4) == 4
    assert to_number(-float("inf"), 4) == 4


def test_sequences() -> None:
    assert to_number([5], 1) == 5
    assert to_number(["3"], 1) == 3
    assert to_number([None], 1) == 0
    assert to_number([1, 2], 9) == 9
    assert to_number((), 9) == 0


def test_single_boolean_element_is_not_numeric() -> None:
    """[True] reads as the string "true", unlike a bare True."""
    assert to_number([True], 7) == 7
    assert to_number([False], 7) == 7
    assert to_number([[True]], 7) == 7
    assert to_number(True, 7) == 1


def test_other_numbers() -> None:
    assert to_number(-2, 1) == -2
    assert to_number(Decimal("1.5")) == 1.5
    assert to_number(object(), 6) == 6
    assert to_number(b"1", 6) == 6
