"""Tests for timer handles and sleep."""

from __future__ import annotations

import asyncio
import time

import pytest

from timeable import sleep
from timeable.runtime.concurrency import Interval, set_interval, set_timeout


@pytest.mark.asyncio
async def test_sleep_waits() -> None:
    begin = time.monotonic()
    await sleep(0.02)
    assert time.monotonic() - begin >= 0.015


@pytest.mark.asyncio
async def test_timeout_fires_once() -> None:
    fired: list[int] = []
    timer = set_timeout(lambda: fired.append(1), 0.01)
    assert timer.active
    await asyncio.sleep(0.03)
    assert fired == [1]
    assert not timer.active


@pytest.mark.asyncio
async def test_timeout_cancel_is_idempotent() -> None:
    fired: list[int] = []
    timer = set_timeout(lambda: fired.append(1), 0.01)
    timer.cancel()
    timer.cancel()
    await asyncio.sleep(0.03)
    assert fired == []


@pytest.mark.asyncio
async def test_interval_repeats_until_cancelled() -> None:
    ticks: list[int] = []
    ticker = set_interval(lambda: ticks.append(1), 0.01)
    await asyncio.sleep(0.055)
    ticker.cancel()
    count = len(ticks)
    assert 2 <= count <= 6
    await asyncio.sleep(0.03)
    assert len(ticks) == count
    assert not ticker.active


@pytest.mark.asyncio
async def test_interval_can_cancel_itself() -> None:
    ticks: list[int] = []

    def tick() -> None:
        ticks.append(1)
        ticker.cancel()

    ticker = set_interval(tick, 0.005)
    await asyncio.sleep(0.03)
    assert ticks == [1]


def test_timers_need_running_loop() -> None:
    with pytest.raises(RuntimeError):
        set_timeout(lambda: None, 1.0)


def test_interval_fire_before_start_raises() -> None:
    ticker = Interval(lambda: None, 0.01)
    with pytest.raises(RuntimeError, match="not started"):
        ticker._fire()
    assert not ticker.active
