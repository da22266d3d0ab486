"""Tests for wait_for."""

from __future__ import annotations

import asyncio
import time

import pytest

from timeable import wait_for


@pytest.mark.asyncio
async def test_resolves_when_predicate_holds() -> None:
    state = {"inflight": True}
    asyncio.get_running_loop().call_later(0.01, state.update, {"inflight": False})

    begin = time.monotonic()
    await wait_for(lambda: not state["inflight"], 1.0, 0.005)
    assert time.monotonic() - begin < 0.5


@pytest.mark.asyncio
async def test_resolves_at_deadline_without_error() -> None:
    begin = time.monotonic()
    assert await wait_for(lambda: False, 0.03, 0.005) is None
    assert time.monotonic() - begin >= 0.025


@pytest.mark.asyncio
async def test_default_interval_times_out_first() -> None:
    """With the 1s default interval, a short timeout ends the wait first."""
    begin = time.monotonic()
    await wait_for(lambda: True, 0.01)
    assert time.monotonic() - begin < 0.5


@pytest.mark.asyncio
async def test_interval_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from timeable.foundation.config import clear_settings_cache

    monkeypatch.setenv("TIMEABLE_WAIT_INTERVAL", "0.005")
    clear_settings_cache()
    calls: list[int] = []

    def predicate() -> bool:
        calls.append(1)
        return True

    await wait_for(predicate, 1.0)
    assert calls == [1]


@pytest.mark.asyncio
async def test_stops_checking_after_deadline() -> None:
    calls: list[int] = []

    def predicate() -> bool:
        calls.append(1)
        return False

    await wait_for(predicate, 0.02, 0.005)
    count = len(calls)
    await asyncio.sleep(0.03)
    assert len(calls) == count


@pytest.mark.asyncio
async def test_predicate_error_propagates() -> None:
    def predicate() -> bool:
        raise ValueError("broken predicate")

    with pytest.raises(ValueError, match="broken predicate"):
        await wait_for(predicate, 1.0, 0.005)
