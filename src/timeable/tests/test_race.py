"""Tests for until_settled_or_timed_out."""

from __future__ import annotations

import asyncio

import pytest

from timeable import RejectedError, sleep, until_settled_or_timed_out


@pytest.mark.asyncio
async def test_resolved_before_deadline() -> None:
    """Executor wins; timeout executor never runs."""
    timeout_calls: list[int] = []

    async def executor(resolve, reject, pending) -> None:
        assert pending()
        resolve("executor")

    def on_timeout(resolve, reject) -> None:
        timeout_calls.append(1)
        resolve("timeout")

    assert await until_settled_or_timed_out(executor, on_timeout, 0.01) == "executor"
    await sleep(0.03)
    assert timeout_calls == []


@pytest.mark.asyncio
async def test_sync_executor() -> None:
    result = await until_settled_or_timed_out(
        lambda resolve, reject, pending: resolve(42),
        lambda resolve, reject: resolve(0),
        0.05,
    )
    assert result == 42


@pytest.mark.asyncio
async def test_executor_rejection_propagates() -> None:
    async def executor(resolve, reject, pending) -> None:
        reject(ValueError("executor"))

    with pytest.raises(ValueError, match="executor"):
        await until_settled_or_timed_out(executor, lambda resolve, reject: resolve("timeout"), 0.05)


@pytest.mark.asyncio
async def test_executor_exception_propagates() -> None:
    async def executor(resolve, reject, pending) -> None:
        raise KeyError("boom")

    with pytest.raises(KeyError):
        await until_settled_or_timed_out(executor, lambda resolve, reject: resolve("timeout"), 0.05)


@pytest.mark.asyncio
async def test_sync_executor_exception_propagates() -> None:
    def executor(resolve, reject, pending) -> None:
        raise KeyError("boom")

    with pytest.raises(KeyError):
        await until_settled_or_timed_out(executor, lambda resolve, reject: resolve("timeout"), 0.05)


@pytest.mark.asyncio
async def test_timed_out_resolved() -> None:
    """Late resolve from a slow executor is ignored."""
    pending_after: list[bool] = []

    async def executor(resolve, reject, pending) -> None:
        await sleep(0.03)
        pending_after.append(pending())
        resolve("executor")

    result = await until_settled_or_timed_out(executor, lambda resolve, reject: resolve("timeout"), 0.01)
    assert result == "timeout"
    await sleep(0.04)
    assert pending_after == [False]


@pytest.mark.asyncio
async def test_timed_out_rejected_with_plain_reason() -> None:
    async def executor(resolve, reject, pending) -> None:
        await sleep(0.03)
        resolve("executor")

    with pytest.raises(RejectedError) as exc:
        await until_settled_or_timed_out(executor, lambda resolve, reject: reject("timeout"), 0.01)
    assert exc.value.reason == "timeout"
    await sleep(0.04)


@pytest.mark.asyncio
async def test_late_executor_rejection_is_ignored() -> None:
    async def executor(resolve, reject, pending) -> None:
        await sleep(0.03)
        reject("executor")

    result = await until_settled_or_timed_out(executor, lambda resolve, reject: resolve("timeout"), 0.01)
    assert result == "timeout"
    await sleep(0.04)


@pytest.mark.asyncio
async def test_late_executor_exception_is_ignored() -> None:
    async def executor(resolve, reject, pending) -> None:
        await sleep(0.03)
        raise RuntimeError("too late")

    result = await until_settled_or_timed_out(executor, lambda resolve, reject: resolve("timeout"), 0.01)
    assert result == "timeout"
    await sleep(0.04)


@pytest.mark.asyncio
async def test_async_timeout_executor() -> None:
    async def executor(resolve, reject, pending) -> None:
        await sleep(0.05)

    async def on_timeout(resolve, reject) -> None:
        await sleep(0.005)
        resolve("async timeout")

    assert await until_settled_or_timed_out(executor, on_timeout, 0.01) == "async timeout"
    await sleep(0.06)


@pytest.mark.asyncio
async def test_timer_released_on_caller_cancellation() -> None:
    timeout_calls: list[int] = []

    async def executor(resolve, reject, pending) -> None:
        pass

    def on_timeout(resolve, reject) -> None:
        timeout_calls.append(1)

    task = asyncio.ensure_future(until_settled_or_timed_out(executor, on_timeout, 0.02))
    await sleep(0.005)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    await sleep(0.04)
    assert timeout_calls == []
