"""A short tour of every timeable primitive.

Run with ``python -m timeable.examples``.
"""

from __future__ import annotations

import asyncio

from .foundation import RejectedError, configure_logging, to_number
from .runtime.batch import chunk, concurrent, concurrents, consecutive, consecutives, parallel, sequential
from .runtime.concurrency import Pending, Reject, Resolve, poll, sleep, until_settled_or_timed_out, wait_for


async def _identity(value: object) -> object:
    return value


async def examples() -> str:
    flat = ["a", "b", "c"]
    nested = [["a", "b"], ["c"]]

    print("1. Chunk ->", chunk([1, 2, 3, 4], 2))

    await concurrent(flat, _identity)
    print("2. Concurrent -> ran", ", ".join(flat), "at once -> all fulfilled")

    await concurrents(nested, _identity)
    print("3. Concurrents -> ran groups", " + ".join(f"[{', '.join(g)}]" for g in nested), "-> all fulfilled")

    await consecutive(flat, _identity)
    print("4. Consecutive -> ran", " -> ".join(flat), "one by one -> all fulfilled")

    await consecutives(nested, _identity)
    print("5. Consecutives -> ran groups", " -> ".join(f"[{', '.join(g)}]" for g in nested), "-> all fulfilled")

    await parallel(flat, _identity)
    print("6. Parallel -> ran", ", ".join(flat), "in parallel -> all fulfilled")

    with poll(lambda stopped: None, 0.001) as handle:
        await sleep(0.003)
    print(f"7. Poll -> ticked {handle.runs} times until stopped")

    await sequential(flat, _identity)
    print("8. Sequential -> ran", " -> ".join(flat), "in series -> all fulfilled")

    await sleep(0.001)
    print("9. Sleep -> paused ~1ms")

    print('10. ToNumber -> "1" ->', to_number("1"))

    async def quick(resolve: Resolve, reject: Reject, pending: Pending) -> None:
        if pending():
            resolve(True)

    settled = await until_settled_or_timed_out(quick, lambda _, reject: reject(RejectedError("timeout")), 0.001)
    print("11. Settle -> finished before timeout -> return", settled)

    async def slow(resolve: Resolve, reject: Reject, pending: Pending) -> None:
        await sleep(0.003)
        if pending():
            resolve(True)

    try:
        timed_out = await until_settled_or_timed_out(slow, lambda _, reject: reject("timeout"), 0.002)
    except RejectedError:
        timed_out = False
    await sleep(0.002)
    print("12. Timeout -> took too long -> rejected -> return", timed_out)

    state = {"inflight": True}
    asyncio.get_running_loop().call_later(0.001, state.update, {"inflight": False})
    await wait_for(lambda: not state["inflight"], 0.003, 0.002)
    print("13. WaitFor -> waited ~3ms until condition met")

    return "Timeable Examples"


def main() -> None:
    configure_logging()
    print(asyncio.run(examples()))


if __name__ == "__main__":
    main()
