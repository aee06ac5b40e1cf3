"""Fan-out/fan-in over a fixed set of awaitables with fail-fast semantics."""

from __future__ import annotations

import asyncio
import functools
import inspect
from typing import TYPE_CHECKING, Any, TypeVar

from cadence._sync import get_shared_loop

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable

T = TypeVar("T")


def aggregate(operations: Iterable[Awaitable[T]]) -> asyncio.Future[list[T]]:
    """Combine *operations* into one future.

    The returned future resolves with the results in input order once every
    operation has succeeded, or fails with the exception of whichever
    operation failed first. A cancelled operation counts as a failure with
    :class:`asyncio.CancelledError`. Once the aggregate has settled, later
    outcomes are still observed (so asyncio never reports them as
    unretrieved) but change nothing.

    Coroutines are scheduled as tasks on the running loop; futures and tasks
    are observed as they are. Nothing is ever cancelled here, including when
    the returned future itself is cancelled.

    Every element is checked before anything is scheduled: a non-awaitable
    raises :class:`TypeError` and none of the given coroutines run.

    Must be called with a running event loop.

    Example::

        users, orders = await aggregate([fetch_users(), fetch_orders()])
    """
    loop = asyncio.get_running_loop()
    ops = list(operations)

    for op in ops:
        if not inspect.isawaitable(op):
            # Nothing has been scheduled yet; close coroutines so none of them run.
            for other in ops:
                if inspect.iscoroutine(other):
                    other.close()
            raise TypeError(f"aggregate() expects awaitables, got {type(op).__name__}")

    members = [asyncio.ensure_future(op, loop=loop) for op in ops]
    outer: asyncio.Future[list[T]] = loop.create_future()

    if not members:
        outer.set_result([])
        return outer

    results: list[Any] = [None] * len(members)
    remaining = len(members)

    def observe(index: int, member: asyncio.Future[T]) -> None:
        nonlocal remaining
        if member.cancelled():
            if not outer.done():
                outer.set_exception(asyncio.CancelledError())
            return

        exc = member.exception()
        if outer.done():
            return

        if exc is not None:
            outer.set_exception(exc)
            return

        results[index] = member.result()
        remaining -= 1
        if remaining == 0:
            outer.set_result(results)

    for index, member in enumerate(members):
        member.add_done_callback(functools.partial(observe, index))

    return outer


def aggregate_sync(operations: Iterable[Awaitable[T]]) -> list[T]:
    """Blocking :func:`aggregate` for synchronous callers.

    Runs on the shared background event loop, so *operations* must be
    coroutines (or awaitables not bound to another loop).
    """
    pending = list(operations)

    async def _run() -> list[T]:
        return await aggregate(pending)

    return get_shared_loop().run(_run())
