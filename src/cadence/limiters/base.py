"""Abstract base class that both call-rate limiters build on."""

from __future__ import annotations

import functools
import inspect
import logging
import weakref
from abc import ABC, abstractmethod
from asyncio import AbstractEventLoop, Task, TimerHandle, ensure_future, get_running_loop
from typing import TYPE_CHECKING, Any, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("cadence.limiters")


class Invocation(NamedTuple):
    """Calling context captured when a limiter is called."""

    target: Any
    args: tuple[Any, ...]
    kwargs: dict[str, Any]


def _expire(ref: weakref.ref[BaseLimiter]) -> None:
    # Timers only hold a weak reference, a discarded limiter never fires.
    limiter = ref()
    if limiter is not None:
        limiter._on_timer()


class BaseLimiter(ABC):
    """Base class for the call-rate limiters.

    A limiter wraps a callable and decides when (and whether) each call
    actually reaches it. Every limiter owns exactly one timer slot and one
    pending-invocation slot; neither is ever shared with another limiter.

    Stored on a class, a limiter acts like a method: each instance gets its
    own limiter (cached in the instance ``__dict__``, like
    :func:`functools.cached_property`) that passes the instance as target.

    Subclasses implement :meth:`_handle` (a call arrived),
    :meth:`_on_timer` (the armed timer fired) and :meth:`flush`, and
    override :meth:`_clone` when they take extra options.

    Args:
        fn: The callable to wrap. Coroutine functions are scheduled as
            tasks on the running loop when they execute.
        delay: Timer duration in seconds. Must be positive.
    """

    def __init__(self, fn: Callable[..., Any], delay: float) -> None:
        if not callable(fn):
            raise TypeError(f"expected a callable, got {type(fn).__name__}")

        if delay <= 0:
            raise ValueError(f"delay must be positive, got {delay}")

        self._fn = fn
        self.delay = delay
        self._timer_handle: TimerHandle | None = None
        self._pending: Invocation | None = None
        self._tasks: set[Task[Any]] = set()
        self._loop: AbstractEventLoop | None = None
        self._closed = False
        self._target: Any = None
        self._attrname: str | None = None
        functools.update_wrapper(self, fn, updated=())

    @property
    def pending(self) -> Invocation | None:
        """The invocation that will run when the timer fires, if any."""
        return self._pending

    @property
    def armed(self) -> bool:
        return self._timer_handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.request(Invocation(self._target, args, kwargs))

    def __set_name__(self, owner: type, name: str) -> None:
        self._attrname = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self

        name = self._attrname or getattr(self, "__name__", None)
        try:
            cache = instance.__dict__
        except AttributeError:
            raise TypeError(
                f"{type(instance).__name__!r} instances need a __dict__ "
                f"to hold their own {type(self).__name__}"
            ) from None

        bound = cache.get(name)
        if bound is None:
            bound = self._clone()
            bound._target = instance
            bound._attrname = name
            cache[name] = bound
        return bound

    def request(self, invocation: Invocation) -> Any:
        """Submit a captured call to the limiter."""
        self._ensure_open()
        self._get_loop()
        return self._handle(invocation)

    def cancel(self) -> None:
        """Disarm the timer and drop the pending invocation."""
        if self._timer_handle is not None:
            self._timer_handle.cancel()
            self._timer_handle = None
            logger.debug("%r: timer cancelled", self)
        self._pending = None

    def close(self) -> None:
        """Cancel any scheduled execution and reject further calls."""
        if self._closed:
            return
        self.cancel()
        self._closed = True
        logger.debug("%r: closed", self)

    @abstractmethod
    def flush(self) -> Any:
        """Run the pending invocation now, if there is one."""

    @abstractmethod
    def _handle(self, invocation: Invocation) -> Any: ...

    @abstractmethod
    def _on_timer(self) -> None: ...

    def _clone(self) -> BaseLimiter:
        """A fresh, unarmed limiter with the same callable and options."""
        return type(self)(self._fn, self.delay)

    def _get_loop(self) -> AbstractEventLoop:
        loop = get_running_loop()
        if loop is not self._loop:
            if self._loop is not None:
                # Timers and pending calls belong to the old loop.
                logger.debug("%r: event loop changed, dropping scheduled state", self)
                self._timer_handle = None
                self.cancel()
                self._tasks.clear()
            self._loop = loop
        return loop

    def _arm(self, delay: float) -> None:
        if self._timer_handle is not None:
            self._timer_handle.cancel()
        self._timer_handle = self._get_loop().call_later(delay, _expire, weakref.ref(self))
        logger.debug("%r: timer armed for %.3fs", self, delay)

    def _invoke(self, invocation: Invocation) -> Any:
        target, args, kwargs = invocation
        if target is None:
            result = self._fn(*args, **kwargs)
        else:
            result = self._fn(target, *args, **kwargs)

        if inspect.isawaitable(result):
            task = ensure_future(result, loop=self._get_loop())
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)
            return task
        return result

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError(f"{type(self).__name__} is closed")

    def __enter__(self) -> BaseLimiter:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        name = getattr(self._fn, "__qualname__", repr(self._fn))
        return f"{type(self).__name__}({name}, delay={self.delay})"
