"""Decorator API for wrapping functions and methods in a limiter."""

from collections.abc import Callable
from typing import Any, TypeVar, overload

from cadence.config import LimiterConfig, Strategy
from cadence.limiters.base import BaseLimiter
from cadence.limiters.debounce import Debouncer
from cadence.limiters.registry import build_limiter
from cadence.limiters.throttle import Throttler

F = TypeVar("F", bound=Callable[..., Any])


@overload
def debounce(
    func: F,
    /,
) -> Debouncer: ...


@overload
def debounce(
    *,
    delay: float = 0.3,
    max_wait: float | None = None,
) -> Callable[[F], Debouncer]: ...


def debounce(
    func: F | None = None,
    /,
    *,
    delay: float = 0.3,
    max_wait: float | None = None,
) -> BaseLimiter | Callable[[F], BaseLimiter]:
    """Decorator that runs a function only after calls stop for ``delay`` seconds.

    Each call to the decorated function replaces the pending one; only the
    last call of a burst runs. Calls return ``None``. The returned object is
    a :class:`Debouncer`, so ``flush()``, ``cancel()`` and ``close()`` are
    available on it. Works on plain functions, methods and coroutine functions.

    Args:
        func: The function to decorate (when used without parentheses).
        delay: Quiet-period delay in seconds.
        max_wait: Maximum time in seconds a burst can defer execution,
                  or None for no limit.

    Examples:
    ```python
        @debounce(delay=0.5)
        def save(document: str) -> None:
            store.write(document)

        class Editor:
            @debounce
            async def autosave(self) -> None:
                await self.store.write(self.text)
    ```
    """
    config = LimiterConfig(delay=delay, strategy=Strategy.DEBOUNCE, max_wait=max_wait)

    def decorator(fn: F) -> BaseLimiter:
        return build_limiter(fn, config)

    if func is not None:
        return decorator(func)

    return decorator


@overload
def throttle(
    func: F,
    /,
) -> Throttler: ...


@overload
def throttle(
    *,
    window: float = 0.3,
    trailing: bool = False,
) -> Callable[[F], Throttler]: ...


def throttle(
    func: F | None = None,
    /,
    *,
    window: float = 0.3,
    trailing: bool = False,
) -> BaseLimiter | Callable[[F], BaseLimiter]:
    """Decorator that runs a function at most once per ``window`` seconds.

    The first call runs immediately and its return value is passed through;
    calls made before the window elapses are dropped and return ``None``.
    With ``trailing=True`` the last dropped call runs when the window closes.

    Args:
        func: The function to decorate (when used without parentheses).
        window: Window length in seconds.
        trailing: Run the last call seen during the window once it elapses.
    """
    config = LimiterConfig(delay=window, strategy=Strategy.THROTTLE, trailing=trailing)

    def decorator(fn: F) -> BaseLimiter:
        return build_limiter(fn, config)

    if func is not None:
        return decorator(func)

    return decorator
