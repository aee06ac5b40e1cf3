"""Fixed-window (throttle) limiter with an optional trailing edge."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cadence.limiters.base import BaseLimiter, Invocation, logger

if TYPE_CHECKING:
    from collections.abc import Callable


class Throttler(BaseLimiter):
    """Run the wrapped callable at most once per ``window`` seconds.

    How it works:
        - OPEN (no timer armed): the call runs immediately with its own
          arguments and one timer is armed for ``window``.
        - CLOSED: calls are dropped. The timer is not rearmed.
        - With ``trailing=True`` the last call dropped while CLOSED runs
          when the window elapses, and opens a fresh window of its own.
          Nothing runs if no call arrived during the window.
        - The window is armed before the callable runs, so a call that
          raises still uses up its window.

    Example::

        window=1.0s

        t=0.0s scroll(a)  -> scroll(a) runs, window closes until 1.0s
        t=0.4s scroll(b)  -> dropped (trailing: pending=scroll(b))
        t=0.8s scroll(c)  -> dropped (trailing: pending=scroll(c))
        t=1.0s timer      -> window opens (trailing: scroll(c) runs)

    Args:
        fn: The callable to wrap.
        window: Window length in seconds.
        trailing: Run the last dropped call at the end of the window.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        window: float,
        *,
        trailing: bool = False,
    ) -> None:
        super().__init__(fn, window)
        self.trailing = trailing

    @property
    def window(self) -> float:
        return self.delay

    @property
    def is_open(self) -> bool:
        """True when the next call would run immediately."""
        return self._timer_handle is None

    def _clone(self) -> Throttler:
        return Throttler(self._fn, self.delay, trailing=self.trailing)

    def flush(self) -> Any:
        """Run a pending trailing call now, as if the window had elapsed."""
        if self._pending is None:
            return None
        if self._timer_handle is not None:
            self._timer_handle.cancel()
            self._timer_handle = None
        return self._release()

    def _handle(self, invocation: Invocation) -> Any:
        if self._timer_handle is None:
            return self._lead(invocation)
        if self.trailing:
            self._pending = invocation
        return None

    def _lead(self, invocation: Invocation) -> Any:
        self._arm(self.delay)
        return self._invoke(invocation)

    def _on_timer(self) -> None:
        self._timer_handle = None
        self._release()

    def _release(self) -> Any:
        invocation, self._pending = self._pending, None
        if invocation is None:
            logger.debug("%r: window open", self)
            return None
        logger.debug("%r: window elapsed, invoking trailing call", self)
        return self._lead(invocation)

    def __repr__(self) -> str:
        name = getattr(self._fn, "__qualname__", repr(self._fn))
        return f"Throttler({name}, window={self.delay}, trailing={self.trailing})"
