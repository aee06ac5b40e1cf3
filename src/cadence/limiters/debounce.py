"""Quiet-period (debounce) limiter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cadence.limiters.base import BaseLimiter, Invocation, logger

if TYPE_CHECKING:
    from collections.abc import Callable


class Debouncer(BaseLimiter):
    """Run the wrapped callable once calls have stopped for ``delay`` seconds.

    How it works:
        - Every call replaces the pending invocation and restarts the timer.
        - When the timer expires, the latest call runs exactly once.
        - ``max_wait`` caps how long a continuous burst can defer execution.
          The single timer is armed for whichever deadline comes first.

    Example::

        delay=0.3s

        t=0.0s save(1)    -> pending=save(1), timer fires at 0.3s
        t=0.1s save(2)    -> pending=save(2), timer restarted, fires at 0.4s
        t=0.4s timer      -> save(2) runs, save(1) never does

    Args:
        fn: The callable to wrap.
        delay: Quiet period in seconds.
        max_wait: Maximum time in seconds between the first call of a burst
                  and execution. ``None`` disables the cap.
    """

    def __init__(
        self,
        fn: Callable[..., Any],
        delay: float,
        *,
        max_wait: float | None = None,
    ) -> None:
        super().__init__(fn, delay)

        if max_wait is not None and max_wait <= 0:
            raise ValueError(f"max_wait must be positive, got {max_wait}")

        if max_wait is not None and max_wait < delay:
            raise ValueError(f"max_wait ({max_wait}) must be >= delay ({delay})")

        self.max_wait = max_wait
        self._burst_deadline: float | None = None

    def _clone(self) -> Debouncer:
        return Debouncer(self._fn, self.delay, max_wait=self.max_wait)

    def flush(self) -> Any:
        """Run the pending call immediately and return its result.

        Returns ``None`` when nothing is pending.
        """
        if self._pending is None:
            return None
        if self._timer_handle is not None:
            self._timer_handle.cancel()
            self._timer_handle = None
        return self._fire()

    def cancel(self) -> None:
        super().cancel()
        self._burst_deadline = None

    def _handle(self, invocation: Invocation) -> None:
        now = self._get_loop().time()

        if self._pending is None and self.max_wait is not None:
            self._burst_deadline = now + self.max_wait

        self._pending = invocation

        timeout = self.delay
        if self._burst_deadline is not None:
            timeout = min(timeout, max(0.0, self._burst_deadline - now))

        self._arm(timeout)

    def _on_timer(self) -> None:
        self._timer_handle = None
        self._fire()

    def _fire(self) -> Any:
        invocation, self._pending = self._pending, None
        self._burst_deadline = None
        if invocation is None:
            return None
        logger.debug("%r: quiet period elapsed, invoking", self)
        return self._invoke(invocation)

    def __repr__(self) -> str:
        name = getattr(self._fn, "__qualname__", repr(self._fn))
        return f"Debouncer({name}, delay={self.delay}, max_wait={self.max_wait})"
