"""cadence: asyncio control-flow primitives.

Fan-out/fan-in aggregation with fail-fast semantics, plus quiet-period
(debounce) and fixed-window (throttle) call-rate limiters.

Aggregation:

    from cadence import aggregate

    profile, orders = await aggregate([fetch_profile(uid), fetch_orders(uid)])

Limiters:

    from cadence import debounce, throttle

    @debounce(delay=0.5)
    def save(document: str) -> None: ...

    @throttle(window=0.1, trailing=True)
    def on_scroll(offset: int) -> None: ...

    save("draft 1")
    save("draft 2")  # only "draft 2" is saved, 0.5s from now
"""

from cadence.aggregate import aggregate, aggregate_sync
from cadence.config import LimiterConfig, Strategy
from cadence.decorator import debounce, throttle
from cadence.limiters.base import BaseLimiter, Invocation
from cadence.limiters.debounce import Debouncer
from cadence.limiters.registry import build_limiter
from cadence.limiters.throttle import Throttler

__all__ = [
    "BaseLimiter",
    "Debouncer",
    "Invocation",
    "LimiterConfig",
    "Strategy",
    "Throttler",
    "aggregate",
    "aggregate_sync",
    "build_limiter",
    "debounce",
    "throttle",
]

__version__ = "0.1.0"
