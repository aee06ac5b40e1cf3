from cadence.limiters.base import BaseLimiter, Invocation
from cadence.limiters.debounce import Debouncer
from cadence.limiters.registry import build_limiter
from cadence.limiters.throttle import Throttler

__all__ = [
    "BaseLimiter",
    "Debouncer",
    "Invocation",
    "Throttler",
    "build_limiter",
]
