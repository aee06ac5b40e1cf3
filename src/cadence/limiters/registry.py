"""Maps each ``Strategy`` enum member to a callable that builds a ``BaseLimiter``.

When you add a new strategy:

1. Add a variant to the ``Strategy`` enum in ``config.py``.
2. Add an entry to ``REGISTRY`` pointing to a factory that wraps a
   callable according to a :class:`LimiterConfig`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from cadence.config import LimiterConfig, Strategy
from cadence.limiters.base import BaseLimiter
from cadence.limiters.debounce import Debouncer
from cadence.limiters.throttle import Throttler

LimiterFactory = Callable[[Callable[..., Any], LimiterConfig], BaseLimiter]

REGISTRY: dict[Strategy, LimiterFactory] = {
    Strategy.DEBOUNCE: lambda fn, cfg: Debouncer(fn, cfg.delay, max_wait=cfg.max_wait),
    Strategy.THROTTLE: lambda fn, cfg: Throttler(fn, cfg.delay, trailing=cfg.trailing),
}


def build_limiter(fn: Callable[..., Any], config: LimiterConfig) -> BaseLimiter:
    """Wrap *fn* in the limiter selected by *config.strategy*."""
    factory = REGISTRY.get(config.strategy)
    if not factory:
        raise ValueError(
            f"Unknown strategy: {config.strategy!r}. Registered: {', '.join(s.value for s in REGISTRY)}"
        )
    return factory(fn, config)
