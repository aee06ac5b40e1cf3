"""Tests for the limiter registry."""

import pytest

from cadence.config import LimiterConfig, Strategy
from cadence.limiters.debounce import Debouncer
from cadence.limiters.registry import REGISTRY, build_limiter
from cadence.limiters.throttle import Throttler


class TestBuildLimiter:
    def test_every_strategy_is_registered(self):
        assert set(REGISTRY) == set(Strategy)

    def test_debounce_returns_debouncer(self, recorder):
        limiter = build_limiter(recorder, LimiterConfig(strategy=Strategy.DEBOUNCE))
        assert isinstance(limiter, Debouncer)

    def test_throttle_returns_throttler(self, recorder):
        limiter = build_limiter(recorder, LimiterConfig(strategy=Strategy.THROTTLE))
        assert isinstance(limiter, Throttler)

    def test_debounce_passes_config_values(self, recorder):
        cfg = LimiterConfig(delay=1.5, max_wait=5.0)
        limiter = build_limiter(recorder, cfg)
        assert limiter.delay == 1.5
        assert limiter.max_wait == 5.0

    def test_throttle_passes_config_values(self, recorder):
        cfg = LimiterConfig(delay=0.8, strategy=Strategy.THROTTLE, trailing=True)
        limiter = build_limiter(recorder, cfg)
        assert limiter.window == 0.8
        assert limiter.trailing is True

    def test_unknown_strategy_raises(self, recorder):
        cfg = LimiterConfig()
        object.__setattr__(cfg, "strategy", "unknown")
        with pytest.raises(ValueError, match="Unknown strategy"):
            build_limiter(recorder, cfg)
