"""Tests for LimiterConfig and Strategy."""

import pytest

from cadence.config import LimiterConfig, Strategy


class TestStrategy:
    def test_debounce_value(self):
        assert Strategy.DEBOUNCE == "debounce"

    def test_throttle_value(self):
        assert Strategy.THROTTLE == "throttle"

    def test_all_are_str(self):
        for s in Strategy:
            assert isinstance(s, str)


class TestLimiterConfig:
    def test_defaults(self):
        cfg = LimiterConfig()
        assert cfg.delay == 0.3
        assert cfg.strategy is Strategy.DEBOUNCE
        assert cfg.max_wait is None
        assert cfg.trailing is False

    def test_throttle_with_trailing(self):
        cfg = LimiterConfig(delay=1.0, strategy=Strategy.THROTTLE, trailing=True)
        assert cfg.trailing is True

    def test_delay_zero_raises(self):
        with pytest.raises(ValueError, match="delay must be positive"):
            LimiterConfig(delay=0)

    def test_delay_negative_raises(self):
        with pytest.raises(ValueError, match="delay must be positive"):
            LimiterConfig(delay=-1.0)

    def test_max_wait_zero_raises(self):
        with pytest.raises(ValueError, match="max_wait must be positive"):
            LimiterConfig(delay=1.0, max_wait=0)

    def test_max_wait_less_than_delay_raises(self):
        with pytest.raises(ValueError, match="max_wait.*must be >= delay"):
            LimiterConfig(delay=5.0, max_wait=2.0)

    def test_max_wait_rejected_for_throttle(self):
        with pytest.raises(ValueError, match="max_wait only applies"):
            LimiterConfig(delay=1.0, strategy=Strategy.THROTTLE, max_wait=2.0)

    def test_trailing_rejected_for_debounce(self):
        with pytest.raises(ValueError, match="trailing only applies"):
            LimiterConfig(delay=1.0, trailing=True)

    def test_frozen(self):
        cfg = LimiterConfig()
        with pytest.raises(AttributeError):
            cfg.delay = 5.0  # type: ignore[misc]
