"""Configuration types for the cadence limiters."""

from dataclasses import dataclass
from enum import StrEnum


class Strategy(StrEnum):
    """Available call-rate strategies.

    DEBOUNCE: Quiet-period limiter. Every call restarts the timer,
              the latest call runs once the calls stop.
    THROTTLE: Window limiter. The first call runs immediately and
              opens a window during which further calls are dropped.
    """

    DEBOUNCE = "debounce"
    THROTTLE = "throttle"


@dataclass(frozen=True, slots=True)
class LimiterConfig:
    """Configuration for a limiter built through the registry.

    Attributes:
        delay: Quiet period (debounce) or window length (throttle) in seconds.
        strategy: The limiter strategy to use.
        max_wait: Debounce only. Maximum time in seconds a burst can defer
                  execution. None means no maximum wait.
        trailing: Throttle only. Run the last call seen while the window
                  was closed once the window elapses.
    """

    delay: float = 0.3
    strategy: Strategy = Strategy.DEBOUNCE
    max_wait: float | None = None
    trailing: bool = False

    def __post_init__(self) -> None:
        if self.delay <= 0:
            raise ValueError(f"delay must be positive, got {self.delay}")

        if self.max_wait is not None:
            if self.strategy is not Strategy.DEBOUNCE:
                raise ValueError("max_wait only applies to the debounce strategy")
            if self.max_wait <= 0:
                raise ValueError(f"max_wait must be positive or None, got {self.max_wait}")
            if self.max_wait < self.delay:
                raise ValueError(f"max_wait ({self.max_wait}) must be >= delay ({self.delay})")

        if self.trailing and self.strategy is not Strategy.THROTTLE:
            raise ValueError("trailing only applies to the throttle strategy")
