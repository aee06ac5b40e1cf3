"""Shared fixtures for cadence tests."""

import asyncio
from typing import Any

import pytest


class Recorder:
    """Callable that records every call with the loop time it ran at."""

    def __init__(self) -> None:
        self.calls: list[tuple[float, tuple[Any, ...], dict[str, Any]]] = []

    def __call__(self, *args: Any, **kwargs: Any) -> tuple[Any, ...]:
        self.calls.append((asyncio.get_running_loop().time(), args, kwargs))
        return args

    @property
    def args(self) -> list[tuple[Any, ...]]:
        return [args for _, args, _ in self.calls]

    @property
    def times(self) -> list[float]:
        return [when for when, _, _ in self.calls]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def now():
    def _now() -> float:
        return asyncio.get_running_loop().time()

    return _now
