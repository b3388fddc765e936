"""Shared fixtures: a manually advanced clock for debounce-driven tests."""

from __future__ import annotations

import pytest


class FakeClock:
    """Monotonic clock that only moves when ``advance`` is called."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
