"""Test helpers shared across modules."""

from __future__ import annotations

from typing import Callable

from serialization_benchmark.core.models import LatencyDistribution

SMALL_COUNTS = {"log": 50, "mesh": 200, "minecraft_savedata": 5, "mk48": 10}


class CountingTimer:
    """Calls the measured function a fixed number of times with fake latencies."""

    def __init__(self, iterations: int = 2) -> None:
        self.iterations = iterations
        self.calls = 0

    def measure(self, fn: Callable[[], object]) -> LatencyDistribution:
        for _ in range(self.iterations):
            fn()
            self.calls += 1
        return LatencyDistribution(samples=tuple(range(100, 100 + self.iterations)))
