"""Wall-clock timing engine.

The runner only depends on `TimingEngine.measure`; `StableTimer` is the default
engine used by the CLI.
"""

from __future__ import annotations

import gc
import math
import statistics
import time
from dataclasses import dataclass
from typing import Callable, List, Protocol

from .models import LatencyDistribution


class TimingEngine(Protocol):
    def measure(self, fn: Callable[[], object]) -> LatencyDistribution:
        """Calls `fn` repeatedly and returns per-call latencies."""


@dataclass(frozen=True, slots=True)
class StableTimer:
    """Samples until the mean is stable or the sample budget runs out.

    Stops once at least `min_samples` samples spanning `min_time_ns` were taken
    and the relative standard error of the mean is at most `target_rel_stderr`.
    Never takes more than `max_samples`. GC is collected up front and disabled
    while sampling.
    """

    warmup: int = 3
    min_samples: int = 10
    max_samples: int = 1_000
    min_time_ns: int = 200_000_000
    target_rel_stderr: float = 0.01

    def __post_init__(self) -> None:
        if self.warmup < 0:
            raise ValueError("warmup must be non-negative")
        if not 1 <= self.min_samples <= self.max_samples:
            raise ValueError("need 1 <= min_samples <= max_samples")

    def measure(self, fn: Callable[[], object]) -> LatencyDistribution:
        for _ in range(self.warmup):
            fn()

        samples: List[int] = []
        gc.collect()
        gc_was_enabled = gc.isenabled()
        gc.disable()
        try:
            elapsed = 0
            while len(samples) < self.max_samples:
                start = time.perf_counter_ns()
                fn()
                sample = time.perf_counter_ns() - start
                samples.append(sample)
                elapsed += sample
                if len(samples) >= self.min_samples and elapsed >= self.min_time_ns and self._stable(samples):
                    break
        finally:
            if gc_was_enabled:
                gc.enable()

        return LatencyDistribution(samples=tuple(samples))

    def _stable(self, samples: List[int]) -> bool:
        if len(samples) < 2:
            return False
        mean = statistics.fmean(samples)
        if mean == 0:
            return True
        stderr = statistics.stdev(samples) / math.sqrt(len(samples))
        return stderr / mean <= self.target_rel_stderr
