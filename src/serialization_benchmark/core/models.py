"""Data model shared by the harness: seeds, operations, measurements."""

from __future__ import annotations

import math
import random
import statistics
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Tuple

_U64 = 1 << 64


class Operation(str, Enum):
    """Measured codec operation."""

    SERIALIZE = "serialize"
    DESERIALIZE = "deserialize"


@dataclass(frozen=True, slots=True)
class GenerationSeed:
    """Seed pair for the dataset stream.

    Defaults are the first twenty digits of pi, so nothing is up our sleeves.
    """

    state: int = 3141592653
    stream: int = 5897932384

    def __post_init__(self) -> None:
        for name in ("state", "stream"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value < _U64:
                raise ValueError(f"seed {name} must be an unsigned 64-bit int, got {value!r}")

    def rng(self) -> random.Random:
        """Returns a fresh stream positioned at the start of this seed."""

        return random.Random((self.state << 64) | self.stream)

    def to_dict(self) -> Dict[str, int]:
        return {"state": self.state, "stream": self.stream}


def group_label(family: str, backend: str) -> str:
    return f"{family}/{backend}"


def benchmark_id(family: str, backend: str, operation: Operation) -> str:
    return f"{group_label(family, backend)}/{operation.value}"


@dataclass(frozen=True, slots=True)
class LatencyDistribution:
    """Per-iteration wall-clock samples in nanoseconds."""

    samples: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.samples:
            raise ValueError("a latency distribution needs at least one sample")

    @property
    def mean(self) -> float:
        return statistics.fmean(self.samples)

    @property
    def median(self) -> float:
        return float(statistics.median(self.samples))

    @property
    def stdev(self) -> float:
        return statistics.stdev(self.samples) if len(self.samples) > 1 else 0.0

    @property
    def minimum(self) -> int:
        return min(self.samples)

    @property
    def maximum(self) -> int:
        return max(self.samples)

    @property
    def p95(self) -> float:
        return self.percentile(95.0)

    def percentile(self, pct: float) -> float:
        """Linear interpolation between closest ranks."""

        ordered = sorted(self.samples)
        k = (len(ordered) - 1) * (pct / 100.0)
        lo = math.floor(k)
        hi = math.ceil(k)
        return ordered[lo] + (ordered[hi] - ordered[lo]) * (k - lo)

    def to_dict(self) -> Dict[str, float]:
        return {
            "samples": len(self.samples),
            "mean_ns": self.mean,
            "median_ns": self.median,
            "stdev_ns": self.stdev,
            "min_ns": float(self.minimum),
            "max_ns": float(self.maximum),
            "p95_ns": self.p95,
        }


@dataclass(frozen=True, slots=True)
class LatencyResult:
    family: str
    backend: str
    operation: Operation
    distribution: LatencyDistribution

    @property
    def label(self) -> str:
        return benchmark_id(self.family, self.backend, self.operation)


@dataclass(frozen=True, slots=True)
class SizeResult:
    family: str
    backend: str
    size: int


@dataclass(frozen=True, slots=True)
class BackendFailure:
    """An encode or decode error that removed a backend from one family."""

    family: str
    backend: str
    stage: str
    error_type: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "family": self.family,
            "backend": self.backend,
            "label": group_label(self.family, self.backend),
            "stage": self.stage,
            "error_type": self.error_type,
            "message": self.message,
        }


@dataclass(slots=True)
class BenchmarkResults:
    """Append-only collection of the measurements of one run."""

    latencies: Dict[Tuple[str, str, Operation], LatencyResult] = field(default_factory=dict)
    sizes: Dict[Tuple[str, str], SizeResult] = field(default_factory=dict)
    failures: List[BackendFailure] = field(default_factory=list)

    def record_latency(self, result: LatencyResult) -> None:
        key = (result.family, result.backend, result.operation)
        if key in self.latencies:
            raise ValueError(f"latency already recorded for {result.label}")
        self.latencies[key] = result

    def record_size(self, result: SizeResult) -> None:
        key = (result.family, result.backend)
        if key in self.sizes:
            raise ValueError(f"size already recorded for {group_label(*key)}")
        self.sizes[key] = result

    def record_failure(self, failure: BackendFailure) -> None:
        self.failures.append(failure)

    def latency(self, family: str, backend: str, operation: Operation) -> LatencyResult | None:
        return self.latencies.get((family, backend, operation))

    def size(self, family: str, backend: str) -> int | None:
        result = self.sizes.get((family, backend))
        return result.size if result else None

    def groups(self) -> Iterator[Tuple[str, str]]:
        """(family, backend) pairs with a recorded size, in recording order."""

        yield from self.sizes

    def families(self) -> List[str]:
        seen: Dict[str, None] = {}
        for family, _ in self.sizes:
            seen.setdefault(family)
        for failure in self.failures:
            seen.setdefault(failure.family)
        return list(seen)
