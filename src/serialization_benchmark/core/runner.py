"""Benchmark runner: verify, then measure, one (family, backend) group at a time."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping

import structlog

from serialization_benchmark.backends import Codec, CodecError, CodecRegistry, DecodeError

from .models import (
    BackendFailure,
    BenchmarkResults,
    LatencyResult,
    Operation,
    SizeResult,
    benchmark_id,
    group_label,
)
from .profiling import NullProfiler, Profiler, profiled
from .tasks import LoggingProgressReporter, ProgressReporter
from .timing import StableTimer, TimingEngine
from .verification import assert_round_trip


class BenchmarkRunner:
    """Drives every registered backend over each dataset, strictly sequentially.

    For each group the runner encodes once, verifies the round trip on that
    buffer, records its size, then times `serialize` on the dataset and
    `deserialize` on the same buffer. A `VerificationMismatch` aborts the run;
    encode/decode errors and codecs that fail to build only drop the affected group.
    """

    def __init__(
        self,
        registry: CodecRegistry,
        *,
        timer: TimingEngine | None = None,
        profiler: Profiler | None = None,
        profile_dir: Path | None = None,
        progress: ProgressReporter | None = None,
    ) -> None:
        self._registry = registry
        self._timer = timer or StableTimer()
        self._profiler = profiler or NullProfiler()
        self._profile_dir = Path(profile_dir) if profile_dir is not None else Path("profiles")
        self._progress = progress or LoggingProgressReporter()
        self._logger = structlog.get_logger(__name__)

    def run(self, datasets: Mapping[str, Any]) -> BenchmarkResults:
        """Benchmarks each `family -> dataset` entry into a fresh result set."""

        results = BenchmarkResults()
        total = len(datasets)
        for index, (family, data) in enumerate(datasets.items(), start=1):
            self._progress.update(f"benchmarking {family}", percentage=int(100 * (index - 1) / max(total, 1)))
            self.run_family(family, data, results)
        self._progress.update("benchmarks finished", percentage=100)
        return results

    def run_family(self, family: str, data: Any, results: BenchmarkResults) -> None:
        for name, factory in self._registry.items():
            try:
                codec = factory(type(data))
            except Exception as exc:
                self._fail(results, family, name, "setup", exc)
                continue
            self._run_group(family, codec, data, results)

    def _run_group(self, family: str, codec: Codec[Any], data: Any, results: BenchmarkResults) -> None:
        label = group_label(family, codec.name)
        log = self._logger.bind(group=label)
        log.info("benchmark-group-start")

        try:
            encoded = assert_round_trip(codec, data, family=family)
        except CodecError as exc:
            stage = "decode" if isinstance(exc, DecodeError) else "encode"
            self._fail(results, family, codec.name, stage, exc)
            return

        size = SizeResult(family=family, backend=codec.name, size=codec.size(encoded))
        log.info("encoded-size", bytes=size.size)

        latencies: List[LatencyResult] = []
        operations: Dict[Operation, Any] = {
            Operation.SERIALIZE: lambda: codec.encode(data),
            Operation.DESERIALIZE: lambda: codec.decode(encoded),
        }
        for operation, fn in operations.items():
            bench_id = benchmark_id(family, codec.name, operation)
            try:
                with profiled(self._profiler, bench_id, self._profile_dir):
                    distribution = self._timer.measure(fn)
            except CodecError as exc:
                self._fail(results, family, codec.name, operation.value, exc)
                return
            latencies.append(LatencyResult(family, codec.name, operation, distribution))
            log.info(
                "benchmark-measured",
                operation=operation.value,
                samples=len(distribution.samples),
                mean_ns=round(distribution.mean),
            )

        results.record_size(size)
        for latency in latencies:
            results.record_latency(latency)

    def _fail(self, results: BenchmarkResults, family: str, backend: str, stage: str, exc: Exception) -> None:
        self._logger.warning(
            "benchmark-group-failed",
            group=group_label(family, backend),
            stage=stage,
            error=str(exc),
        )
        results.record_failure(
            BackendFailure(
                family=family,
                backend=backend,
                stage=stage,
                error_type=type(exc).__name__,
                message=str(exc),
            )
        )
