"""End-to-end benchmark run: generate datasets, measure, build the report."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import structlog

from serialization_benchmark.backends import CodecRegistry, default_registry
from serialization_benchmark.core import BenchmarkRunner, NullProfiler, Profiler, StableTimer, TimingEngine
from serialization_benchmark.datasets import FAMILIES, generate_dataset, get_family
from serialization_benchmark.reporting import BenchmarkReport, build_report
from serialization_benchmark.shared.config import BenchConfig

logger = structlog.get_logger(__name__)


def generate_datasets(config: BenchConfig) -> Dict[str, Any]:
    """One immutable dataset per selected family, each from a fresh stream of the seed."""

    names = config.families or tuple(FAMILIES)
    datasets: Dict[str, Any] = {}
    for name in names:
        family = get_family(name)
        count = config.scaled(family.count)
        logger.info("generating-dataset", family=name, count=count)
        datasets[name] = generate_dataset(family, config.seed, count)
    return datasets


def run_benchmarks(
    config: BenchConfig,
    *,
    registry: CodecRegistry | None = None,
    timer: TimingEngine | None = None,
    profiler: Profiler | None = None,
    profile_dir: Path | None = None,
) -> BenchmarkReport:
    """Runs every selected family against every available backend.

    Raises `VerificationMismatch` if any backend fails its round trip.
    """

    registry = (registry or default_registry()).select(config.backends)
    logger.info("backends-selected", backends=registry.names())

    datasets = generate_datasets(config)
    runner = BenchmarkRunner(
        registry,
        timer=timer or StableTimer(),
        profiler=profiler or NullProfiler(),
        profile_dir=profile_dir,
    )
    results = runner.run(datasets)

    counts = {name: len(get_family(name).records(data)) for name, data in datasets.items()}
    return build_report(results, seed=config.seed, families=counts)
