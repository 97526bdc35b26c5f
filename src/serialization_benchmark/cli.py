"""CLI entrypoint for running the serialization benchmarks and writing a report."""

from __future__ import annotations

import sys
from argparse import ArgumentParser, Namespace
from dataclasses import replace
from pathlib import Path

import structlog

from serialization_benchmark.core import CProfileProfiler, VerificationMismatch
from serialization_benchmark.datasets import FAMILIES
from serialization_benchmark.reporting import write_report
from serialization_benchmark.shared import (
    BenchConfig,
    configure_logging,
    install_crash_reporting,
    write_error_report,
)
from serialization_benchmark.suite import run_benchmarks


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="serialization-benchmark",
        description="Benchmark serialization backends on deterministic synthetic datasets.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for generated reports (default: benchmark_reports)",
    )
    parser.add_argument(
        "--stem",
        type=str,
        default="benchmark_report",
        help="Output filename stem (default: benchmark_report)",
    )
    parser.add_argument(
        "--format",
        action="append",
        dest="formats",
        choices=["json", "md"],
        help="Report format (can be provided multiple times). Default: json+md",
    )
    parser.add_argument(
        "--family",
        action="append",
        dest="families",
        choices=sorted(FAMILIES),
        help="Benchmark family to run (can be provided multiple times). Default: all",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=None,
        help="Multiplier applied to every family's record count (default: 1.0)",
    )
    parser.add_argument(
        "--profile-dir",
        type=Path,
        default=None,
        help="Write cProfile stats for every measured operation under this directory",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    return parser


def _config_from_args(args: Namespace) -> BenchConfig:
    config = BenchConfig.from_env()
    if args.output_dir is not None:
        config = replace(config, output_dir=args.output_dir)
    if args.families:
        config = replace(config, families=tuple(args.families))
    if args.scale is not None:
        config = replace(config, scale=args.scale)
    return config


def _run(args: Namespace) -> int:
    logger = structlog.get_logger(__name__)
    try:
        config = _config_from_args(args)
    except ValueError as exc:
        logger.error("invalid-configuration", error=str(exc))
        return 1

    formats = tuple(args.formats) if args.formats else ("json", "md")
    profiler = CProfileProfiler() if args.profile_dir is not None else None

    try:
        report = run_benchmarks(config, profiler=profiler, profile_dir=args.profile_dir)
    except VerificationMismatch as exc:
        error_report = write_error_report(
            exc,
            where="run_benchmarks",
            context={"family": exc.family, "backend": exc.backend},
        )
        logger.error("verification-failed", error=str(exc), report=str(error_report.path))
        return 2

    written = write_report(report, output_dir=config.output_dir, stem=args.stem, formats=formats)
    for path in written:
        print(path)

    logger.info(
        "benchmarks-complete",
        groups=len(report.results),
        failures=len(report.failures),
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=10 if args.verbose else 20)
    install_crash_reporting()
    return _run(args)


if __name__ == "__main__":
    sys.exit(main())
