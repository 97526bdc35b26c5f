"""Report generation from benchmark results."""

from .report import BenchmarkReport, build_report, write_report

__all__ = ["BenchmarkReport", "build_report", "write_report"]
