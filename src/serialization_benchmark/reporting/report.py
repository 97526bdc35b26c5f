"""Benchmark report generation (JSON/Markdown)."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from serialization_benchmark.core.models import BenchmarkResults, GenerationSeed, Operation, group_label


@dataclass(frozen=True, slots=True)
class BenchmarkReport:
    created_at: str
    seed: dict[str, int]
    families: dict[str, int]
    results: list[dict]
    failures: list[dict]

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False, indent=2)

    def to_markdown(self) -> str:
        lines: list[str] = []
        lines.append("# Serialization Benchmark Report")
        lines.append("")
        lines.append(f"Generated: {self.created_at}")
        lines.append(f"Seed: state={self.seed['state']} stream={self.seed['stream']}")
        lines.append("")

        for family, count in self.families.items():
            lines.append(f"## {family}")
            lines.append("")
            lines.append(f"Records: {count}")
            lines.append("")

            rows = [r for r in self.results if r["family"] == family]
            if rows:
                lines.append("| backend | serialize (mean) | deserialize (mean) | size (bytes) |")
                lines.append("|---|---:|---:|---:|")
                for row in rows:
                    lines.append(
                        f"| {row['backend']} "
                        f"| {_format_mean(row[Operation.SERIALIZE.value])} "
                        f"| {_format_mean(row[Operation.DESERIALIZE.value])} "
                        f"| {row['size']} |"
                    )
                lines.append("")

            failed = [f for f in self.failures if f["family"] == family]
            if failed:
                lines.append("### Failures")
                for failure in failed:
                    lines.append(f"- {failure['label']} ({failure['stage']}): {failure['message']}")
                lines.append("")

        return "\n".join(lines).rstrip() + "\n"


def _format_mean(stats: dict | None) -> str:
    if not stats:
        return "-"
    return _format_ns(stats["mean_ns"])


def _format_ns(value: float) -> str:
    for unit, scale in (("s", 1e9), ("ms", 1e6), ("µs", 1e3)):
        if value >= scale:
            return f"{value / scale:.2f} {unit}"
    return f"{value:.0f} ns"


def build_report(
    results: BenchmarkResults,
    *,
    seed: GenerationSeed,
    families: Mapping[str, int],
) -> BenchmarkReport:
    """Flattens `results` into the labelled `{family}/{backend}` report rows."""

    rows: list[dict] = []
    for family, backend in results.groups():
        row: dict = {
            "family": family,
            "backend": backend,
            "label": group_label(family, backend),
            "size": results.size(family, backend),
        }
        for operation in Operation:
            latency = results.latency(family, backend, operation)
            row[operation.value] = latency.distribution.to_dict() if latency else None
        rows.append(row)

    return BenchmarkReport(
        created_at=datetime.now(timezone.utc).isoformat(),
        seed=seed.to_dict(),
        families=dict(families),
        results=rows,
        failures=[failure.to_dict() for failure in results.failures],
    )


def write_report(
    report: BenchmarkReport,
    *,
    output_dir: Path,
    stem: str = "benchmark_report",
    formats: tuple[str, ...] = ("json", "md"),
) -> list[Path]:
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    if "json" in formats:
        path = output_dir / f"{stem}.json"
        path.write_text(report.to_json(), encoding="utf-8")
        written.append(path)

    if "md" in formats:
        path = output_dir / f"{stem}.md"
        path.write_text(report.to_markdown(), encoding="utf-8")
        written.append(path)

    return written
