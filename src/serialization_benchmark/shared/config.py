"""Run configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from serialization_benchmark.core.models import GenerationSeed

_ENV_BACKENDS = "SERIALIZATION_BENCHMARK_BACKENDS"
_ENV_SCALE = "SERIALIZATION_BENCHMARK_SCALE"
_ENV_OUTPUT_DIR = "SERIALIZATION_BENCHMARK_OUTPUT_DIR"


@dataclass(frozen=True, slots=True)
class BenchConfig:
    """Configuration of a single benchmark run."""

    output_dir: Path = Path("benchmark_reports")
    seed: GenerationSeed = field(default_factory=GenerationSeed)
    families: tuple[str, ...] | None = None
    backends: tuple[str, ...] | None = None
    scale: float = 1.0

    def __post_init__(self) -> None:
        if not self.scale > 0:
            raise ValueError(f"scale must be positive, got {self.scale!r}")

    @classmethod
    def default(cls) -> "BenchConfig":
        """Creates the default configuration."""

        return cls()

    @classmethod
    def from_env(cls) -> "BenchConfig":
        """Builds a configuration from `SERIALIZATION_BENCHMARK_*` variables.

        Unset or blank variables keep their defaults.
        """

        config = cls.default()

        backends = _split_names(os.getenv(_ENV_BACKENDS))
        if backends:
            config = replace(config, backends=backends)

        scale = (os.getenv(_ENV_SCALE) or "").strip()
        if scale:
            try:
                config = replace(config, scale=float(scale))
            except ValueError as exc:
                raise ValueError(f"{_ENV_SCALE} must be a number, got {scale!r}") from exc

        output_dir = (os.getenv(_ENV_OUTPUT_DIR) or "").strip()
        if output_dir:
            config = replace(config, output_dir=Path(output_dir))

        return config

    def scaled(self, count: int) -> int:
        """Applies `scale` to a record count, never going below one record."""

        return max(1, int(round(count * self.scale)))


def _split_names(raw: str | None) -> tuple[str, ...]:
    return tuple(part.strip() for part in (raw or "").split(",") if part.strip())
