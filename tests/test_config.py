"""Tests for run configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from serialization_benchmark.core.models import GenerationSeed
from serialization_benchmark.shared.config import BenchConfig


def test_default_config() -> None:
    config = BenchConfig.default()

    assert config.seed == GenerationSeed(3141592653, 5897932384)
    assert config.families is None
    assert config.backends is None
    assert config.scale == 1.0


def test_from_env_reads_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SERIALIZATION_BENCHMARK_BACKENDS", " json, ,pickle ")
    monkeypatch.setenv("SERIALIZATION_BENCHMARK_SCALE", "0.5")
    monkeypatch.setenv("SERIALIZATION_BENCHMARK_OUTPUT_DIR", str(tmp_path))

    config = BenchConfig.from_env()

    assert config.backends == ("json", "pickle")
    assert config.scale == 0.5
    assert config.output_dir == Path(tmp_path)


def test_from_env_ignores_blank_values(monkeypatch) -> None:
    monkeypatch.setenv("SERIALIZATION_BENCHMARK_BACKENDS", "  ")
    monkeypatch.delenv("SERIALIZATION_BENCHMARK_SCALE", raising=False)

    assert BenchConfig.from_env().backends is None


def test_from_env_rejects_bad_scale(monkeypatch) -> None:
    monkeypatch.setenv("SERIALIZATION_BENCHMARK_SCALE", "fast")

    with pytest.raises(ValueError, match="SERIALIZATION_BENCHMARK_SCALE"):
        BenchConfig.from_env()


@pytest.mark.parametrize("scale", [0.0, -1.0])
def test_scale_must_be_positive(scale: float) -> None:
    with pytest.raises(ValueError):
        BenchConfig(scale=scale)


def test_scaled_never_drops_below_one() -> None:
    assert BenchConfig(scale=0.0001).scaled(500) == 1
    assert BenchConfig(scale=0.1).scaled(10_000) == 1_000
