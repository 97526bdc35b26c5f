"""Shared fixtures: small deterministic datasets and a fast timing engine."""

from __future__ import annotations

import pytest

from serialization_benchmark.core.models import GenerationSeed
from serialization_benchmark.datasets import FAMILIES, generate_dataset

from tests.fixtures import SMALL_COUNTS, CountingTimer


@pytest.fixture(autouse=True)
def _no_crash_hooks(monkeypatch, tmp_path):
    monkeypatch.setenv("SERIALIZATION_BENCHMARK_DISABLE_CRASH_HOOKS", "1")
    monkeypatch.setenv("SERIALIZATION_BENCHMARK_ERROR_DIR", str(tmp_path / "error_reports"))


@pytest.fixture
def seed() -> GenerationSeed:
    return GenerationSeed()


@pytest.fixture
def timer() -> CountingTimer:
    return CountingTimer()


@pytest.fixture(params=sorted(FAMILIES))
def small_dataset(request, seed):
    name = request.param
    return name, generate_dataset(name, seed, SMALL_COUNTS[name])
