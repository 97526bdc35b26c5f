"""Full-size dataset scenarios from the default benchmark configuration."""

from __future__ import annotations

import pytest

from serialization_benchmark.backends import default_registry
from serialization_benchmark.core import BenchmarkRunner, GenerationSeed
from serialization_benchmark.core.verification import assert_round_trip
from serialization_benchmark.datasets import generate_dataset

from tests.fixtures import CountingTimer

PI_SEED = GenerationSeed(state=3141592653, stream=5897932384)


@pytest.mark.slow
def test_log_ten_thousand_records() -> None:
    first = generate_dataset("log", PI_SEED, 10_000)
    second = generate_dataset("log", PI_SEED, 10_000)

    assert len(first.logs) == 10_000
    assert first == second

    registry = default_registry()
    results = BenchmarkRunner(registry, timer=CountingTimer(iterations=1)).run({"log": first})

    assert not results.failures
    for backend in registry.names():
        codec = registry.factory(backend)(type(first))
        buffer = assert_round_trip(codec, first, family="log")
        assert results.size("log", backend) == len(buffer)


@pytest.mark.slow
def test_mesh_hundred_twenty_five_thousand_triangles() -> None:
    first = generate_dataset("mesh", PI_SEED, 125_000)
    second = generate_dataset("mesh", PI_SEED, 125_000)

    assert len(first.triangles) == 125_000
    assert first == second

    registry = default_registry().select(["msgspec-msgpack", "pickle", "msgspec-msgpack + pickle"])
    for backend in registry.names():
        codec = registry.factory(backend)(type(first))
        buffer = assert_round_trip(codec, first, family="mesh")
        assert codec.size(buffer) == len(buffer)
