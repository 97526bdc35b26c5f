"""Tests for the round-trip verification gate."""

from __future__ import annotations

import pytest

from serialization_benchmark.backends import FunctionCodec, msgspec_msgpack_codec
from serialization_benchmark.core.verification import VerificationMismatch, assert_round_trip, verify
from serialization_benchmark.datasets import generate_dataset
from serialization_benchmark.datasets.log import Logs


def test_verify_uses_structural_equality(seed) -> None:
    a = generate_dataset("log", seed, 3)
    b = generate_dataset("log", seed, 3)

    assert a is not b
    assert verify(a, b)


def test_verify_detects_differences(seed) -> None:
    a = generate_dataset("log", seed, 3)

    assert not verify(a, Logs(logs=a.logs[:2]))


def test_verify_requires_same_type() -> None:
    assert not verify((1, 2), [1, 2])


def test_assert_round_trip_returns_verified_buffer(seed) -> None:
    data = generate_dataset("mk48", seed, 3)
    codec = msgspec_msgpack_codec(type(data))

    buffer = assert_round_trip(codec, data, family="mk48")

    assert buffer == codec.encode(data)


def test_assert_round_trip_raises_on_mismatch(seed) -> None:
    data = generate_dataset("log", seed, 3)
    lossy = FunctionCodec("lossy", lambda value: b"x", lambda buffer: Logs(logs=()))

    with pytest.raises(VerificationMismatch) as info:
        assert_round_trip(lossy, data, family="log")

    assert info.value.backend == "lossy"
    assert info.value.family == "log"
    assert "log/lossy" in str(info.value)
