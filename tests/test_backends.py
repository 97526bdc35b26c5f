"""Round-trip and error-wrapping tests for every available backend."""

from __future__ import annotations

import pytest

from serialization_benchmark.backends import (
    DecodeError,
    EncodeError,
    FunctionCodec,
    default_registry,
    json_codec,
    msgspec_msgpack_codec,
    pickle_codec,
)
from serialization_benchmark.datasets.log import Logs
from serialization_benchmark.datasets.mesh import Mesh

BACKENDS = default_registry().names()


@pytest.mark.parametrize("backend", BACKENDS)
def test_round_trip_law(backend: str, small_dataset) -> None:
    _, data = small_dataset
    codec = default_registry().factory(backend)(type(data))

    encoded = codec.encode(data)
    decoded = codec.decode(encoded)

    assert isinstance(encoded, bytes)
    assert decoded == data
    assert type(decoded) is type(data)
    assert codec.size(encoded) == len(encoded)


@pytest.mark.parametrize("backend", BACKENDS)
def test_encoding_is_deterministic(backend: str, small_dataset) -> None:
    _, data = small_dataset
    codec = default_registry().factory(backend)(type(data))

    assert codec.encode(data) == codec.encode(data)


@pytest.mark.parametrize("backend", BACKENDS)
def test_size_never_shrinks_with_more_records(backend: str, seed) -> None:
    from serialization_benchmark.datasets import generate_dataset

    sizes = []
    for count in (0, 1, 10, 50):
        data = generate_dataset("log", seed, count)
        codec = default_registry().factory(backend)(Logs)
        sizes.append(len(codec.encode(data)))

    assert sizes == sorted(sizes)


@pytest.mark.parametrize("backend", BACKENDS)
def test_garbage_raises_decode_error(backend: str) -> None:
    codec = default_registry().factory(backend)(Mesh)

    with pytest.raises(DecodeError) as info:
        codec.decode(b"\xc1\xff not a valid buffer")

    assert info.value.backend == codec.name


def test_decoding_wrong_shape_raises_decode_error(seed) -> None:
    from serialization_benchmark.datasets import generate_dataset

    data = generate_dataset("log", seed, 3)
    buffer = json_codec(Logs).encode(data)

    with pytest.raises(DecodeError):
        json_codec(Mesh).decode(buffer)


def test_pickle_rejects_unexpected_root_type(seed) -> None:
    from serialization_benchmark.datasets import generate_dataset

    buffer = pickle_codec(Logs).encode(generate_dataset("log", seed, 2))

    with pytest.raises(DecodeError, match="expected Mesh"):
        pickle_codec(Mesh).decode(buffer)


def test_unserializable_value_raises_encode_error() -> None:
    codec = msgspec_msgpack_codec(Logs)

    with pytest.raises(EncodeError):
        codec.encode(object())  # type: ignore[arg-type]


def test_function_codec_wraps_backend_exceptions() -> None:
    def explode(_):
        raise OverflowError("too big")

    codec = FunctionCodec("boom", explode, explode)

    with pytest.raises(EncodeError, match="boom: OverflowError: too big") as enc:
        codec.encode(1)
    assert isinstance(enc.value.__cause__, OverflowError)

    with pytest.raises(DecodeError, match="boom"):
        codec.decode(b"")


def test_codecs_do_not_mutate_input(seed) -> None:
    from serialization_benchmark.datasets import generate_dataset

    data = generate_dataset("minecraft_savedata", seed, 3)
    before = generate_dataset("minecraft_savedata", seed, 3)

    for backend in BACKENDS:
        codec = default_registry().factory(backend)(type(data))
        codec.decode(codec.encode(data))

    assert data == before


def _forbid_to_builtins(monkeypatch) -> None:
    import msgspec

    def forbidden(*args, **kwargs):
        raise AssertionError("encode must not convert to builtins first")

    monkeypatch.setattr(msgspec, "to_builtins", forbidden)


@pytest.mark.parametrize("family", ["log", "mk48"])
def test_orjson_encodes_dataclasses_natively(family: str, seed, monkeypatch) -> None:
    orjson = pytest.importorskip("orjson")
    import msgspec

    from serialization_benchmark.backends.orjson_codec import orjson_codec
    from serialization_benchmark.datasets import generate_dataset

    data = generate_dataset(family, seed, 3)
    expected = orjson.dumps(msgspec.to_builtins(data))
    codec = orjson_codec(type(data))
    _forbid_to_builtins(monkeypatch)

    encoded = codec.encode(data)

    assert encoded == expected
    assert codec.decode(encoded) == data


@pytest.mark.parametrize("family", ["log", "mk48"])
def test_ormsgpack_encodes_dataclasses_natively(family: str, seed, monkeypatch) -> None:
    ormsgpack = pytest.importorskip("ormsgpack")
    import msgspec

    from serialization_benchmark.backends.ormsgpack_codec import ormsgpack_codec
    from serialization_benchmark.datasets import generate_dataset

    data = generate_dataset(family, seed, 3)
    expected = ormsgpack.packb(msgspec.to_builtins(data, builtin_types=(bytes,)))
    codec = ormsgpack_codec(type(data))
    _forbid_to_builtins(monkeypatch)

    encoded = codec.encode(data)

    assert encoded == expected
    assert codec.decode(encoded) == data
