"""Tests for the backend plugin registry."""

from __future__ import annotations

import pytest

from serialization_benchmark.backends import CodecRegistry, default_registry, json_codec, pickle_codec


def test_default_registry_always_has_core_backends() -> None:
    names = default_registry().names()

    for name in ("json", "pickle", "msgspec-json", "msgspec-msgpack", "msgspec-msgpack + pickle"):
        assert name in names


def test_register_rejects_duplicates() -> None:
    registry = CodecRegistry([("json", json_codec)])

    with pytest.raises(ValueError, match="already registered"):
        registry.register("json", pickle_codec)


def test_select_keeps_requested_order_and_skips_missing() -> None:
    registry = CodecRegistry([("json", json_codec), ("pickle", pickle_codec)])

    selected = registry.select(["pickle", "not-installed", "json"])

    assert selected.names() == ["pickle", "json"]
    assert "not-installed" not in selected
    assert len(registry) == 2


def test_select_none_copies_everything() -> None:
    registry = CodecRegistry([("json", json_codec)])
    selected = registry.select(None)

    assert list(selected) == ["json"]
    assert selected is not registry


def test_empty_registry_is_valid() -> None:
    assert len(CodecRegistry()) == 0
