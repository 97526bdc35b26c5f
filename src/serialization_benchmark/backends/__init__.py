"""Serialization backends and the registry of those available at run time."""

from __future__ import annotations

import structlog

from .base import Codec, CodecError, CodecFactory, DecodeError, EncodeError, FunctionCodec
from .layered import Envelope, LayeredCodec, layered, layered_name
from .msgspec_codec import msgspec_json_codec, msgspec_msgpack_codec
from .registry import CodecRegistry
from .stdlib import json_codec, pickle_codec

__all__ = [
	"Codec",
	"CodecError",
	"CodecFactory",
	"CodecRegistry",
	"DecodeError",
	"EncodeError",
	"Envelope",
	"FunctionCodec",
	"LayeredCodec",
	"default_registry",
	"json_codec",
	"layered",
	"layered_name",
	"msgspec_json_codec",
	"msgspec_msgpack_codec",
	"pickle_codec",
]

try:  # pragma: no cover - depends on orjson being installed
    from .orjson_codec import orjson_codec

    __all__.append("orjson_codec")
except ImportError:  # pragma: no cover - environment without orjson
    orjson_codec = None  # type: ignore[assignment]

try:  # pragma: no cover - depends on ormsgpack being installed
    from .ormsgpack_codec import ormsgpack_codec

    __all__.append("ormsgpack_codec")
except ImportError:  # pragma: no cover - environment without ormsgpack
    ormsgpack_codec = None  # type: ignore[assignment]


def default_registry() -> CodecRegistry:
    """Registry of every backend whose library is importable."""

    registry = CodecRegistry(
        [
            ("json", json_codec),
            ("pickle", pickle_codec),
            ("msgspec-json", msgspec_json_codec),
            ("msgspec-msgpack", msgspec_msgpack_codec),
        ]
    )
    for name, factory in (("orjson", orjson_codec), ("ormsgpack", ormsgpack_codec)):
        if factory is None:
            structlog.get_logger(__name__).debug("backend-unavailable", backend=name)
            continue
        registry.register(name, factory)

    registry.register(layered_name("msgspec-msgpack", "pickle"), layered(msgspec_msgpack_codec, pickle_codec))
    return registry
