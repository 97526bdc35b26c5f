from __future__ import annotations

import base64

import msgspec
import orjson

from .base import Codec, FunctionCodec


def _default(obj):  # type: ignore[no-untyped-def]
    # orjson has no bytes type; base64 text is what msgspec.convert reads back.
    if isinstance(obj, bytes):
        return base64.b64encode(obj).decode("ascii")
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def orjson_codec(root: type) -> Codec:
    # orjson serializes dataclasses natively but cannot rebuild them.
    def encode(value) -> bytes:  # type: ignore[no-untyped-def]
        return orjson.dumps(value, default=_default)

    def decode(buffer: bytes):  # type: ignore[no-untyped-def]
        return msgspec.convert(orjson.loads(buffer), type=root)

    return FunctionCodec("orjson", encode, decode)
