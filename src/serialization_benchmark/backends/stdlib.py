"""Backends built on the standard library: `json` and `pickle`.

`json` works on builtins only, so values are lowered with `msgspec.to_builtins`
and rebuilt with `msgspec.convert`, the same path the other untyped backends use.
"""

from __future__ import annotations

import json
import pickle

import msgspec

from .base import Codec, FunctionCodec


def json_codec(root: type) -> Codec:
    def encode(value) -> bytes:  # type: ignore[no-untyped-def]
        return json.dumps(msgspec.to_builtins(value), separators=(",", ":")).encode("utf-8")

    def decode(buffer: bytes):  # type: ignore[no-untyped-def]
        return msgspec.convert(json.loads(buffer), type=root)

    return FunctionCodec("json", encode, decode)


def pickle_codec(root: type) -> Codec:
    def encode(value) -> bytes:  # type: ignore[no-untyped-def]
        return pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL)

    def decode(buffer: bytes):  # type: ignore[no-untyped-def]
        value = pickle.loads(buffer)
        if not isinstance(value, root):
            raise TypeError(f"expected {root.__name__}, got {type(value).__name__}")
        return value

    return FunctionCodec("pickle", encode, decode)
