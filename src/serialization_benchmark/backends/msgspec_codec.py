"""Typed msgspec backends (JSON and MessagePack)."""

from __future__ import annotations

import msgspec

from .base import Codec, FunctionCodec


def msgspec_json_codec(root: type) -> Codec:
    encoder = msgspec.json.Encoder()
    decoder = msgspec.json.Decoder(root)
    return FunctionCodec("msgspec-json", encoder.encode, decoder.decode)


def msgspec_msgpack_codec(root: type) -> Codec:
    encoder = msgspec.msgpack.Encoder()
    decoder = msgspec.msgpack.Decoder(root)
    return FunctionCodec("msgspec-msgpack", encoder.encode, decoder.decode)
