from __future__ import annotations

import msgspec
import ormsgpack

from .base import Codec, FunctionCodec


def ormsgpack_codec(root: type) -> Codec:
    # Dataclasses, enums and bytes pack natively; only decoding needs a typed rebuild.
    def decode(buffer: bytes):  # type: ignore[no-untyped-def]
        return msgspec.convert(ormsgpack.unpackb(buffer), type=root)

    return FunctionCodec("ormsgpack", ormsgpack.packb, decode)
