"""Layered codec: one backend's bytes carried inside another's envelope.

Models hybrid pipelines where a compact binary payload is shipped inside an
outer container format. Encoding runs inner then outer; decoding strictly
reverses that order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import Codec, CodecFactory, DecodeError, EncodeError


@dataclass(frozen=True, slots=True)
class Envelope:
    """Outer record wrapping an inner codec's encoded bytes."""

    payload: bytes


class LayeredCodec:
    """Composes an inner codec (for the root type) with an outer codec (for `Envelope`)."""

    def __init__(self, inner: Codec[Any], outer: Codec[Envelope]) -> None:
        self.inner = inner
        self.outer = outer
        self.name = layered_name(inner.name, outer.name)

    def wrap(self, payload: bytes) -> bytes:
        return self.outer.encode(Envelope(payload=payload))

    def unwrap(self, buffer: bytes) -> bytes:
        return self.outer.decode(buffer).payload

    def encode(self, value: Any) -> bytes:
        try:
            return self.wrap(self.inner.encode(value))
        except Exception as exc:
            raise EncodeError(self.name, str(exc)) from exc

    def decode(self, buffer: bytes) -> Any:
        # Failures in either layer surface under the composed name.
        try:
            return self.inner.decode(self.unwrap(buffer))
        except Exception as exc:
            raise DecodeError(self.name, str(exc)) from exc

    def size(self, buffer: bytes) -> int:
        # Includes the outer envelope's framing.
        return len(buffer)

    def __repr__(self) -> str:
        return f"LayeredCodec(inner={self.inner.name!r}, outer={self.outer.name!r})"


def layered_name(inner: str, outer: str) -> str:
    return f"{inner} + {outer}"


def layered(inner: CodecFactory, outer: CodecFactory) -> CodecFactory:
    """Builds a factory producing `LayeredCodec(inner(root), outer(Envelope))`."""

    def factory(root: type) -> LayeredCodec:
        return LayeredCodec(inner(root), outer(Envelope))

    return factory
