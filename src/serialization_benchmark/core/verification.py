"""Round-trip correctness gate run before any timing is trusted."""

from __future__ import annotations

from typing import Any, TypeVar

from serialization_benchmark.backends import Codec

T = TypeVar("T")


class VerificationMismatch(RuntimeError):
    """A decoded value differs from the original; fatal to the whole run."""

    def __init__(self, backend: str, family: str | None = None) -> None:
        where = f"{family}/{backend}" if family else backend
        super().__init__(f"{where}: decoded value does not equal the original")
        self.backend = backend
        self.family = family


def verify(original: Any, decoded: Any) -> bool:
    """Structural equality, never identity."""

    return type(decoded) is type(original) and decoded == original


def assert_round_trip(codec: Codec[T], value: T, *, family: str | None = None) -> bytes:
    """Encodes, decodes and compares once; returns the verified buffer.

    `EncodeError`/`DecodeError` from the codec propagate unchanged.
    """

    buffer = codec.encode(value)
    decoded = codec.decode(buffer)
    if not verify(value, decoded):
        raise VerificationMismatch(codec.name, family)
    return buffer
