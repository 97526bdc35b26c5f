"""Codec adapter contract shared by every serialization backend."""

from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, TypeVar

T = TypeVar("T")


class CodecError(RuntimeError):
    """A backend failed to produce or consume a buffer."""

    def __init__(self, backend: str, message: str) -> None:
        super().__init__(f"{backend}: {message}")
        self.backend = backend


class EncodeError(CodecError):
    """Encoding a value failed."""


class DecodeError(CodecError):
    """Decoding a buffer failed."""


class Codec(Protocol[T]):
    """Uniform encode/decode/size interface for one backend and one root type."""

    name: str

    def encode(self, value: T) -> bytes:
        """Serializes `value`; raises `EncodeError` on failure."""

    def decode(self, buffer: bytes) -> T:
        """Deserializes `buffer`; raises `DecodeError` on failure."""

    def size(self, buffer: bytes) -> int:
        """Byte length of an encoded buffer."""


CodecFactory = Callable[[type], Codec[Any]]


class FunctionCodec(Generic[T]):
    """Adapts a pair of plain `dumps`/`loads` style callables to `Codec`.

    Any exception raised by the backend is re-raised as `EncodeError` or
    `DecodeError` carrying the backend name.
    """

    def __init__(
        self,
        name: str,
        encode: Callable[[T], bytes],
        decode: Callable[[bytes], T],
    ) -> None:
        self.name = name
        self._encode = encode
        self._decode = decode

    def encode(self, value: T) -> bytes:
        try:
            return self._encode(value)
        except Exception as exc:
            raise EncodeError(self.name, f"{type(exc).__name__}: {exc}") from exc

    def decode(self, buffer: bytes) -> T:
        try:
            return self._decode(buffer)
        except Exception as exc:
            raise DecodeError(self.name, f"{type(exc).__name__}: {exc}") from exc

    def size(self, buffer: bytes) -> int:
        return len(buffer)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
