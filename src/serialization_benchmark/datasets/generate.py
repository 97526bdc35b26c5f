"""Deterministic synthetic data helpers.

Every record type of a benchmark family implements `generate(rng)`; the
helpers here compose those into datasets. All randomness comes from the
`random.Random` stream handed in, so the same seed always yields the same
dataset.
"""

from __future__ import annotations

import random
import string
from typing import Callable, Protocol, Tuple, Type, TypeVar

T = TypeVar("T")

ALPHANUMERIC = string.ascii_letters + string.digits


class Generate(Protocol):
    """Capability of a record type to produce one pseudo-random instance."""

    @classmethod
    def generate(cls: Type[T], rng: random.Random) -> T:
        ...


def exactly(count: int) -> range:
    """A count range that always yields `count` records."""

    return range(count, count + 1)


def generate_list(rng: random.Random, cls: Type[T], count: range) -> Tuple[T, ...]:
    """Generates a tuple of `cls` records whose length is drawn once from `count`."""

    if len(count) == 0:
        raise ValueError(f"count range {count!r} is empty")
    if count.step != 1:
        raise ValueError(f"count range {count!r} must have step 1")
    # A single-value range is a fixed count and leaves the stream untouched.
    length = count.start if len(count) == 1 else rng.randrange(count.start, count.stop)
    return tuple(cls.generate(rng) for _ in range(length))  # type: ignore[attr-defined]


def generate_string(rng: random.Random, length: range, alphabet: str = ALPHANUMERIC) -> str:
    n = rng.randrange(length.start, length.stop)
    return "".join(rng.choice(alphabet) for _ in range(n))


def generate_optional(rng: random.Random, producer: Callable[[random.Random], T]) -> T | None:
    if rng.random() < 0.5:
        return None
    return producer(rng)


def generate_bool(rng: random.Random) -> bool:
    return rng.random() < 0.5


def generate_uint(rng: random.Random, bits: int) -> int:
    return rng.getrandbits(bits)


def generate_int(rng: random.Random, bits: int) -> int:
    return rng.getrandbits(bits) - (1 << (bits - 1))


def generate_uuid(rng: random.Random) -> Tuple[int, int, int, int]:
    return (rng.getrandbits(32), rng.getrandbits(32), rng.getrandbits(32), rng.getrandbits(32))
