"""HTTP access-log entries in common log format."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple

from .generate import generate_string

_USERID_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789_"
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_METHODS = ("GET", "POST", "PUT", "DELETE", "HEAD", "PATCH")
_PROTOCOLS = ("HTTP/1.0", "HTTP/1.1", "HTTP/2.0")
_CODES = (200, 204, 301, 304, 400, 401, 403, 404, 500, 503)


@dataclass(frozen=True, slots=True)
class Address:
    x0: int
    x1: int
    x2: int
    x3: int

    @classmethod
    def generate(cls, rng: random.Random) -> "Address":
        return cls(rng.getrandbits(8), rng.getrandbits(8), rng.getrandbits(8), rng.getrandbits(8))


def _date(rng: random.Random) -> str:
    day = rng.randrange(1, 29)
    month = rng.choice(_MONTHS)
    year = rng.randrange(1970, 2022)
    hour = rng.randrange(0, 24)
    minute = rng.randrange(0, 60)
    second = rng.randrange(0, 60)
    offset = rng.randrange(0, 2400, 100)
    sign = "-" if rng.random() < 0.5 else "+"
    return f"{day:02}/{month}/{year}:{hour:02}:{minute:02}:{second:02} {sign}{offset:04}"


def _request(rng: random.Random) -> str:
    depth = rng.randrange(1, 6)
    path = "/".join(generate_string(rng, range(1, 12)) for _ in range(depth))
    return f"{rng.choice(_METHODS)} /{path} {rng.choice(_PROTOCOLS)}"


@dataclass(frozen=True, slots=True)
class Log:
    address: Address
    identity: str
    userid: str
    date: str
    request: str
    code: int
    size: int

    @classmethod
    def generate(cls, rng: random.Random) -> "Log":
        return cls(
            address=Address.generate(rng),
            identity=generate_string(rng, range(1, 16), _USERID_ALPHABET),
            userid=generate_string(rng, range(1, 16), _USERID_ALPHABET),
            date=_date(rng),
            request=_request(rng),
            code=rng.choice(_CODES),
            size=rng.randrange(0, 100_000_000),
        )


@dataclass(frozen=True, slots=True)
class Logs:
    logs: Tuple[Log, ...]
