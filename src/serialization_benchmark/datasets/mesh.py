"""Triangle meshes: large, flat, float-heavy payloads."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float
    y: float
    z: float

    @classmethod
    def generate(cls, rng: random.Random) -> "Vector3":
        return cls(rng.random(), rng.random(), rng.random())


@dataclass(frozen=True, slots=True)
class Triangle:
    v0: Vector3
    v1: Vector3
    v2: Vector3
    normal: Vector3

    @classmethod
    def generate(cls, rng: random.Random) -> "Triangle":
        return cls(
            v0=Vector3.generate(rng),
            v1=Vector3.generate(rng),
            v2=Vector3.generate(rng),
            normal=Vector3.generate(rng),
        )


@dataclass(frozen=True, slots=True)
class Mesh:
    triangles: Tuple[Triangle, ...]
