"""Game state updates from the mk48.io naval game server."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .generate import generate_bool, generate_int, generate_list, generate_optional, generate_uint


class EntityType(str, Enum):
    ARLEIGH_BURKE = "arleigh_burke"
    BISMARCK = "bismarck"
    CLEMENCEAU = "clemenceau"
    FLETCHER = "fletcher"
    G5 = "g5"
    IOWA = "iowa"
    KOLKATA = "kolkata"
    OSA = "osa"
    YASEN = "yasen"
    ZUBR = "zubr"
    BARREL = "barrel"
    COIN = "coin"
    SCRAP = "scrap"
    MARK18 = "mark18"
    SEA_SPARROW = "sea_sparrow"
    SHELL = "shell"

    @classmethod
    def generate(cls, rng: random.Random) -> "EntityType":
        return rng.choice(tuple(cls))


class TeamRole(str, Enum):
    MEMBER = "member"
    OWNER = "owner"
    REQUESTER = "requester"

    @classmethod
    def generate(cls, rng: random.Random) -> "TeamRole":
        return rng.choice(tuple(cls))


@dataclass(frozen=True, slots=True)
class Transform:
    altitude: int
    angle: int
    position: Tuple[float, float]
    velocity: int

    @classmethod
    def generate(cls, rng: random.Random) -> "Transform":
        return cls(
            altitude=generate_int(rng, 8),
            angle=generate_uint(rng, 16),
            position=(rng.uniform(-2048.0, 2048.0), rng.uniform(-2048.0, 2048.0)),
            velocity=generate_int(rng, 16),
        )


@dataclass(frozen=True, slots=True)
class Guidance:
    angle: int
    submerge: bool
    velocity: int

    @classmethod
    def generate(cls, rng: random.Random) -> "Guidance":
        return cls(angle=generate_uint(rng, 16), submerge=generate_bool(rng), velocity=generate_int(rng, 16))


@dataclass(frozen=True, slots=True)
class Contact:
    damage: int
    entity_id: int
    entity_type: Optional[EntityType]
    guidance: Guidance
    player_id: Optional[int]
    reloads: Tuple[bool, ...]
    transform: Transform
    turret_angles: Tuple[int, ...]

    @classmethod
    def generate(cls, rng: random.Random) -> "Contact":
        return cls(
            damage=generate_uint(rng, 8),
            entity_id=generate_uint(rng, 32),
            entity_type=generate_optional(rng, EntityType.generate),
            guidance=Guidance.generate(rng),
            player_id=generate_optional(rng, lambda r: generate_uint(r, 16)),
            reloads=tuple(generate_bool(rng) for _ in range(rng.randrange(0, 16))),
            transform=Transform.generate(rng),
            turret_angles=tuple(generate_uint(rng, 16) for _ in range(rng.randrange(0, 8))),
        )


@dataclass(frozen=True, slots=True)
class TerrainUpdate:
    chunk_id: Tuple[int, int]
    data: bytes

    @classmethod
    def generate(cls, rng: random.Random) -> "TerrainUpdate":
        return cls(
            chunk_id=(generate_int(rng, 8), generate_int(rng, 8)),
            data=rng.randbytes(rng.randrange(8, 64)),
        )


@dataclass(frozen=True, slots=True)
class TeamMember:
    player_id: int
    role: TeamRole

    @classmethod
    def generate(cls, rng: random.Random) -> "TeamMember":
        return cls(player_id=generate_uint(rng, 16), role=TeamRole.generate(rng))


@dataclass(frozen=True, slots=True)
class Update:
    contacts: Tuple[Contact, ...]
    score: int
    world_radius: float
    death_reason: Optional[str]
    team: Tuple[TeamMember, ...]
    terrain: Tuple[TerrainUpdate, ...]

    @classmethod
    def generate(cls, rng: random.Random) -> "Update":
        return cls(
            contacts=generate_list(rng, Contact, range(1, 25)),
            score=generate_uint(rng, 32),
            world_radius=rng.uniform(500.0, 10_000.0),
            death_reason=generate_optional(rng, lambda r: r.choice(("collision", "torpedo", "border"))),
            team=generate_list(rng, TeamMember, range(0, 6)),
            terrain=generate_list(rng, TerrainUpdate, range(0, 4)),
        )


@dataclass(frozen=True, slots=True)
class Updates:
    updates: Tuple[Update, ...]
