"""Player save data modelled on Minecraft's `level.dat` player compound.

Deeply nested records with optional sub-entities, enums and short strings.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .generate import (
    generate_bool,
    generate_int,
    generate_list,
    generate_optional,
    generate_string,
    generate_uint,
    generate_uuid,
)

_ITEM_IDS = (
    "minecraft:dirt",
    "minecraft:stone",
    "minecraft:pickaxe",
    "minecraft:sand",
    "minecraft:gravel",
    "minecraft:shovel",
    "minecraft:chestplate",
    "minecraft:steak",
)

_ENTITY_IDS = (
    "minecraft:bat",
    "minecraft:bee",
    "minecraft:chicken",
    "minecraft:cow",
    "minecraft:parrot",
    "minecraft:pig",
    "minecraft:sheep",
    "minecraft:wolf",
)

_RECIPES = (
    "pickaxe",
    "torch",
    "bow",
    "crafting table",
    "furnace",
    "shears",
    "arrow",
    "tnt",
)

_DIMENSIONS = ("overworld", "nether", "end")


class GameType(str, Enum):
    SURVIVAL = "survival"
    CREATIVE = "creative"
    ADVENTURE = "adventure"
    SPECTATOR = "spectator"

    @classmethod
    def generate(cls, rng: random.Random) -> "GameType":
        return rng.choice(tuple(cls))


@dataclass(frozen=True, slots=True)
class Item:
    count: int
    slot: int
    id: str

    @classmethod
    def generate(cls, rng: random.Random) -> "Item":
        return cls(count=generate_int(rng, 8), slot=generate_uint(rng, 8), id=rng.choice(_ITEM_IDS))


@dataclass(frozen=True, slots=True)
class Abilities:
    walk_speed: float
    fly_speed: float
    may_fly: bool
    flying: bool
    invulnerable: bool
    may_build: bool
    instabuild: bool

    @classmethod
    def generate(cls, rng: random.Random) -> "Abilities":
        return cls(
            walk_speed=rng.random(),
            fly_speed=rng.random(),
            may_fly=generate_bool(rng),
            flying=generate_bool(rng),
            invulnerable=generate_bool(rng),
            may_build=generate_bool(rng),
            instabuild=generate_bool(rng),
        )


@dataclass(frozen=True, slots=True)
class Entity:
    id: str
    pos: Tuple[float, float, float]
    motion: Tuple[float, float, float]
    rotation: Tuple[float, float]
    fall_distance: float
    fire: int
    air: int
    on_ground: bool
    no_gravity: bool
    invulnerable: bool
    portal_cooldown: int
    uuid: Tuple[int, int, int, int]
    custom_name: Optional[str]
    custom_name_visible: bool
    silent: bool
    glowing: bool

    @classmethod
    def generate(cls, rng: random.Random) -> "Entity":
        return cls(
            id=rng.choice(_ENTITY_IDS),
            pos=(rng.random(), rng.random(), rng.random()),
            motion=(rng.random(), rng.random(), rng.random()),
            rotation=(rng.random(), rng.random()),
            fall_distance=rng.random(),
            fire=generate_uint(rng, 16),
            air=generate_uint(rng, 16),
            on_ground=generate_bool(rng),
            no_gravity=generate_bool(rng),
            invulnerable=generate_bool(rng),
            portal_cooldown=generate_int(rng, 32),
            uuid=generate_uuid(rng),
            custom_name=generate_optional(rng, lambda r: generate_string(r, range(0, 16))),
            custom_name_visible=generate_bool(rng),
            silent=generate_bool(rng),
            glowing=generate_bool(rng),
        )


@dataclass(frozen=True, slots=True)
class RecipeBook:
    recipes: Tuple[str, ...]
    to_be_displayed: Tuple[str, ...]
    is_filtering_craftable: bool
    is_gui_open: bool
    is_furnace_filtering_craftable: bool
    is_furnace_gui_open: bool
    is_blasting_furnace_filtering_craftable: bool
    is_blasting_furnace_gui_open: bool
    is_smoker_filtering_craftable: bool
    is_smoker_gui_open: bool

    @classmethod
    def generate(cls, rng: random.Random) -> "RecipeBook":
        return cls(
            recipes=tuple(rng.choice(_RECIPES) for _ in range(rng.randrange(0, 30))),
            to_be_displayed=tuple(rng.choice(_RECIPES) for _ in range(rng.randrange(0, 10))),
            is_filtering_craftable=generate_bool(rng),
            is_gui_open=generate_bool(rng),
            is_furnace_filtering_craftable=generate_bool(rng),
            is_furnace_gui_open=generate_bool(rng),
            is_blasting_furnace_filtering_craftable=generate_bool(rng),
            is_blasting_furnace_gui_open=generate_bool(rng),
            is_smoker_filtering_craftable=generate_bool(rng),
            is_smoker_gui_open=generate_bool(rng),
        )


@dataclass(frozen=True, slots=True)
class Vehicle:
    uuid: Tuple[int, int, int, int]
    entity: Entity

    @classmethod
    def generate(cls, rng: random.Random) -> "Vehicle":
        return cls(uuid=generate_uuid(rng), entity=Entity.generate(rng))


@dataclass(frozen=True, slots=True)
class Player:
    game_type: GameType
    previous_game_type: GameType
    score: int
    dimension: str
    selected_item_slot: int
    selected_item: Item
    spawn_dimension: Optional[str]
    spawn_x: int
    spawn_y: int
    spawn_z: int
    spawn_forced: Optional[bool]
    sleep_timer: int
    food_exhaustion_level: float
    food_saturation_level: float
    food_tick_timer: int
    food_level: int
    xp_level: int
    xp_p: float
    xp_total: int
    xp_seed: int
    inventory: Tuple[Item, ...]
    ender_items: Tuple[Item, ...]
    abilities: Abilities
    entered_nether_position: Optional[Tuple[float, float, float]]
    root_vehicle: Optional[Vehicle]
    shoulder_entity_left: Optional[Entity]
    shoulder_entity_right: Optional[Entity]
    seen_credits: bool
    recipe_book: RecipeBook

    @classmethod
    def generate(cls, rng: random.Random) -> "Player":
        return cls(
            game_type=GameType.generate(rng),
            previous_game_type=GameType.generate(rng),
            score=generate_int(rng, 64),
            dimension=rng.choice(_DIMENSIONS),
            selected_item_slot=generate_uint(rng, 32),
            selected_item=Item.generate(rng),
            spawn_dimension=generate_optional(rng, lambda r: r.choice(_DIMENSIONS)),
            spawn_x=generate_int(rng, 64),
            spawn_y=generate_int(rng, 64),
            spawn_z=generate_int(rng, 64),
            spawn_forced=generate_optional(rng, generate_bool),
            sleep_timer=generate_uint(rng, 16),
            food_exhaustion_level=rng.random(),
            food_saturation_level=rng.random(),
            food_tick_timer=generate_uint(rng, 32),
            food_level=generate_uint(rng, 32),
            xp_level=generate_uint(rng, 32),
            xp_p=rng.random(),
            xp_total=generate_int(rng, 32),
            xp_seed=generate_int(rng, 32),
            inventory=generate_list(rng, Item, range(0, 40)),
            ender_items=generate_list(rng, Item, range(0, 28)),
            abilities=Abilities.generate(rng),
            entered_nether_position=generate_optional(rng, lambda r: (r.random(), r.random(), r.random())),
            root_vehicle=generate_optional(rng, Vehicle.generate),
            shoulder_entity_left=generate_optional(rng, Entity.generate),
            shoulder_entity_right=generate_optional(rng, Entity.generate),
            seen_credits=generate_bool(rng),
            recipe_book=RecipeBook.generate(rng),
        )


@dataclass(frozen=True, slots=True)
class Players:
    players: Tuple[Player, ...]
