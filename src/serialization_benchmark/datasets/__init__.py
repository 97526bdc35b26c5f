"""Benchmark families and deterministic dataset generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from serialization_benchmark.core.models import GenerationSeed

from .generate import Generate, exactly, generate_list
from .log import Log, Logs
from .mesh import Mesh, Triangle
from .minecraft_savedata import Player, Players
from .mk48 import Update, Updates


@dataclass(frozen=True, slots=True)
class Family:
    """A named workload: one root aggregate holding a tuple of records."""

    name: str
    root: type
    record: type
    field: str
    count: int

    def build(self, records: tuple) -> Any:
        return self.root(**{self.field: records})

    def records(self, data: Any) -> tuple:
        return getattr(data, self.field)


FAMILIES: Dict[str, Family] = {
    family.name: family
    for family in (
        Family(name="log", root=Logs, record=Log, field="logs", count=10_000),
        Family(name="mesh", root=Mesh, record=Triangle, field="triangles", count=125_000),
        Family(name="minecraft_savedata", root=Players, record=Player, field="players", count=500),
        Family(name="mk48", root=Updates, record=Update, field="updates", count=1_000),
    )
}


def get_family(name: str) -> Family:
    try:
        return FAMILIES[name]
    except KeyError:
        raise ValueError(f"unknown benchmark family {name!r}; expected one of {sorted(FAMILIES)}") from None


def generate_dataset(family: Family | str, seed: GenerationSeed, count: int | None = None) -> Any:
    """Generates the dataset of `family` from a fresh stream of `seed`.

    The record count is fixed (`count` or the family default) so every run of
    the same configuration compares backends on identical input.
    """

    if isinstance(family, str):
        family = get_family(family)
    n = family.count if count is None else count
    if n < 0:
        raise ValueError(f"record count must be non-negative, got {n}")
    rng = seed.rng()
    return family.build(generate_list(rng, family.record, exactly(n)))


__all__ = [
    "FAMILIES",
    "Family",
    "Generate",
    "exactly",
    "generate_dataset",
    "generate_list",
    "get_family",
]
