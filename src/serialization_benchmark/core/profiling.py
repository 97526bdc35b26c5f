"""Profiler hook invoked around each measured operation."""

from __future__ import annotations

import cProfile
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Protocol


class Profiler(Protocol):
    def start(self, benchmark_id: str, directory: Path) -> None:
        """Called right before the timed section."""

    def stop(self, benchmark_id: str, directory: Path) -> None:
        """Called after the timed section, also when it raised."""


class NullProfiler:
    """Profiler that does nothing."""

    def start(self, benchmark_id: str, directory: Path) -> None:
        return None

    def stop(self, benchmark_id: str, directory: Path) -> None:
        return None


def _slug(benchmark_id: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]+", "_", benchmark_id)


class CProfileProfiler:
    """Writes one `profile.pstats` per benchmark id under `directory`."""

    def __init__(self) -> None:
        self._active: Dict[str, cProfile.Profile] = {}

    @staticmethod
    def output_path(benchmark_id: str, directory: Path) -> Path:
        return Path(directory) / _slug(benchmark_id) / "profile.pstats"

    def start(self, benchmark_id: str, directory: Path) -> None:
        profile = cProfile.Profile()
        self._active[benchmark_id] = profile
        profile.enable()

    def stop(self, benchmark_id: str, directory: Path) -> None:
        profile = self._active.pop(benchmark_id, None)
        if profile is None:
            return
        profile.disable()
        path = self.output_path(benchmark_id, directory)
        path.parent.mkdir(parents=True, exist_ok=True)
        profile.dump_stats(str(path))


@contextmanager
def profiled(profiler: Profiler, benchmark_id: str, directory: Path) -> Iterator[None]:
    profiler.start(benchmark_id, directory)
    try:
        yield
    finally:
        profiler.stop(benchmark_id, directory)
