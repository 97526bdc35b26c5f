"""Plugin registry of available codec backends."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Tuple

import structlog

from .base import CodecFactory

logger = structlog.get_logger(__name__)


class CodecRegistry:
    """Ordered mapping of backend name to codec factory.

    Only backends that are actually available are registered; a missing
    backend is a normal state and is simply absent from the run.
    """

    def __init__(self, entries: Iterable[Tuple[str, CodecFactory]] = ()) -> None:
        self._factories: Dict[str, CodecFactory] = {}
        for name, factory in entries:
            self.register(name, factory)

    def register(self, name: str, factory: CodecFactory) -> None:
        if name in self._factories:
            raise ValueError(f"backend {name!r} is already registered")
        self._factories[name] = factory

    def names(self) -> list[str]:
        return list(self._factories)

    def factory(self, name: str) -> CodecFactory:
        return self._factories[name]

    def select(self, names: Iterable[str] | None) -> "CodecRegistry":
        """Sub-registry restricted to `names`; unknown names are skipped."""

        if names is None:
            return CodecRegistry(self.items())
        wanted = list(names)
        for name in wanted:
            if name not in self._factories:
                logger.info("backend-not-available", backend=name)
        return CodecRegistry((name, self._factories[name]) for name in wanted if name in self._factories)

    def items(self) -> list[Tuple[str, CodecFactory]]:
        return list(self._factories.items())

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)
