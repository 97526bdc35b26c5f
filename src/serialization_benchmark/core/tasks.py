"""Progress reporting for long benchmark runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import structlog
from structlog.stdlib import BoundLogger


class ProgressReporter(Protocol):
    """Minimal progress interface."""

    def update(self, message: str, *, percentage: int | None = None) -> None:
        """Reports progress."""


@dataclass
class LoggingProgressReporter:
    """Reporter that logs progress events."""

    logger: BoundLogger = field(default_factory=lambda: structlog.get_logger(__name__))

    def update(self, message: str, *, percentage: int | None = None) -> None:
        if percentage is not None:
            self.logger.info("progress", message=message, percentage=percentage)
        else:
            self.logger.info("progress", message=message)
