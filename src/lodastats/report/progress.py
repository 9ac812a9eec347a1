"""Progress reporting for long-running batch loops."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


def progress_interval(total: int) -> int:
    """Report roughly a thousand times per batch, but never less than every item."""
    return max(total // 1000, 1)


@dataclass(slots=True)
class ProgressState:
    """Counters for one batch run."""

    total: int
    index: int = 0
    rows: int = 0
    started: float = 0.0


@dataclass(slots=True)
class ProgressReporter:
    """Logs a status line every ``progress_interval(total)`` items."""

    total: int
    clock: Callable[[], float] = time.monotonic
    state: ProgressState = field(init=False)
    interval: int = field(init=False)

    def __post_init__(self) -> None:
        self.state = ProgressState(total=self.total, started=self.clock())
        self.interval = progress_interval(self.total)

    def show_if_needed(self, index: int, rows: int) -> bool:
        """Log progress before item ``index`` is processed, when on cadence."""
        self.state.index = index
        self.state.rows = rows
        if index % self.interval != 0:
            return False
        logger.info(self.format_line())
        return True

    def elapsed(self) -> float:
        return self.clock() - self.state.started

    def format_line(self) -> str:
        state = self.state
        percent = (100 * state.index) / state.total if state.total else 0.0
        return (
            f"progress: {state.index}/{state.total}, %{percent:.2f}"
            f"  rows: {state.rows}  elapsed: {self.elapsed():.3f}"
        )
