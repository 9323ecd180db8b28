"""Scheduling models and configuration.

Types for scan results, solver configuration and run summaries.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from orchestrate.core.catalog import Catalog
    from orchestrate.core.types import State


AcceptancePredicate = Callable[["State", "Catalog"], bool]
"""Signature: (state, catalog) -> accepted. Must be pure and thread-safe."""

ResultHandler = Callable[["State"], None]
"""Signature: (solution_state) -> None. Called once per solution."""

BackendName = Literal["sequential", "thread", "process"]


class SchedulerStatus(Enum):
    """Lifecycle of a WaveScheduler."""

    IDLE = auto()
    """Constructed, no frontier yet."""

    RUNNING = auto()
    """Frontier holds the states of the current wave."""

    DONE = auto()
    """Terminal: the last wave produced no successors."""


@dataclass(slots=True)
class ScanOutcome:
    """Accumulated results of scanning some states of one wave.

    Each worker fills its own outcome; outcomes are merged at the wave barrier.
    """

    next_states: set[int] = field(default_factory=set)
    """Successor states for the next wave (deduplicated)."""

    solutions: list[int] = field(default_factory=list)
    """Accepted valid states, in scan order."""

    scanned: int = 0
    """States scanned."""

    pruned: int = 0
    """Invalid states dropped as non-viable."""

    def is_empty(self) -> bool:
        """Check if this outcome carries no successors and no solutions."""
        return not self.next_states and not self.solutions

    def merge(self, other: ScanOutcome) -> None:
        """Merge other outcome into this one, mutating self in place.

        Args:
            other: ScanOutcome to merge into this one.
        """
        self.next_states |= other.next_states
        self.solutions.extend(other.solutions)
        self.scanned += other.scanned
        self.pruned += other.pruned


@dataclass
class SolverConfig:
    """Configuration for solver execution.

    Passed to WaveScheduler or solve().
    """

    workers: int = 1
    """Concurrent scan workers. 1 = scan sequentially in the calling thread."""

    backend: BackendName = "thread"
    """Worker pool kind when workers > 1. "process" needs a picklable predicate."""

    chunk_size: int | None = None
    """Max states per slice. None = exactly one slice per worker."""

    report_every: int = 50_000
    """Log a progress line each time this many more states have been scanned."""

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.chunk_size is not None and self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.report_every < 1:
            raise ValueError(f"report_every must be >= 1, got {self.report_every}")


@dataclass
class SolveSummary:
    """Result of a complete search run."""

    solutions: list[int]
    """All solutions: by action count, then by state value."""

    waves: int
    """Waves scanned."""

    scanned: int
    eliminated: int
    pruned: int
    elapsed: float
    """Wall-clock seconds."""

    @property
    def solution_count(self) -> int:
        return len(self.solutions)
