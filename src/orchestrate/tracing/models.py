"""Data models for tracing infrastructure.

Records are plain data and JSON-serializable through to_dict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class WaveRecord:
    """Complete record of a single search wave.

    Attributes:
        wave: Wave index, equal to the number of active actions of every
            state scanned in it.
        frontier_size: Distinct states scanned in this wave.
        pruned: States dropped as non-viable.
        solutions: Solutions found, sorted by state value.
        next_frontier_size: Distinct states queued for the next wave.
        eliminated: States of the next level never queued (theoretical
            count minus next frontier size), 0 past the last level.
        elapsed: Wall-clock seconds spent on the wave.
        metadata: Optional arbitrary metadata for annotations.

    Example:
        record = WaveRecord(
            wave=6,
            frontier_size=17460,
            pruned=5120,
            solutions=[0x2a20090],
            next_frontier_size=39646,
            eliminated=617154,
            elapsed=0.42,
        )
    """

    wave: int
    frontier_size: int
    pruned: int
    solutions: list[int]
    next_frontier_size: int
    eliminated: int
    elapsed: float
    metadata: dict[str, Any] | None = field(default=None)

    @property
    def solution_count(self) -> int:
        return len(self.solutions)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: dict[str, Any] = {
            "wave": self.wave,
            "frontier_size": self.frontier_size,
            "pruned": self.pruned,
            "solutions": list(self.solutions),
            "next_frontier_size": self.next_frontier_size,
            "eliminated": self.eliminated,
            "elapsed": self.elapsed,
        }
        if self.metadata is not None:
            result["metadata"] = self.metadata
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WaveRecord:
        """Create from dictionary (for deserialization)."""
        return cls(
            wave=data["wave"],
            frontier_size=data["frontier_size"],
            pruned=data["pruned"],
            solutions=list(data.get("solutions", [])),
            next_frontier_size=data["next_frontier_size"],
            eliminated=data.get("eliminated", 0),
            elapsed=data.get("elapsed", 0.0),
            metadata=data.get("metadata"),
        )
