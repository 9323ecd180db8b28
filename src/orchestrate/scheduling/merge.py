"""Pure functions for splitting a wave and merging its results.

Stateless helpers used by the scheduler on each side of the wave barrier.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from orchestrate.scheduling.models import ScanOutcome


def partition_frontier(
    frontier: Sequence[int],
    workers: int,
    chunk_size: int | None = None,
) -> list[Sequence[int]]:
    """Split a frontier into contiguous, roughly equal slices.

    Produces `workers` slices, or more when `chunk_size` caps the slice
    length. Slice lengths differ by at most one and no slice is empty.

    Args:
        frontier: States of the current wave, in a deterministic order.
        workers: Number of concurrent workers.
        chunk_size: Maximum slice length, or None for one slice per worker.

    Returns:
        Slices in frontier order.
    """
    total = len(frontier)
    if total == 0:
        return []

    count = workers
    if chunk_size is not None:
        count = max(count, math.ceil(total / chunk_size))
    count = min(count, total)

    size, extra = divmod(total, count)
    slices: list[Sequence[int]] = []
    start = 0
    for i in range(count):
        end = start + size + (1 if i < extra else 0)
        slices.append(frontier[start:end])
        start = end
    return slices


def merge_outcomes(outcomes: Iterable[ScanOutcome]) -> ScanOutcome:
    """Merge per-worker outcomes at the wave barrier.

    Successor sets are unioned, so a state reached from several parents
    appears once. Solutions are sorted by state value so the merged result
    does not depend on worker count or completion order.

    Args:
        outcomes: Outcomes in any order.

    Returns:
        Merged ScanOutcome with sorted solutions.
    """
    merged = ScanOutcome()
    for outcome in outcomes:
        merged.merge(outcome)
    merged.solutions.sort()
    return merged
