"""Wave scheduler: level-synchronous breadth-first search over action subsets.

Usage:
    # One call, default score-positive predicate
    summary = solve(catalog, result_handler=print, workers=4)

    # Step through waves
    scheduler = WaveScheduler(catalog, config=SolverConfig(workers=4))
    scheduler.start()
    while scheduler.status is SchedulerStatus.RUNNING:
        record = scheduler.step()

Wave k holds the reachable states with exactly k active actions. Every state
of wave k + 1 is built by adding one action to a state of wave k, so a state
can only ever appear in one wave, and the set semantics of the merged
frontier make each state get scanned exactly once per run.
"""

from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING

from orchestrate.core.economy import score_positive
from orchestrate.core.state import empty_state
from orchestrate.scheduling.backends import ExecutionBackend, create_backend
from orchestrate.scheduling.merge import merge_outcomes, partition_frontier
from orchestrate.scheduling.models import (
    SchedulerStatus,
    ScanOutcome,
    SolverConfig,
    SolveSummary,
)
from orchestrate.scheduling.progress import SolverProgress
from orchestrate.tracing.models import WaveRecord

if TYPE_CHECKING:
    from orchestrate.core.catalog import Catalog
    from orchestrate.core.types import State
    from orchestrate.scheduling.models import AcceptancePredicate, ResultHandler
    from orchestrate.tracing.protocol import WaveHistory

logger = logging.getLogger(__name__)


class WaveScheduler:
    """Drives the search one wave at a time.

    Each wave is partitioned into slices, scanned by the execution backend,
    and merged at a barrier into a deduplicated next frontier and a sorted
    solution list.

    Args:
        catalog: Read-only action table.
        predicate: Acceptance predicate for valid states.
        config: Worker count, backend kind, slicing and reporting.
        backend: Execution backend to use instead of one built from config.
            A passed-in backend is not closed by the scheduler.
        recorder: Optional history receiving one WaveRecord per wave.
    """

    def __init__(
        self,
        catalog: Catalog,
        predicate: AcceptancePredicate = score_positive,
        config: SolverConfig | None = None,
        backend: ExecutionBackend | None = None,
        recorder: WaveHistory | None = None,
    ) -> None:
        self._catalog = catalog
        self._predicate = predicate
        self._config = config or SolverConfig()
        self._backend = backend
        self._owns_backend = backend is None
        self._recorder = recorder
        self._status = SchedulerStatus.IDLE
        self._frontier: list[int] = []
        self.progress = SolverProgress(len(catalog), self._config.report_every)

    @property
    def status(self) -> SchedulerStatus:
        return self._status

    @property
    def wave_index(self) -> int:
        """Index of the wave the next step() will scan."""
        return self.progress.wave_index

    @property
    def frontier(self) -> tuple[int, ...]:
        """States of the wave the next step() will scan, sorted."""
        return tuple(self._frontier)

    def start(self) -> None:
        """Seed the first wave with the empty state.

        Raises:
            RuntimeError: If the scheduler was already started.
        """
        if self._status is not SchedulerStatus.IDLE:
            raise RuntimeError(f"Cannot start scheduler in status {self._status.name}")

        self.progress.reset()
        self._frontier = [empty_state()]
        if self._backend is None:
            self._backend = create_backend(self._config)
        self._status = SchedulerStatus.RUNNING

    def step(self) -> WaveRecord:
        """Scan the current wave and advance to the next.

        Returns:
            Record of the scanned wave; its solutions are sorted by value.

        Raises:
            RuntimeError: If the scheduler is not running.
        """
        if self._status is not SchedulerStatus.RUNNING or self._backend is None:
            raise RuntimeError(f"Cannot step scheduler in status {self._status.name}")

        action_count = len(self._catalog)
        wave = self.progress.wave_index
        logger.info("Begin wave %d/%d: %d states", wave, action_count, len(self._frontier))
        started = time.perf_counter()

        slices = partition_frontier(
            self._frontier, self._config.workers, self._config.chunk_size
        )
        outcomes: list[ScanOutcome] = []
        for outcome in self._backend.execute(slices, self._catalog, self._predicate):
            outcomes.append(outcome)
            self.progress.record_outcome(outcome)
            self.progress.report()
        merged = merge_outcomes(outcomes)

        next_frontier = sorted(merged.next_states)
        eliminated = 0
        if wave + 1 <= action_count:
            eliminated = math.comb(action_count, wave + 1) - len(next_frontier)
            self.progress.add_eliminated(eliminated)
        self.progress.advance_wave()

        record = WaveRecord(
            wave=wave,
            frontier_size=merged.scanned,
            pruned=merged.pruned,
            solutions=merged.solutions,
            next_frontier_size=len(next_frontier),
            eliminated=eliminated,
            elapsed=time.perf_counter() - started,
        )

        self._frontier = next_frontier
        if not next_frontier or wave >= action_count:
            self._finish()

        self.progress.report(force=True)
        logger.info(
            "Wave %d/%d completed: %d solutions. Eliminated %d states.",
            wave,
            action_count,
            record.solution_count,
            eliminated,
        )
        if self._recorder is not None:
            self._recorder.record_wave(record)
        return record

    def run(self, result_handler: ResultHandler | None = None) -> list[State]:
        """Run every wave to completion.

        Solutions are handed to result_handler once each, sorted within a
        wave, waves in increasing action count. A handler is only called
        after its wave has been fully merged.

        Returns:
            All solutions in emission order.
        """
        if self._status is SchedulerStatus.IDLE:
            self.start()

        solutions: list[State] = []
        try:
            while self._status is SchedulerStatus.RUNNING:
                record = self.step()
                for state in record.solutions:
                    if result_handler is not None:
                        result_handler(state)
                    solutions.append(state)
        finally:
            self._finish()

        logger.info("Wave %d empty. Complete.", self.progress.wave_index)
        return solutions

    def _finish(self) -> None:
        self._status = SchedulerStatus.DONE
        if self._owns_backend and self._backend is not None:
            self._backend.close()
            self._backend = None


def solve(
    catalog: Catalog,
    predicate: AcceptancePredicate = score_positive,
    result_handler: ResultHandler | None = None,
    workers: int = 1,
    *,
    config: SolverConfig | None = None,
    recorder: WaveHistory | None = None,
) -> SolveSummary:
    """Enumerate every valid, accepted subset of the catalog's actions.

    Args:
        catalog: Read-only action table.
        predicate: Acceptance predicate. Defaults to positive score.
        result_handler: Called once per solution in deterministic order.
        workers: Concurrent scan workers. Ignored when config is given.
        config: Full solver configuration.
        recorder: Optional wave history.

    Returns:
        SolveSummary with all solutions and run counters.
    """
    config = config or SolverConfig(workers=workers)
    started = time.perf_counter()

    scheduler = WaveScheduler(catalog, predicate, config=config, recorder=recorder)
    solutions = scheduler.run(result_handler)

    elapsed = time.perf_counter() - started
    logger.info("Solved in %.1f seconds (%d ms).", elapsed, elapsed * 1000)

    progress = scheduler.progress
    return SolveSummary(
        solutions=solutions,
        waves=progress.wave_index,
        scanned=progress.scanned,
        eliminated=progress.eliminated,
        pruned=progress.pruned,
        elapsed=elapsed,
    )


# Alias for sequential execution (workers=1)
def SequentialScheduler(  # noqa: N802
    catalog: Catalog,
    predicate: AcceptancePredicate = score_positive,
    recorder: WaveHistory | None = None,
) -> WaveScheduler:
    """Create a scheduler that scans every wave in the calling thread.

    Equivalent to WaveScheduler with SolverConfig(workers=1).
    Useful for debugging or when parallelism isn't needed.
    """
    return WaveScheduler(catalog, predicate, config=SolverConfig(workers=1), recorder=recorder)
