"""Progress counters for a search run.

Counters are advisory: nothing in the search reads them to make decisions.
"""

from __future__ import annotations

import logging
import threading

from orchestrate.scheduling.models import ScanOutcome

logger = logging.getLogger(__name__)


class SolverProgress:
    """Lock-protected progress counters with periodic status logging.

    Percentages are relative to 2**N, the number of subsets of the catalog.

    Args:
        action_count: Catalog size N.
        report_every: Scanned-state interval between status lines.
    """

    def __init__(self, action_count: int, report_every: int = 50_000) -> None:
        self._lock = threading.Lock()
        self._total_states = 1 << action_count
        self._report_every = report_every
        self.reset()

    def reset(self) -> None:
        """Zero all counters for a new run."""
        with self._lock:
            self._wave_index = 0
            self._scanned = 0
            self._eliminated = 0
            self._pruned = 0
            self._solutions = 0
            self._next_report = self._report_every

    @property
    def wave_index(self) -> int:
        return self._wave_index

    @property
    def scanned(self) -> int:
        return self._scanned

    @property
    def eliminated(self) -> int:
        return self._eliminated

    @property
    def pruned(self) -> int:
        return self._pruned

    @property
    def solutions(self) -> int:
        return self._solutions

    @property
    def next_report(self) -> int:
        return self._next_report

    def advance_wave(self) -> int:
        with self._lock:
            self._wave_index += 1
            return self._wave_index

    def add_eliminated(self, count: int) -> int:
        with self._lock:
            self._eliminated += count
            return self._eliminated

    def record_outcome(self, outcome: ScanOutcome) -> None:
        """Add a merged slice's scanned, pruned and solution counts."""
        with self._lock:
            self._scanned += outcome.scanned
            self._pruned += outcome.pruned
            self._solutions += len(outcome.solutions)

    def percent_complete(self) -> float:
        """Share of all subsets either scanned or eliminated, in percent."""
        return (self._scanned + self._eliminated) * 100.0 / self._total_states

    def status_line(self) -> str:
        total = self._total_states
        return (
            f"Progress {self.percent_complete():.1f}%: {self._solutions} solutions. "
            f"[Scanned {self._scanned} ({self._scanned * 100.0 / total:.1f}%), "
            f"Eliminated {self._eliminated} ({self._eliminated * 100.0 / total:.1f}%), "
            f"Pruned {self._pruned}]"
        )

    def report(self, force: bool = False) -> str | None:
        """Log a status line if the scanned count passed the next threshold.

        Args:
            force: Log regardless of the threshold.

        Returns:
            The logged line, or None if nothing was logged.
        """
        with self._lock:
            if not force and self._scanned < self._next_report:
                return None
            while self._scanned >= self._next_report:
                self._next_report += self._report_every
            line = self.status_line()
        logger.info(line)
        return line
