"""Execution backends that scan wave slices, sequentially or on a worker pool.

Usage:
    with ThreadPoolBackend(max_workers=4) as backend:
        for outcome in backend.execute(slices, catalog, predicate):
            ...

    # Real CPU parallelism; predicate must be picklable (module-level function)
    backend = create_backend(SolverConfig(workers=8, backend="process"))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Protocol

from orchestrate.scheduling.models import ScanOutcome, SolverConfig
from orchestrate.scheduling.scan import scan_slice

if TYPE_CHECKING:
    from orchestrate.core.catalog import Catalog
    from orchestrate.scheduling.models import AcceptancePredicate

logger = logging.getLogger(__name__)


class ExecutionBackend(Protocol):
    """Protocol for pluggable execution backends.

    A backend scans every slice it is given and yields one ScanOutcome per
    slice, in completion order. Workers share nothing but the read-only
    catalog; the caller merges the outcomes.
    """

    def execute(
        self,
        slices: Sequence[Sequence[int]],
        catalog: Catalog,
        predicate: AcceptancePredicate,
    ) -> Iterator[ScanOutcome]:
        """Scan slices and yield their outcomes as they complete."""
        ...

    def close(self) -> None:
        """Release worker resources. The backend is unusable afterwards."""
        ...


class SequentialBackend:
    """Scans slices one after another in the calling thread."""

    def execute(
        self,
        slices: Sequence[Sequence[int]],
        catalog: Catalog,
        predicate: AcceptancePredicate,
    ) -> Iterator[ScanOutcome]:
        for states in slices:
            yield scan_slice(states, catalog, predicate)

    def close(self) -> None:
        pass

    def __enter__(self) -> SequentialBackend:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class _PoolBackend(ABC):
    """Fork-join over a concurrent.futures executor, created on first use.

    Subclasses choose the executor kind by implementing _create_executor.
    """

    def __init__(self, max_workers: int) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._max_workers = max_workers
        self._executor: Executor | None = None

    @property
    def max_workers(self) -> int:
        return self._max_workers

    @abstractmethod
    def _create_executor(self) -> Executor:
        """Build the executor that runs scan_slice calls."""

    def execute(
        self,
        slices: Sequence[Sequence[int]],
        catalog: Catalog,
        predicate: AcceptancePredicate,
    ) -> Iterator[ScanOutcome]:
        if self._executor is None:
            self._executor = self._create_executor()

        futures = [
            self._executor.submit(scan_slice, list(states), catalog, predicate)
            for states in slices
        ]
        logger.debug("Submitted %d slices to %s", len(futures), type(self).__name__)

        try:
            for future in as_completed(futures):
                yield future.result()
        finally:
            for future in futures:
                future.cancel()

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True, cancel_futures=True)
            self._executor = None

    def __enter__(self) -> _PoolBackend:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class ThreadPoolBackend(_PoolBackend):
    """Scans slices on a thread pool."""

    def _create_executor(self) -> Executor:
        return ThreadPoolExecutor(max_workers=self._max_workers, thread_name_prefix="wave-scan")


class ProcessPoolBackend(_PoolBackend):
    """Scans slices on a process pool. Catalog and predicate must be picklable."""

    def _create_executor(self) -> Executor:
        return ProcessPoolExecutor(max_workers=self._max_workers)


def create_backend(config: SolverConfig) -> ExecutionBackend:
    """Build the backend a configuration asks for.

    A single worker always scans sequentially.

    Raises:
        ValueError: If config.backend is not a known backend name.
    """
    if config.workers == 1 or config.backend == "sequential":
        return SequentialBackend()
    if config.backend == "thread":
        return ThreadPoolBackend(config.workers)
    if config.backend == "process":
        return ProcessPoolBackend(config.workers)
    raise ValueError(f"Unknown backend: {config.backend}")
