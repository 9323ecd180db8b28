"""Wave scheduling and parallel scan execution."""

from orchestrate.scheduling.backends import (
    ExecutionBackend,
    ProcessPoolBackend,
    SequentialBackend,
    ThreadPoolBackend,
    create_backend,
)
from orchestrate.scheduling.merge import merge_outcomes, partition_frontier
from orchestrate.scheduling.models import (
    AcceptancePredicate,
    ResultHandler,
    SchedulerStatus,
    ScanOutcome,
    SolverConfig,
    SolveSummary,
)
from orchestrate.scheduling.progress import SolverProgress
from orchestrate.scheduling.scan import scan_slice, scan_state
from orchestrate.scheduling.scheduler import SequentialScheduler, WaveScheduler, solve

__all__ = [
    # Schedulers
    "WaveScheduler",
    "SequentialScheduler",
    "solve",
    # Models
    "AcceptancePredicate",
    "ResultHandler",
    "SchedulerStatus",
    "ScanOutcome",
    "SolverConfig",
    "SolveSummary",
    "SolverProgress",
    # Scan rule
    "scan_state",
    "scan_slice",
    # Partition / merge
    "partition_frontier",
    "merge_outcomes",
    # Backends
    "ExecutionBackend",
    "SequentialBackend",
    "ThreadPoolBackend",
    "ProcessPoolBackend",
    "create_backend",
]
