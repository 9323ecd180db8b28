"""Orchestrate solver: enumerate self-sustaining sets of actions.

Usage:
    from orchestrate import REFERENCE_CATALOG, letters, solve

    summary = solve(REFERENCE_CATALOG, workers=4)
    for state in summary.solutions:
        print(letters(state, REFERENCE_CATALOG))

    # Custom catalog and acceptance predicate
    builder = CatalogBuilder(("Food", "Joy"), score_resource="Joy")
    builder.action("A", "Farm").with_("Food", 50)
    builder.action("B", "Feast").with_("Food", -50).with_("Joy", 25)
    catalog = builder.build()

    summary = solve(catalog, lambda state, cat: state.bit_count() == 2)
"""

__version__ = "0.1.0"

# Core primitives
from orchestrate.core import (
    MAX_ACTIONS,
    Action,
    ActionAlreadyActiveError,
    Catalog,
    CatalogBuilder,
    CatalogError,
    State,
    add_action,
    available_actions,
    contains,
    desired_actions,
    empty_state,
    is_valid,
    is_viable,
    load_catalog,
    negative_resources,
    production_vector,
    resource_production,
    score_positive,
)

# Reference game
from orchestrate.game import REFERENCE_CATALOG, Resource

# Reporting
from orchestrate.reporting import SolutionFileWriter, letters

# Scheduling
from orchestrate.scheduling import (
    SchedulerStatus,
    SequentialScheduler,
    SolverConfig,
    SolveSummary,
    WaveScheduler,
    solve,
)

# Tracing (optional)
from orchestrate.tracing import (
    InMemoryWaveHistory,
    WaveHistory,
    WaveRecord,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "MAX_ACTIONS",
    "State",
    "Action",
    "Catalog",
    "CatalogBuilder",
    "CatalogError",
    "ActionAlreadyActiveError",
    "load_catalog",
    "empty_state",
    "contains",
    "add_action",
    "available_actions",
    "resource_production",
    "production_vector",
    "is_valid",
    "is_viable",
    "negative_resources",
    "desired_actions",
    "score_positive",
    # Game
    "REFERENCE_CATALOG",
    "Resource",
    # Reporting
    "letters",
    "SolutionFileWriter",
    # Scheduling
    "solve",
    "WaveScheduler",
    "SequentialScheduler",
    "SchedulerStatus",
    "SolverConfig",
    "SolveSummary",
    # Tracing
    "WaveHistory",
    "WaveRecord",
    "InMemoryWaveHistory",
]
