"""The per-state scan rule.

Pure functions of (state, catalog, predicate). They live at module level so
process pools can pickle references to them.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from orchestrate.core.economy import desired_mask, is_viable, production_vector
from orchestrate.core.state import add_action, available_mask, iter_indices
from orchestrate.scheduling.models import ScanOutcome

if TYPE_CHECKING:
    from orchestrate.core.catalog import Catalog
    from orchestrate.core.types import State
    from orchestrate.scheduling.models import AcceptancePredicate


def scan_state(
    state: State,
    catalog: Catalog,
    predicate: AcceptancePredicate,
    outcome: ScanOutcome,
) -> None:
    """Scan one state, recording successors and solutions into outcome.

    Valid states are offered to the predicate and expanded by every
    available action. Invalid but viable states are expanded only by actions
    that help a current deficit. Non-viable states are dropped.

    The empty state is the search root and is never reported as a solution.
    """
    outcome.scanned += 1
    production = production_vector(state, catalog)

    if all(amount >= 0 for amount in production):
        if state and predicate(state, catalog):
            outcome.solutions.append(state)
        expand = available_mask(state, catalog)
    elif is_viable(state, catalog, production):
        expand = desired_mask(state, catalog, production)
    else:
        outcome.pruned += 1
        return

    next_states = outcome.next_states
    for index in iter_indices(expand):
        next_states.add(add_action(state, index))


def scan_slice(
    states: Iterable[State],
    catalog: Catalog,
    predicate: AcceptancePredicate,
) -> ScanOutcome:
    """Scan a slice of a wave into a fresh outcome."""
    outcome = ScanOutcome()
    for state in states:
        scan_state(state, catalog, predicate, outcome)
    return outcome
