"""Economy evaluation: net production, validity and viability of states.

Usage:
    production = production_vector(state, catalog)
    if is_valid(state, catalog, production):
        ...
    elif is_viable(state, catalog, production):
        for action in desired_actions(state, catalog, production): ...

Every function that needs the production of all resources accepts an optional
precomputed `production` vector so callers can sum each state once.

Viability is the pruning rule of the search. For a resource r in deficit, the
ceiling is the sum of every positive delta[r] among the available actions.
Adding any subset of available actions contributes at most the ceiling to r,
and adding an action only lowers the ceiling by that action's positive part,
so production + ceiling never increases along a search path. A state whose
production + ceiling is negative for some r therefore has no valid superset.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from orchestrate.core.state import available_mask, iter_indices

if TYPE_CHECKING:
    from orchestrate.core.catalog import Action, Catalog
    from orchestrate.core.types import State

Production = Sequence[int]


@dataclass(frozen=True, slots=True)
class Deficit:
    """A resource in deficit that the available actions cannot bring back to zero."""

    resource: int
    production: int
    ceiling: int


def resource_production(state: State, resource: int, catalog: Catalog) -> int:
    """Sum of delta[resource] over the active actions of state."""
    actions = catalog.actions
    return sum(actions[i].deltas[resource] for i in iter_indices(state & catalog.full_mask))


def production_vector(state: State, catalog: Catalog) -> tuple[int, ...]:
    """Net production of every resource, in catalog resource order."""
    totals = [0] * catalog.resource_count
    nonzero = catalog.nonzero_deltas
    for index in iter_indices(state & catalog.full_mask):
        for resource, delta in nonzero[index]:
            totals[resource] += delta
    return tuple(totals)


def is_valid(state: State, catalog: Catalog, production: Production | None = None) -> bool:
    """True if no resource has negative net production."""
    if production is None:
        production = production_vector(state, catalog)
    return all(amount >= 0 for amount in production)


def negative_resources(
    state: State, catalog: Catalog, production: Production | None = None
) -> tuple[int, ...]:
    """Indices of resources with strictly negative net production."""
    if production is None:
        production = production_vector(state, catalog)
    return tuple(r for r, amount in enumerate(production) if amount < 0)


def target_actions(state: State, resource: int, catalog: Catalog) -> list[Action]:
    """Available actions with a strictly positive delta for resource."""
    actions = catalog.actions
    mask = catalog.positive_masks[resource] & available_mask(state, catalog)
    return [actions[i] for i in iter_indices(mask)]


def production_ceiling(state: State, resource: int, catalog: Catalog) -> int:
    """Best-case extra production of resource from the available actions."""
    actions = catalog.actions
    mask = catalog.positive_masks[resource] & available_mask(state, catalog)
    return sum(actions[i].deltas[resource] for i in iter_indices(mask))


def impossible_deficits(
    state: State, catalog: Catalog, production: Production | None = None
) -> list[Deficit]:
    """Deficits that no set of available actions can close.

    Empty exactly when the state is viable.
    """
    if production is None:
        production = production_vector(state, catalog)

    deficits: list[Deficit] = []
    for resource in negative_resources(state, catalog, production):
        ceiling = production_ceiling(state, resource, catalog)
        if production[resource] + ceiling < 0:
            deficits.append(Deficit(resource, production[resource], ceiling))
    return deficits


def is_viable(state: State, catalog: Catalog, production: Production | None = None) -> bool:
    """Check if every current deficit could still be closed by adding actions.

    Only meaningful for invalid states; vacuously True for valid ones. The
    boundary is inclusive: a deficit exactly matched by the ceiling is viable.
    """
    if production is None:
        production = production_vector(state, catalog)

    actions = catalog.actions
    available = available_mask(state, catalog)
    for resource, amount in enumerate(production):
        if amount >= 0:
            continue
        ceiling = 0
        for index in iter_indices(catalog.positive_masks[resource] & available):
            ceiling += actions[index].deltas[resource]
        if amount + ceiling < 0:
            return False
    return True


def desired_mask(state: State, catalog: Catalog, production: Production | None = None) -> int:
    """Mask of available actions that help at least one current deficit."""
    if production is None:
        production = production_vector(state, catalog)

    positive_masks = catalog.positive_masks
    mask = 0
    for resource, amount in enumerate(production):
        if amount < 0:
            mask |= positive_masks[resource]
    return mask & available_mask(state, catalog)


def desired_actions(
    state: State, catalog: Catalog, production: Production | None = None
) -> list[Action]:
    """Available actions with a positive delta on some negative resource, in index order."""
    actions = catalog.actions
    return [actions[i] for i in iter_indices(desired_mask(state, catalog, production))]


def max_production(catalog: Catalog) -> tuple[int, ...]:
    """Per resource, the sum of every positive delta in the catalog."""
    return tuple(
        sum(action.deltas[r] for action in catalog.actions if action.deltas[r] > 0)
        for r in range(catalog.resource_count)
    )


def score_positive(state: State, catalog: Catalog) -> bool:
    """Default acceptance predicate: the score resource's production is positive.

    Raises:
        CatalogError: If the catalog declares no score resource.
    """
    return resource_production(state, catalog.score_index, catalog) > 0
