"""Core functionalities: stateless catalog, state and economy primitives.

Architecture Note:
    core/ contains pure functions over immutable values (catalogs and int
    bitmask states). Nothing here holds runtime state; the search loop,
    workers and progress counters live in scheduling/.
"""

from orchestrate.core.catalog import (
    Action,
    ActionBuilder,
    Catalog,
    CatalogBuilder,
    CatalogError,
    catalog_from_dict,
    catalog_to_dict,
    load_catalog,
)
from orchestrate.core.economy import (
    Deficit,
    desired_actions,
    desired_mask,
    impossible_deficits,
    is_valid,
    is_viable,
    max_production,
    negative_resources,
    production_ceiling,
    production_vector,
    resource_production,
    score_positive,
    target_actions,
)
from orchestrate.core.state import (
    ActionAlreadyActiveError,
    action_count,
    active_actions,
    add_action,
    available_actions,
    available_mask,
    contains,
    empty_state,
    is_subset,
    iter_indices,
    state_from_actions,
    union,
)
from orchestrate.core.types import MAX_ACTIONS, State

__all__ = [
    # Types
    "MAX_ACTIONS",
    "State",
    # Catalog
    "Action",
    "Catalog",
    "CatalogError",
    "ActionBuilder",
    "CatalogBuilder",
    "catalog_from_dict",
    "catalog_to_dict",
    "load_catalog",
    # State
    "ActionAlreadyActiveError",
    "empty_state",
    "contains",
    "add_action",
    "available_actions",
    "available_mask",
    "active_actions",
    "action_count",
    "iter_indices",
    "union",
    "is_subset",
    "state_from_actions",
    # Economy
    "Deficit",
    "resource_production",
    "production_vector",
    "is_valid",
    "negative_resources",
    "is_viable",
    "impossible_deficits",
    "target_actions",
    "production_ceiling",
    "desired_actions",
    "desired_mask",
    "max_production",
    "score_positive",
]
