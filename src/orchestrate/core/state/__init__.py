"""State functionality: bitmask subsets of active actions."""

from orchestrate.core.state.operations import (
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

__all__ = [
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
]
