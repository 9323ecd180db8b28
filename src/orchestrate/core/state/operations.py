"""Set algebra over bitmask states.

Usage:
    state = empty_state()
    state = add_action(state, catalog[3])
    contains(state, 3)  # True
    [a.letter for a in available_actions(state, catalog)]

States are plain ints, so these are free functions rather than methods.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orchestrate.core.catalog import Action, Catalog
    from orchestrate.core.types import State


class ActionAlreadyActiveError(RuntimeError):
    """Raised when adding an action that is already active.

    Signals a logic defect in the caller, never bad input: the scheduler only
    adds available actions.
    """

    pass


def _mask(action: Action | int) -> int:
    return 1 << action if isinstance(action, int) else action.mask


def empty_state() -> State:
    """State with no active actions."""
    return 0


def contains(state: State, action: Action | int) -> bool:
    """Check if an action (or action index) is active in state."""
    return state & _mask(action) != 0


def add_action(state: State, action: Action | int) -> State:
    """Return a new state with action active.

    Raises:
        ActionAlreadyActiveError: If the action is already active.
    """
    bit = _mask(action)
    if state & bit:
        raise ActionAlreadyActiveError(f"Action {action!r} is already active in state {state:#x}")
    return state | bit


def iter_indices(mask: int) -> Iterator[int]:
    """Yield the indices of set bits in ascending order."""
    while mask:
        low = mask & -mask
        yield low.bit_length() - 1
        mask ^= low


def available_mask(state: State, catalog: Catalog) -> int:
    """Mask of catalog actions not active in state."""
    return ~state & catalog.full_mask


def available_actions(state: State, catalog: Catalog) -> Iterator[Action]:
    """Lazily yield every inactive action in index order."""
    actions = catalog.actions
    for index in iter_indices(available_mask(state, catalog)):
        yield actions[index]


def active_actions(state: State, catalog: Catalog) -> Iterator[Action]:
    """Lazily yield every active action in index order."""
    actions = catalog.actions
    for index in iter_indices(state & catalog.full_mask):
        yield actions[index]


def action_count(state: State) -> int:
    """Number of active actions (population count)."""
    return state.bit_count()


def union(a: State, b: State) -> State:
    return a | b


def is_subset(a: State, b: State) -> bool:
    """Check if every action active in a is active in b."""
    return a & b == a


def state_from_actions(actions: Iterable[Action | int]) -> State:
    """Build a state from actions or indices. Duplicates are an error."""
    state = empty_state()
    for action in actions:
        state = add_action(state, action)
    return state
