"""Human-readable renderings of actions, states and catalogs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from orchestrate.core.economy import impossible_deficits, max_production
from orchestrate.core.state import active_actions

if TYPE_CHECKING:
    from orchestrate.core.catalog import Action, Catalog
    from orchestrate.core.types import State


def letters(state: State, catalog: Catalog) -> str:
    """Letters of the active actions in index order, e.g. "ELRVXZ"."""
    return "".join(action.letter for action in active_actions(state, catalog))


def state_from_letters(text: str, catalog: Catalog) -> State:
    """Inverse of letters(). Raises KeyError on an unknown letter."""
    state = 0
    for letter in text:
        state |= catalog.by_letter(letter).mask
    return state


def describe_state(state: State, catalog: Catalog) -> str:
    return f"State[{letters(state, catalog)}]"


def to_binary(state: State, catalog: Catalog) -> str:
    """Binary rendering padded to one digit per action."""
    return format(state, f"0{len(catalog)}b")


def describe_action(action: Action, catalog: Catalog) -> str:
    """e.g. "X: Luxuriate { Joy: -50, Points: 25 }". Zero deltas are omitted."""
    parts = [
        f"{catalog.resources[r]}: {delta}" for r, delta in enumerate(action.deltas) if delta != 0
    ]
    return f"{action.letter}: {action.name} {{ {', '.join(parts)} }}"


def explain_non_viable(state: State, catalog: Catalog) -> str | None:
    """Explain which deficits make a state non-viable, or None if it is viable."""
    deficits = impossible_deficits(state, catalog)
    if not deficits:
        return None

    lines = ["the following resources are too negative:"]
    for deficit in deficits:
        lines.append(
            f"\t{catalog.resources[deficit.resource]}: {deficit.production} "
            f"(Maximum production remaining: {deficit.ceiling})"
        )
    return "\n".join(lines)


def production_summary(catalog: Catalog) -> list[str]:
    """One line per resource with the catalog's maximum production of it."""
    return [
        f"Max production of {name} is {amount}"
        for name, amount in zip(catalog.resources, max_production(catalog), strict=True)
    ]
