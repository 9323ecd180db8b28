"""Catalog models: actions, resources and the validated catalog table.

Usage:
    catalog = Catalog(
        resources=("Food", "Joy"),
        actions=(
            Action(index=0, letter="A", name="Farm", deltas=(50, 0)),
            Action(index=1, letter="B", name="Feast", deltas=(-50, 25)),
        ),
        score_resource="Joy",
    )
    catalog.resource_index("Joy")  # 1
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from orchestrate.core.types import MAX_ACTIONS


class CatalogError(ValueError):
    """Raised when a catalog is malformed or lacks something an operation needs."""

    pass


@dataclass(frozen=True, slots=True)
class Action:
    """One catalog entry with fixed per-resource deltas.

    Deltas are ordered like the owning catalog's resources. An action never
    changes after construction.
    """

    index: int
    letter: str
    name: str
    deltas: tuple[int, ...]

    @property
    def mask(self) -> int:
        """Single-bit mask of this action."""
        return 1 << self.index

    def production(self, resource: int) -> int:
        """Delta of this action for the resource at the given index."""
        return self.deltas[resource]


@dataclass(frozen=True, slots=True)
class Catalog:
    """Immutable, validated table of actions over an ordered list of resources.

    Validation happens at construction so that a malformed table fails before
    any search starts.

    Args:
        resources: Resource names. Their order indexes every delta vector.
        actions: Actions in index order; action i must have index i.
        score_resource: Name of the resource the default acceptance
            predicate scores on, or None.

    Raises:
        CatalogError: On more than MAX_ACTIONS actions, index/position
            mismatch, delta length mismatch, duplicate letters or resource
            names, or an unknown score resource.
    """

    resources: tuple[str, ...]
    actions: tuple[Action, ...]
    score_resource: str | None = None

    full_mask: int = field(init=False, repr=False, compare=False)
    positive_masks: tuple[int, ...] = field(init=False, repr=False, compare=False)
    """Per resource: mask of actions with a strictly positive delta."""

    nonzero_deltas: tuple[tuple[tuple[int, int], ...], ...] = field(
        init=False, repr=False, compare=False
    )
    """Per action: (resource, delta) pairs with delta != 0."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "resources", tuple(self.resources))
        object.__setattr__(self, "actions", tuple(self.actions))
        self._validate()

        positive = [0] * len(self.resources)
        for action in self.actions:
            for resource, delta in enumerate(action.deltas):
                if delta > 0:
                    positive[resource] |= action.mask

        object.__setattr__(self, "full_mask", (1 << len(self.actions)) - 1)
        object.__setattr__(self, "positive_masks", tuple(positive))
        object.__setattr__(
            self,
            "nonzero_deltas",
            tuple(
                tuple((r, d) for r, d in enumerate(action.deltas) if d != 0)
                for action in self.actions
            ),
        )

    def _validate(self) -> None:
        if len(self.actions) > MAX_ACTIONS:
            raise CatalogError(
                f"Catalog has {len(self.actions)} actions; at most {MAX_ACTIONS} are supported"
            )

        if len(set(self.resources)) != len(self.resources):
            raise CatalogError(f"Duplicate resource names in {self.resources}")

        letters: set[str] = set()
        for position, action in enumerate(self.actions):
            if action.index != position:
                raise CatalogError(
                    f"Action {action.name!r} has index {action.index} but sits at position {position}"
                )
            if len(action.deltas) != len(self.resources):
                raise CatalogError(
                    f"Action {action.name!r} has {len(action.deltas)} deltas, "
                    f"expected {len(self.resources)}"
                )
            if action.letter in letters:
                raise CatalogError(f"Duplicate action letter {action.letter!r}")
            letters.add(action.letter)

        if self.score_resource is not None and self.score_resource not in self.resources:
            raise CatalogError(f"Unknown score resource {self.score_resource!r}")

    def __len__(self) -> int:
        return len(self.actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.actions)

    def __getitem__(self, index: int) -> Action:
        return self.actions[index]

    @property
    def resource_count(self) -> int:
        return len(self.resources)

    def resource_index(self, name: str) -> int:
        """Index of a resource by name.

        Raises:
            CatalogError: If no resource has that name.
        """
        try:
            return self.resources.index(name)
        except ValueError as e:
            raise CatalogError(f"Unknown resource {name!r}") from e

    @property
    def score_index(self) -> int:
        """Index of the score resource.

        Raises:
            CatalogError: If the catalog declares no score resource.
        """
        if self.score_resource is None:
            raise CatalogError("Catalog declares no score resource")
        return self.resource_index(self.score_resource)

    def by_letter(self, letter: str) -> Action:
        """Look up an action by its letter."""
        for action in self.actions:
            if action.letter == letter:
                return action
        raise KeyError(letter)
