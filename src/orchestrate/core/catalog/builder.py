"""Fluent construction of catalogs.

Usage:
    builder = CatalogBuilder(("Stone", "Wood", "Tools"))
    builder.action("K", "Make Tools").with_("Stone", -25).with_("Wood", -25).with_("Tools", 50)
    builder.action("M", "Mine").with_("Stone", 50)
    catalog = builder.build()
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from orchestrate.core.catalog.models import Action, Catalog, CatalogError


def _resource_name(resource: str | Enum) -> str:
    return resource.name if isinstance(resource, Enum) else resource


class ActionBuilder:
    """Accumulates deltas for one action. Repeated resources add up."""

    def __init__(self, index: int, letter: str, name: str, resources: tuple[str, ...]):
        self._index = index
        self._letter = letter
        self._name = name
        self._resources = resources
        self._deltas = [0] * len(resources)

    def with_(self, resource: str | Enum, amount: int) -> ActionBuilder:
        """Add an amount of a resource to this action's deltas."""
        name = _resource_name(resource)
        try:
            position = self._resources.index(name)
        except ValueError as e:
            raise CatalogError(f"Action {self._name!r} uses unknown resource {name!r}") from e
        self._deltas[position] += amount
        return self

    def build(self) -> Action:
        return Action(
            index=self._index,
            letter=self._letter,
            name=self._name,
            deltas=tuple(self._deltas),
        )


class CatalogBuilder:
    """Builds a Catalog action by action, assigning indices in call order.

    Args:
        resources: Resource names, or an Enum class whose member names are
            used in definition order.
        score_resource: Name (or Enum member) of the score resource.
    """

    def __init__(
        self,
        resources: Iterable[str] | type[Enum],
        score_resource: str | Enum | None = None,
    ):
        if isinstance(resources, type) and issubclass(resources, Enum):
            self._resources = tuple(member.name for member in resources)
        else:
            self._resources = tuple(resources)
        self._score = _resource_name(score_resource) if score_resource is not None else None
        self._actions: list[ActionBuilder] = []

    def action(self, letter: str, name: str) -> ActionBuilder:
        """Begin a new action; chain `with_` calls on the returned builder."""
        builder = ActionBuilder(len(self._actions), letter, name, self._resources)
        self._actions.append(builder)
        return builder

    def build(self) -> Catalog:
        return Catalog(
            resources=self._resources,
            actions=tuple(builder.build() for builder in self._actions),
            score_resource=self._score,
        )
