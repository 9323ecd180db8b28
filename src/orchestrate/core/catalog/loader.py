"""Load and dump catalogs as JSON.

Format:
    {
        "resources": ["Food", "Joy"],
        "score_resource": "Joy",
        "actions": [
            {"letter": "A", "name": "Farm", "deltas": {"Food": 50}},
            {"letter": "B", "name": "Feast", "deltas": {"Food": -50, "Joy": 25}}
        ]
    }

An action's index is its position in the list. Resources left out of
"deltas" are zero.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from orchestrate.core.catalog.builder import CatalogBuilder
from orchestrate.core.catalog.models import Catalog, CatalogError


def catalog_from_dict(data: dict[str, Any]) -> Catalog:
    """Build a catalog from its dictionary form.

    Raises:
        CatalogError: If required keys are missing or the table is malformed.
    """
    try:
        resources = data["resources"]
        actions = data["actions"]
    except KeyError as e:
        raise CatalogError(f"Catalog is missing key {e.args[0]!r}") from e
    if not isinstance(resources, list) or not all(isinstance(r, str) for r in resources):
        raise CatalogError("'resources' must be a list of names")
    if not isinstance(actions, list):
        raise CatalogError("'actions' must be a list")

    builder = CatalogBuilder(resources, score_resource=data.get("score_resource"))
    for position, entry in enumerate(actions):
        if not isinstance(entry, dict):
            raise CatalogError(f"Action at position {position} must be an object")
        if not isinstance(entry.get("letter"), str):
            raise CatalogError(f"Action at position {position} has no letter")
        action = builder.action(entry["letter"], entry.get("name", entry["letter"]))

        deltas = entry.get("deltas", {})
        if not isinstance(deltas, dict):
            raise CatalogError(f"Action at position {position}: 'deltas' must be an object")
        for resource, amount in deltas.items():
            # bool is an int subclass but never a meaningful delta
            if not isinstance(amount, int) or isinstance(amount, bool):
                raise CatalogError(
                    f"Action at position {position}: delta for {resource!r} must be an integer"
                )
            action.with_(resource, amount)

    return builder.build()


def catalog_to_dict(catalog: Catalog) -> dict[str, Any]:
    """Dictionary form of a catalog, the inverse of catalog_from_dict."""
    return {
        "resources": list(catalog.resources),
        "score_resource": catalog.score_resource,
        "actions": [
            {
                "letter": action.letter,
                "name": action.name,
                "deltas": {
                    catalog.resources[r]: delta for r, delta in enumerate(action.deltas) if delta
                },
            }
            for action in catalog.actions
        ],
    }


def load_catalog(path: str | Path) -> Catalog:
    """Read and validate a JSON catalog file.

    Raises:
        CatalogError: If the file is not valid JSON or the table is malformed.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError(f"{path}: invalid JSON ({e.msg})") from e
    if not isinstance(data, dict):
        raise CatalogError(f"{path}: expected a JSON object")
    return catalog_from_dict(data)
