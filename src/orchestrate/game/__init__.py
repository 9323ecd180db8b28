"""The reference game: 15 resources and 26 verbs."""

from orchestrate.game.resources import SCORE_RESOURCE, Resource
from orchestrate.game.verbs import (
    FREEBIE_LETTERS,
    REFERENCE_CATALOG,
    VERB_COUNT,
    build_reference_catalog,
)

__all__ = [
    "Resource",
    "SCORE_RESOURCE",
    "VERB_COUNT",
    "FREEBIE_LETTERS",
    "REFERENCE_CATALOG",
    "build_reference_catalog",
]
