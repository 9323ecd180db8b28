"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from orchestrate import REFERENCE_CATALOG, CatalogBuilder


@pytest.fixture
def reference_catalog():
    """The 26-verb reference game."""
    return REFERENCE_CATALOG


@pytest.fixture
def food_joy_catalog():
    """Small economy: Farm feeds Feast, Feast scores Joy, Party burns Food for more Joy.

    Solutions under the default predicate: AB and AC. ABC is invalid (Food -50)
    and is the only state the search prunes.
    """
    builder = CatalogBuilder(("Food", "Joy"), score_resource="Joy")
    builder.action("A", "Farm").with_("Food", 50)
    builder.action("B", "Feast").with_("Food", -50).with_("Joy", 25)
    builder.action("C", "Party").with_("Food", -50).with_("Joy", 50)
    return builder.build()


@pytest.fixture
def chain_catalog():
    """Three-step production chain with a score at the end.

    Ore -> Metal -> Tools -> Points; only the full chain plus the mine is valid.
    """
    builder = CatalogBuilder(("Ore", "Metal", "Tools", "Points"), score_resource="Points")
    builder.action("M", "Mine").with_("Ore", 25)
    builder.action("S", "Smelt").with_("Ore", -25).with_("Metal", 25)
    builder.action("F", "Forge").with_("Metal", -25).with_("Tools", 25)
    builder.action("P", "Sell").with_("Tools", -25).with_("Points", 10)
    return builder.build()
