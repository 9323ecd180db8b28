"""Tests for production sums, validity, viability and desired actions.

Critical Invariants:
- The empty state is valid (vacuous sums are zero)
- Pruning is monotonic: a non-viable state has no viable extension
- The viability ceiling is inclusive (deficit == ceiling is viable)
"""

import pytest
from hypothesis import given
from strategies import catalog_and_state

from orchestrate import CatalogBuilder
from orchestrate.core.catalog import Catalog, CatalogError
from orchestrate.core.economy import (
    desired_actions,
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
from orchestrate.core.state import add_action, available_actions, empty_state
from orchestrate.game import Resource
from orchestrate.reporting import state_from_letters


@pytest.fixture
def exact_ceiling_catalog():
    """Spend consumes 50 Gold; two mints produce exactly 50 between them."""
    builder = CatalogBuilder(("Gold", "Points"), score_resource="Points")
    builder.action("S", "Spend").with_("Gold", -50).with_("Points", 25)
    builder.action("A", "Mint A").with_("Gold", 25)
    builder.action("B", "Mint B").with_("Gold", 25)
    builder.action("C", "Tax").with_("Gold", -25)
    return builder.build()


# Production


def test_empty_state_is_valid(reference_catalog):
    """CRITICAL: The search root is valid.

    Why: Vacuous sums are zero, never negative; the first wave must expand.
    """
    assert is_valid(empty_state(), reference_catalog)
    assert production_vector(empty_state(), reference_catalog) == (0,) * 15
    assert negative_resources(empty_state(), reference_catalog) == ()


def test_resource_production_sums_active_deltas(reference_catalog):
    state = state_from_letters("XZ", reference_catalog)

    assert resource_production(state, Resource.Joy, reference_catalog) == 0
    assert resource_production(state, Resource.Points, reference_catalog) == 25
    assert resource_production(state, Resource.People, reference_catalog) == -25


@given(data=catalog_and_state(max_actions=8, max_resources=4))
def test_production_vector_matches_per_resource_sums(data):
    """PROPERTY: The vector form agrees with the per-resource definition."""
    catalog, state = data

    vector = production_vector(state, catalog)

    assert vector == tuple(
        resource_production(state, r, catalog) for r in range(catalog.resource_count)
    )


def test_shortest_reference_solution_is_valid(reference_catalog):
    state = state_from_letters("ELRVXZ", reference_catalog)

    assert is_valid(state, reference_catalog)
    assert score_positive(state, reference_catalog)


def test_negative_resources(reference_catalog):
    state = state_from_letters("X", reference_catalog)

    assert not is_valid(state, reference_catalog)
    assert negative_resources(state, reference_catalog) == (Resource.Joy,)


# Viability


def test_viability_ceiling_is_inclusive(exact_ceiling_catalog):
    """CRITICAL: A deficit exactly matched by available producers is viable.

    Why: Spend + Mint A + Mint B is a valid state at production 0; pruning
    Spend would lose it.
    """
    spend = state_from_letters("S", exact_ceiling_catalog)

    assert resource_production(spend, 0, exact_ceiling_catalog) == -50
    assert production_ceiling(spend, 0, exact_ceiling_catalog) == 50
    assert is_viable(spend, exact_ceiling_catalog)
    assert impossible_deficits(spend, exact_ceiling_catalog) == []


def test_deficit_beyond_ceiling_is_not_viable(exact_ceiling_catalog):
    state = state_from_letters("SC", exact_ceiling_catalog)

    assert not is_viable(state, exact_ceiling_catalog)
    deficits = impossible_deficits(state, exact_ceiling_catalog)
    assert len(deficits) == 1
    assert deficits[0].resource == 0
    assert deficits[0].production == -75
    assert deficits[0].ceiling == 50


def test_valid_states_are_vacuously_viable(reference_catalog):
    assert is_viable(empty_state(), reference_catalog)


def test_luxuriate_alone_is_viable(reference_catalog):
    """Joy -50 can be covered by Trade, Socialize, Brew or Read."""
    state = state_from_letters("X", reference_catalog)

    assert is_viable(state, reference_catalog)
    assert production_ceiling(state, Resource.Joy, reference_catalog) == 25 + 100 + 75 + 50


@given(data=catalog_and_state(max_actions=7, max_resources=3))
def test_pruning_is_monotonic(data):
    """PROPERTY: Adding any available action to a non-viable state stays non-viable.

    This is the soundness of pruning: a dropped state never has a valid superset.
    """
    catalog, state = data
    if is_valid(state, catalog) or is_viable(state, catalog):
        return  # Not pruned, skip

    for action in available_actions(state, catalog):
        extended = add_action(state, action)
        assert not is_valid(extended, catalog)
        assert not is_viable(extended, catalog), (
            f"INVARIANT VIOLATED: {state:#b} is non-viable but {extended:#b} is viable"
        )


@given(data=catalog_and_state(max_actions=6, max_resources=3))
def test_non_viable_states_have_no_valid_superset(data):
    """PROPERTY: Exhaustive check of every superset of a non-viable state."""
    catalog, state = data
    if is_valid(state, catalog) or is_viable(state, catalog):
        return  # Not pruned, skip

    free = catalog.full_mask & ~state
    subset = free
    while True:
        assert not is_valid(state | subset, catalog)
        if subset == 0:
            break
        subset = (subset - 1) & free


# Desired actions


def test_desired_actions_target_current_deficits(reference_catalog):
    state = state_from_letters("X", reference_catalog)

    desired = [a.letter for a in desired_actions(state, reference_catalog)]

    assert desired == ["A", "S", "W", "Z"]


def test_desired_actions_union_over_deficits(reference_catalog):
    """Make Tools needs Stone and Wood: Mine, Chop Trees and Recycle help."""
    state = state_from_letters("K", reference_catalog)

    assert [a.letter for a in desired_actions(state, reference_catalog)] == ["M", "T", "Y"]


def test_target_actions_exclude_active(reference_catalog):
    state = state_from_letters("KM", reference_catalog)

    assert [a.letter for a in target_actions(state, Resource.Stone, reference_catalog)] == ["Y"]


def test_desired_actions_of_valid_state_is_empty(reference_catalog):
    assert desired_actions(empty_state(), reference_catalog) == []


@given(data=catalog_and_state(max_actions=7, max_resources=3))
def test_desired_actions_are_available_and_helpful(data):
    """PROPERTY: Each desired action is inactive and helps some deficit."""
    catalog, state = data
    negative = negative_resources(state, catalog)

    for action in desired_actions(state, catalog):
        assert not state & action.mask
        assert any(action.deltas[r] > 0 for r in negative)


# Max production and predicate


def test_max_production(reference_catalog):
    maxima = max_production(reference_catalog)

    assert maxima[Resource.Stone] == 100
    assert maxima[Resource.Points] == 25
    assert maxima[Resource.Joy] == 25 + 100 + 75 + 50


def test_score_positive(reference_catalog):
    assert not score_positive(empty_state(), reference_catalog)
    assert score_positive(state_from_letters("X", reference_catalog), reference_catalog)


def test_score_positive_requires_score_resource():
    catalog = Catalog(resources=("R",), actions=())

    with pytest.raises(CatalogError):
        score_positive(0, catalog)
