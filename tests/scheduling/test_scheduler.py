"""Tests for the wave scheduler and solve().

Critical Invariants:
- Every valid, accepted state is found (pruning never loses a solution)
- Each state is scanned at most once per run
- Results are identical across worker counts and backends
- Solutions are emitted sorted within a wave, waves by action count
"""

import pytest
from hypothesis import given, settings
from strategies import catalogs

from orchestrate import (
    Catalog,
    CatalogBuilder,
    InMemoryWaveHistory,
    SchedulerStatus,
    SequentialScheduler,
    SolverConfig,
    WaveScheduler,
    solve,
)
from orchestrate.core.economy import is_valid, resource_production, score_positive
from orchestrate.core.state import iter_indices


def brute_force(catalog, predicate=score_positive):
    """Every non-empty valid accepted state, ordered like solve() emits them."""
    found = [
        state
        for state in range(1, catalog.full_mask + 1)
        if is_valid(state, catalog) and predicate(state, catalog)
    ]
    return sorted(found, key=lambda s: (s.bit_count(), s))


def sub_catalog(catalog, letters):
    """Catalog of the given actions only, re-indexed in the given order."""
    builder = CatalogBuilder(catalog.resources, score_resource=catalog.score_resource)
    for letter in letters:
        action = catalog.by_letter(letter)
        new = builder.action(action.letter, action.name)
        for resource, delta in zip(catalog.resources, action.deltas, strict=True):
            if delta:
                new.with_(resource, delta)
    return builder.build()


@pytest.fixture
def mini_reference(reference_catalog):
    """Twelve reference verbs including the shortest reference solution."""
    return sub_catalog(reference_catalog, "ABEKLMRSTVXZ")


# End-to-end on small catalogs


def test_food_joy_solutions(food_joy_catalog):
    summary = solve(food_joy_catalog)

    assert summary.solutions == [0b011, 0b101]
    assert summary.waves == 4
    assert summary.scanned == 7
    assert summary.pruned == 1
    assert summary.eliminated == 1


def test_chain_solution(chain_catalog):
    summary = solve(chain_catalog)

    assert summary.solutions == [0b1111]
    assert summary.waves == 5


def test_result_handler_called_once_per_solution_in_order(mini_reference):
    emitted = []

    summary = solve(mini_reference, result_handler=emitted.append)

    assert emitted == summary.solutions
    assert len(set(emitted)) == len(emitted)
    keys = [(s.bit_count(), s) for s in emitted]
    assert keys == sorted(keys)


def test_mini_reference_matches_brute_force(mini_reference):
    summary = solve(mini_reference)

    assert summary.solutions == brute_force(mini_reference)
    assert summary.solutions[0] == sum(
        mini_reference.by_letter(c).mask for c in "ELRVXZ"
    )


@settings(max_examples=60, deadline=None)
@given(catalog=catalogs(max_actions=7, max_resources=3))
def test_search_finds_exactly_the_brute_force_solutions(catalog):
    """PROPERTY: Pruned wave search equals exhaustive enumeration.

    Why: Pruning must be sound for any catalog, not only the reference data.
    """
    assert solve(catalog).solutions == brute_force(catalog)


@settings(max_examples=30, deadline=None)
@given(catalog=catalogs(max_actions=7, max_resources=3))
def test_custom_predicate_matches_brute_force(catalog):
    def even_count(state, cat):
        return state.bit_count() % 2 == 0

    assert solve(catalog, even_count).solutions == brute_force(catalog, even_count)


# Boundary


def _single_zero_action():
    return Catalog(
        resources=("Points",),
        actions=(CatalogBuilder(("Points",)).action("A", "Idle").build(),),
        score_resource="Points",
    )


def test_single_zero_action_with_accepting_predicate():
    """N=1, all-zero deltas, predicate accepts zero production: one solution, two waves."""
    catalog = _single_zero_action()

    def non_negative_score(state, cat):
        return resource_production(state, cat.score_index, cat) >= 0

    summary = solve(catalog, non_negative_score)

    assert summary.solutions == [0b1]
    assert summary.waves == 2


def test_single_zero_action_with_default_predicate():
    summary = solve(_single_zero_action())

    assert summary.solutions == []
    assert summary.waves == 2


def test_empty_state_never_reported():
    """The search root is never a solution, even for an always-true predicate."""
    summary = solve(_single_zero_action(), lambda state, cat: True)

    assert 0 not in summary.solutions


def test_empty_catalog_terminates():
    catalog = Catalog(resources=("Points",), actions=(), score_resource="Points")

    summary = solve(catalog, lambda state, cat: True)

    assert summary.solutions == []
    assert summary.waves == 1


# Exactly-once visitation


def test_each_state_scanned_at_most_once(mini_reference):
    """CRITICAL: No state is scanned twice in a run.

    Why: Waves hold states of one action count each and frontiers are sets,
    so duplicates would mean broken deduplication.
    """
    scheduler = SequentialScheduler(mini_reference)
    scheduler.start()
    scanned = []
    while scheduler.status is SchedulerStatus.RUNNING:
        wave = scheduler.wave_index
        frontier = scheduler.frontier
        assert all(state.bit_count() == wave for state in frontier)
        assert list(frontier) == sorted(frontier)
        scanned.extend(frontier)
        scheduler.step()

    assert len(scanned) == len(set(scanned))
    assert len(scanned) == scheduler.progress.scanned


# Determinism


@pytest.mark.parametrize(
    "config",
    [
        SolverConfig(workers=2, backend="thread"),
        SolverConfig(workers=4, backend="thread", chunk_size=7),
        SolverConfig(workers=3, backend="sequential"),
        SolverConfig(workers=2, backend="process"),
    ],
    ids=["thread-2", "thread-4-chunked", "sequential-3", "process-2"],
)
def test_parallel_matches_sequential(mini_reference, config):
    """CRITICAL: Worker count and backend never change the result.

    Why: Output must be reproducible bit-for-bit across runs and machines.
    """
    sequential = solve(mini_reference, workers=1)
    parallel = solve(mini_reference, config=config)

    assert parallel.solutions == sequential.solutions
    assert parallel.scanned == sequential.scanned
    assert parallel.pruned == sequential.pruned
    assert parallel.waves == sequential.waves


def test_repeated_runs_identical(food_joy_catalog):
    results = [solve(food_joy_catalog, config=SolverConfig(workers=3)).solutions for _ in range(3)]

    assert all(r == results[0] for r in results)


# State machine


def test_status_transitions(food_joy_catalog):
    scheduler = WaveScheduler(food_joy_catalog)
    assert scheduler.status is SchedulerStatus.IDLE

    scheduler.start()
    assert scheduler.status is SchedulerStatus.RUNNING
    assert scheduler.frontier == (0,)
    assert scheduler.wave_index == 0

    scheduler.step()
    assert scheduler.status is SchedulerStatus.RUNNING
    assert scheduler.frontier == (0b001, 0b010, 0b100)
    assert scheduler.wave_index == 1

    scheduler.run()
    assert scheduler.status is SchedulerStatus.DONE
    assert scheduler.frontier == ()


def test_step_before_start_raises(food_joy_catalog):
    with pytest.raises(RuntimeError, match="IDLE"):
        WaveScheduler(food_joy_catalog).step()


def test_start_twice_raises(food_joy_catalog):
    scheduler = WaveScheduler(food_joy_catalog)
    scheduler.start()

    with pytest.raises(RuntimeError, match="RUNNING"):
        scheduler.start()


def test_step_after_done_raises(food_joy_catalog):
    scheduler = WaveScheduler(food_joy_catalog)
    scheduler.run()

    with pytest.raises(RuntimeError, match="DONE"):
        scheduler.step()


def test_wave_records(food_joy_catalog):
    history = InMemoryWaveHistory()

    solve(food_joy_catalog, recorder=history)

    assert [r.wave for r in history] == [0, 1, 2, 3]
    assert [r.frontier_size for r in history] == [1, 3, 2, 1]
    assert [r.next_frontier_size for r in history] == [3, 2, 1, 0]
    assert [r.eliminated for r in history] == [0, 1, 0, 0]
    assert [r.pruned for r in history] == [0, 0, 0, 1]
    assert history.get_wave(2).solutions == [0b011, 0b101]
    assert history.total_scanned() == 7


# Errors


def test_result_handler_error_propagates(food_joy_catalog):
    def failing_handler(state):
        raise OSError("disk full")

    scheduler = WaveScheduler(food_joy_catalog)
    with pytest.raises(OSError, match="disk full"):
        scheduler.run(failing_handler)

    assert scheduler.status is SchedulerStatus.DONE


@pytest.mark.parametrize("workers", [1, 3])
def test_predicate_error_propagates(food_joy_catalog, workers):
    def broken(state, cat):
        raise ValueError("bad predicate")

    with pytest.raises(ValueError, match="bad predicate"):
        solve(food_joy_catalog, broken, config=SolverConfig(workers=workers))


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        SolverConfig(workers=0)
    with pytest.raises(ValueError):
        SolverConfig(chunk_size=0)


def test_solutions_only_use_catalog_bits(mini_reference):
    for state in solve(mini_reference).solutions:
        assert all(i < len(mini_reference) for i in iter_indices(state))
