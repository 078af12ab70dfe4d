"""Tests for grouping values into runs."""

import random

import pytest

from adjranges_core.adjacency import CHAR, I8, INTEGER, U8, U32, AdjacencyError, PredicateAdjacency
from adjranges_core.runs import Run, build_runs, expand_run, expand_runs


def _pairs(runs):
    return [(run.start, run.end) for run in runs]


def test_build_runs_basic_collapsing():
    runs = list(build_runs([42, 100, 101, 102, 103, 104, 20, 31, 32, 33, 34]))
    assert _pairs(runs) == [(42, 42), (100, 104), (20, 20), (31, 34)]
    assert [run.length for run in runs] == [1, 5, 1, 4]


def test_build_runs_empty():
    assert list(build_runs([])) == []


def test_build_runs_single_value():
    assert list(build_runs([5])) == [Run(5, 5)]


def test_build_runs_single_run():
    assert list(build_runs([7, 8, 9, 10])) == [Run(7, 10, 4)]


def test_build_runs_descending_never_merges():
    assert _pairs(build_runs([5, 4, 3])) == [(5, 5), (4, 4), (3, 3)]
    assert _pairs(build_runs([5, 3, 1])) == [(5, 5), (3, 3), (1, 1)]


def test_build_runs_duplicates_start_new_run():
    runs = list(build_runs([1, 1, 2]))
    assert runs == [Run(1, 1), Run(1, 2, 2)]


def test_build_runs_all_duplicates():
    assert list(build_runs([3, 3, 3])) == [Run(3, 3), Run(3, 3), Run(3, 3)]


def test_build_runs_negative_values():
    assert _pairs(build_runs([-3, -2, -1, 0, 1, 5])) == [(-3, 1), (5, 5)]


def test_build_runs_is_lazy():
    consumed = []

    def values():
        for value in (1, 2, 5, 6, 9):
            consumed.append(value)
            yield value

    runs = build_runs(values())
    assert consumed == []

    assert next(runs) == Run(1, 2, 2)
    assert consumed == [1, 2, 5]


def test_build_runs_consumes_generator_once():
    runs = build_runs(value for value in (10, 11, 20))
    assert list(runs) == [Run(10, 11, 2), Run(20, 20)]
    assert list(runs) == []


def test_build_runs_u8_maximum_has_no_successor():
    assert list(build_runs([254, 255, 0, 1], adjacency=U8)) == [Run(254, 255, 2), Run(0, 1, 2)]


def test_build_runs_u32_maximum_followed_by_small_value():
    assert _pairs(build_runs([2**32 - 1, 42], adjacency=U32)) == [(2**32 - 1, 2**32 - 1), (42, 42)]


def test_build_runs_u32_no_wraparound_to_zero():
    assert _pairs(build_runs([2**32 - 1, 0], adjacency=U32)) == [(2**32 - 1, 2**32 - 1), (0, 0)]


def test_build_runs_signed_boundaries():
    assert _pairs(build_runs([-128, -127, 42], adjacency=I8)) == [(-128, -127), (42, 42)]
    assert _pairs(build_runs([127, -128], adjacency=I8)) == [(127, 127), (-128, -128)]


def test_build_runs_unbounded_integers():
    big = 2**200
    assert list(build_runs([big, big + 1])) == [Run(big, big + 1, 2)]


def test_build_runs_characters():
    assert _pairs(build_runs("abcxyz!")) == [("a", "c"), ("x", "z"), ("!", "!")]


def test_build_runs_predicate_adjacency():
    adjacency = PredicateAdjacency(lambda a, b: a + 2 == b)
    assert _pairs(build_runs([2, 4, 6, 7, 9], adjacency)) == [(2, 6), (7, 9)]


def test_build_runs_unsupported_type_raises():
    with pytest.raises(AdjacencyError):
        list(build_runs([1.0, 2.0]))


def test_run_rejects_non_positive_length():
    with pytest.raises(ValueError):
        Run(1, 1, 0)


def test_run_rejects_distinct_ends_with_single_length():
    with pytest.raises(ValueError) as exc_info:
        Run(1, 3)
    assert "length" in str(exc_info.value)


def test_expand_caller_built_run():
    assert list(expand_run(Run(1, 3, 3), INTEGER)) == [1, 2, 3]


def test_run_is_frozen():
    run = Run(1, 3, 3)
    with pytest.raises(AttributeError):
        run.start = 2


def test_run_is_singleton():
    assert Run(4, 4).is_singleton
    assert not Run(4, 6, 3).is_singleton


def test_expand_run():
    assert list(expand_run(Run(100, 104, 5), INTEGER)) == [100, 101, 102, 103, 104]
    assert list(expand_run(Run("a", "c", 3), CHAR)) == ["a", "b", "c"]


def test_expand_run_requires_successor_adjacency():
    adjacency = PredicateAdjacency(lambda a, b: a + 1 == b)
    with pytest.raises(AdjacencyError):
        list(expand_run(Run(1, 2, 2), adjacency))


@pytest.mark.parametrize(
    "values",
    (
        [],
        [5],
        [1, 1, 2],
        [5, 4, 3],
        [42, 100, 101, 102, 103, 104, 20, 31, 32, 33, 34],
        [0, 1, 1, 2, 3, 3, 2, 1, 0],
    ),
)
def test_expand_runs_reconstructs_input(values):
    assert list(expand_runs(build_runs(values), INTEGER)) == values


def test_random_sequences_are_lossless_and_maximal():
    rng = random.Random(1234)
    for _ in range(200):
        values = [rng.randint(0, 12) for _ in range(rng.randint(0, 30))]
        runs = list(build_runs(values, INTEGER))

        assert list(expand_runs(runs, INTEGER)) == values
        for previous, following in zip(runs, runs[1:]):
            assert not INTEGER.is_adjacent(previous.end, following.start)
