import operator
import random

import pytest

from algoworks.selection import kth_statistic, partition, percentiles, solve_percentiles


@pytest.mark.parametrize(
    "values, ks, expected",
    [
        ([44], [0, 0, 0], [44, 44, 44]),
        ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], [1, 5, 9], [2, 6, 10]),
        ([5, 3, 9, 1, 7, 2, 8, 4, 6, 0], [1, 5, 9], [1, 5, 9]),
        ([2] * 10, [1, 5, 9], [2, 2, 2]),
        ([5, 3, 8, 1, 9, 2, 7], [0, 3, 6], [1, 5, 9]),
    ],
)
def test_kth_statistic_source_cases(values, ks, expected):
    array = list(values)
    results = [kth_statistic(array, k, 0, len(array) - 1) for k in ks]
    assert results == expected


def test_kth_statistic_matches_sorted_for_every_k():
    rng = random.Random(7)
    values = [rng.randint(-50, 50) for _ in range(40)]
    for k in range(len(values)):
        assert kth_statistic(list(values), k, rng=rng) == sorted(values)[k]


def test_kth_statistic_with_greater():
    assert kth_statistic([5, 3, 8, 1, 9, 2, 7], 0, less=operator.gt) == 9


def test_kth_statistic_out_of_range():
    with pytest.raises(IndexError):
        kth_statistic([1, 2, 3], 3)


def test_partition_splits_around_pivot():
    rng = random.Random(3)
    values = [5, 3, 9, 1, 7, 2, 8, 4, 6, 0, 5, 5]
    original = sorted(values)
    pivot_index = partition(values, 0, len(values) - 1, operator.lt, rng)
    pivot = values[pivot_index]
    assert all(v < pivot for v in values[:pivot_index])
    assert all(v >= pivot for v in values[pivot_index + 1 :])
    assert sorted(values) == original


def test_partition_subrange_leaves_rest_untouched():
    values = [9, 8, 3, 1, 2, 7, 6]
    index = partition(values, 2, 4, operator.lt, random.Random(1))
    assert 2 <= index <= 4
    assert values[:2] == [9, 8]
    assert values[5:] == [7, 6]
    assert sorted(values[2:5]) == [1, 2, 3]


def test_partition_bad_range():
    with pytest.raises(IndexError):
        partition([1, 2], 0, 2, operator.lt, random.Random(0))


def test_percentiles_does_not_mutate_input():
    values = [5, 3, 9, 1, 7, 2, 8, 4, 6, 0]
    assert percentiles(values) == (1, 5, 9)
    assert values == [5, 3, 9, 1, 7, 2, 8, 4, 6, 0]


def test_percentiles_empty():
    with pytest.raises(ValueError):
        percentiles([])


def test_solve_percentiles():
    assert solve_percentiles("10\n1 2 3 4 5 6 7 8 9 10\n") == "2\n6\n10\n"


def test_solve_percentiles_truncated():
    with pytest.raises(ValueError):
        solve_percentiles("5\n1 2 3")