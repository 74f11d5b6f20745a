import itertools

import pytest

from labtasks.exercises import (
    double_if_decreasing,
    double_if_monotonic,
    max_if_different,
    order_pair,
    replace_max_with_difference,
    replace_min_with_sum,
    sort_descending,
    spread,
    sum_if_different,
)


@pytest.mark.parametrize("values", list(itertools.permutations([1.0, 2.0, 3.0])))
def test_sort_descending_all_orders(values):
    assert sort_descending(*values) == (3.0, 2.0, 1.0)


def test_sort_descending_with_ties():
    result = sort_descending(2.0, 5.0, 2.0)
    assert result == (5.0, 2.0, 2.0)


@pytest.mark.parametrize("values", [(4.0, 1.0, 7.0), (-2.0, -8.0, 3.5), (9.0, 9.0, 1.0)])
def test_sort_descending_is_sorted_permutation(values):
    result = sort_descending(*values)
    assert list(result) == sorted(values, reverse=True)


def test_replace_min_names_smallest():
    assert replace_min_with_sum(5.0, 1.0, 4.0)[0] == "Y"
    assert replace_min_with_sum(5.0, 6.0, 4.0)[0] == "Z"
    assert replace_min_with_sum(1.0, 6.0, 4.0)[0] == "X"


def test_replace_min_value_is_sum_of_others():
    name, value = replace_min_with_sum(5.0, 1.0, 4.0)
    assert name == "Y"
    assert value == 5.0 + 4.0


def test_replace_min_tie_prefers_first():
    assert replace_min_with_sum(2.0, 2.0, 2.0)[0] == "X"


def test_replace_max_names_largest():
    assert replace_max_with_difference(9.0, 1.0, 4.0)[0] == "X"
    assert replace_max_with_difference(1.0, 9.0, 4.0)[0] == "Y"
    assert replace_max_with_difference(1.0, 4.0, 9.0)[0] == "Z"


def test_replace_max_difference_order():
    assert replace_max_with_difference(9.0, 1.0, 4.0)[1] == 1.0 - 4.0
    assert replace_max_with_difference(1.0, 9.0, 4.0)[1] == 1.0 - 4.0
    assert replace_max_with_difference(6.0, 4.0, 9.0)[1] == 6.0 - 4.0


def test_replace_max_tie_prefers_first():
    assert replace_max_with_difference(3.0, 3.0, 1.0)[0] == "X"


def test_sum_if_different():
    a, b = sum_if_different(3, 4)
    assert a == b == 3 + 4


def test_sum_if_equal_gives_zero():
    assert sum_if_different(5, 5) == (0, 0)


@pytest.mark.parametrize("a,b", [(3, 8), (8, 3), (-1, -6)])
def test_max_if_different(a, b):
    assert max_if_different(a, b) == (max(a, b), max(a, b))


def test_max_if_equal_gives_zero():
    assert max_if_different(-4, -4) == (0, 0)


@pytest.mark.parametrize("values", list(itertools.permutations([2.0, 10.0, 5.0])))
def test_spread_is_order_independent(values):
    assert spread(*values) == 10.0 - 2.0


def test_spread_of_equal_values_is_zero():
    assert spread(3.0, 3.0, 3.0) == 0.0


def test_double_if_decreasing():
    assert double_if_decreasing(3.0, 2.0, 1.0) == (6.0, 4.0, 2.0)


@pytest.mark.parametrize("values", [(1.0, 2.0, 3.0), (3.0, 3.0, 1.0), (2.0, 5.0, 1.0)])
def test_double_if_decreasing_negates_otherwise(values):
    assert double_if_decreasing(*values) == tuple(-v for v in values)


@pytest.mark.parametrize("values", [(3.0, 2.0, 1.0), (1.0, 2.0, 3.0)])
def test_double_if_monotonic(values):
    assert double_if_monotonic(*values) == tuple(v * 2 for v in values)


@pytest.mark.parametrize("values", [(2.0, 5.0, 1.0), (1.0, 1.0, 2.0), (4.0, 1.0, 3.0)])
def test_double_if_monotonic_negates_otherwise(values):
    assert double_if_monotonic(*values) == tuple(-v for v in values)


@pytest.mark.parametrize("x,y", [(5.0, 2.0), (2.0, 5.0), (3.0, 3.0), (-1.0, -7.0)])
def test_order_pair(x, y):
    low, high = order_pair(x, y)
    assert low <= high
    assert sorted((low, high)) == sorted((x, y))