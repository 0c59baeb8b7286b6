import pytest
from hypothesis import given
from hypothesis import strategies as st

from drills.dynamic import (
    climb_stairs,
    max_profit,
    max_subarray,
    min_cost_climbing_stairs,
    rob,
)

non_negative_lists = st.lists(st.integers(min_value=0, max_value=1000), max_size=40)


@pytest.mark.parametrize("n", [-3, 0, 1])
def test_climb_stairs_small_returned_unchanged(n):
    assert climb_stairs(n) == n


def test_climb_stairs_two_steps():
    assert climb_stairs(2) == 2


@given(st.integers(min_value=3, max_value=200))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_rob_empty_and_single():
    assert rob([]) == 0
    assert rob([42]) == 42


def test_rob_source_example():
    assert rob([1, 2, 3, 1, 3]) == 7


@given(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=100))
def test_rob_two_houses_takes_larger(a, b):
    assert rob([a, b]) == max(a, b)


@given(non_negative_lists.filter(lambda xs: len(xs) >= 1))
def test_rob_bounds(nums):
    result = rob(nums)
    assert max(nums) <= result <= sum(nums)
    assert rob(nums + [0]) == result


@given(non_negative_lists.filter(lambda xs: len(xs) >= 3))
def test_rob_choice_at_last_house(nums):
    assert rob(nums) == max(rob(nums[:-1]), rob(nums[:-2]) + nums[-1])


def test_min_cost_source_example():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


@pytest.mark.parametrize("cost", [[], [7]])
def test_min_cost_short_staircase_is_free(cost):
    assert min_cost_climbing_stairs(cost) == 0


@given(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=100))
def test_min_cost_two_steps(a, b):
    assert min_cost_climbing_stairs([a, b]) == min(a, b)


@given(non_negative_lists.filter(lambda xs: len(xs) >= 2))
def test_min_cost_bounded_by_alternate_paths(cost):
    result = min_cost_climbing_stairs(cost)
    assert 0 <= result <= min(sum(cost[0::2]), sum(cost[1::2]))


def test_max_profit_source_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_empty():
    assert max_profit([]) == max_profit([3])


@given(st.lists(st.integers(min_value=0, max_value=1000), min_size=1, max_size=40))
def test_max_profit_bounds(prices):
    result = max_profit(prices)
    assert 0 <= result <= max(prices) - min(prices)
    assert max_profit(sorted(prices)) == max(prices) - min(prices)
    assert max_profit(sorted(prices, reverse=True)) == max_profit([])


def test_max_subarray_source_example():
    assert max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4]) == 6


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


@given(st.lists(st.integers(min_value=-1000, max_value=1000), min_size=1, max_size=40))
def test_max_subarray_bounds(nums):
    result = max_subarray(nums)
    assert result >= max(nums)
    assert result >= sum(nums)


@given(non_negative_lists.filter(lambda xs: len(xs) >= 1))
def test_max_subarray_all_non_negative_is_total(nums):
    assert max_subarray(nums) == sum(nums)


@given(st.lists(st.integers(min_value=-1000, max_value=-1), min_size=1, max_size=40))
def test_max_subarray_all_negative_is_largest(nums):
    assert max_subarray(nums) == max(nums)