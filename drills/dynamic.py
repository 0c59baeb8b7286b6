"""Dynamic-programming exercises over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time.

    Values of ``n`` up to 1 are returned unchanged.
    """
    if n <= 1:
        return n
    ways, previous = 1, 1
    for _ in range(2, n + 1):
        ways, previous = ways + previous, ways
    return ways


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values with no two adjacent ones taken."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    before, best = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, best = best, max(best, before + value)
    return best


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the last step, starting at step 0 or 1."""
    two_back, one_back = 0, 0
    for a, b in pairwise(cost):
        two_back, one_back = one_back, min(one_back + b, two_back + a)
    return one_back


def max_profit(prices: Sequence[int]) -> int:
    """Return the best gain from one buy followed by one sell; 0 if none."""
    lowest: int | None = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("max_subarray() of an empty sequence")
    best = ending_here = nums[0]
    for value in nums[1:]:
        ending_here = max(value, ending_here + value)
        best = max(best, ending_here)
    return best