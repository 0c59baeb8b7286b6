"""Array exercises: scoring, placing, de-duplicating, merging and shifting."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from itertools import accumulate, groupby
from operator import xor


def baseball_score(ops: Iterable[str]) -> int:
    """Return the total of a baseball score sheet.

    ``"+"`` records the sum of the last two scores, ``"D"`` doubles the last
    one, ``"C"`` cancels the last one and anything else is a new integer score.
    Raises ValueError for a token that is not an integer and IndexError when an
    operation needs more scores than have been recorded.
    """
    scores: list[int] = []
    for op in ops:
        if op == "+":
            if len(scores) < 2:
                raise IndexError("'+' needs two previous scores")
            scores.append(scores[-2] + scores[-1])
        elif op == "D":
            if not scores:
                raise IndexError("'D' needs a previous score")
            scores.append(2 * scores[-1])
        elif op == "C":
            if not scores:
                raise IndexError("'C' needs a previous score")
            scores.pop()
        else:
            try:
                scores.append(int(op))
            except ValueError:
                raise ValueError(f"not a score: {op!r}") from None
    return sum(scores)


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit into empty plots (0) with no two adjacent.

    The flowerbed itself is left untouched.
    """
    bed = [0, *flowerbed, 0]
    for i in range(1, len(bed) - 1):
        if bed[i - 1] == 0 and bed[i] == 0 and bed[i + 1] == 0:
            bed[i] = 1
            n -= 1
    return n <= 0


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return, ascending, the numbers of ``1..len(nums)`` missing from ``nums``.

    Raises ValueError if a value lies outside that range.
    """
    size = len(nums)
    present = set(nums)
    for value in present:
        if not 1 <= abs(value) <= size:
            raise ValueError(f"value {value} outside 1..{size}")
    present = {abs(value) for value in present}
    return [number for number in range(1, size + 1) if number not in present]


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time (Boyer-Moore vote).

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("majority_element() of an empty sequence")
    candidate, count = nums[0], 1
    for value in nums[1:]:
        if value == candidate:
            count += 1
        else:
            count -= 1
            if count == 0:
                candidate, count = value, 1
    return candidate


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> MutableSequence[int]:
    """Merge the first ``n`` values of ``nums2`` into the first ``m`` of ``nums1``.

    Both prefixes must be ascending. The result fills ``nums1[:m + n]`` in
    place and ``nums1`` is returned. Raises ValueError if either sequence is
    shorter than the counts given.
    """
    if m < 0 or n < 0:
        raise ValueError("counts must not be negative")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged values")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n values")
    merged = list(heapq.merge(nums1[:m], nums2[:n]))
    nums1[: m + n] = merged
    return nums1


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Collapse runs of equal values in place and return how many remain.

    The first values of ``nums`` become the distinct ones; the rest are untouched.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move the values other than ``val`` to the front in place; return their count.

    The values past that count are left as they were.
    """
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def replace_with_greatest_on_right(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Replace each value with the largest value to its right, in place.

    The last value becomes -1, except in a one-element sequence, which is
    returned unchanged.
    """
    if len(nums) < 2:
        return nums
    suffix_max = list(accumulate(reversed(nums), max))
    nums[:] = suffix_max[-2::-1] + [-1]
    return nums


def shift_grid(grid: list[list[int]], k: int) -> list[list[int]]:
    """Shift every value of a rectangular grid ``k`` places forward, wrapping round.

    The rows are changed in place and the grid is returned. A negative ``k``
    leaves the grid as it is. Raises ValueError for an empty or ragged grid.
    """
    if not grid or not grid[0]:
        raise ValueError("grid has no cells")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows differ in length")
    flat = [value for row in grid for value in row]
    if k <= 0:
        return grid
    k %= len(flat)
    if k:
        flat = flat[-k:] + flat[:-k]
    for index, row in enumerate(grid):
        row[:] = flat[index * cols : (index + 1) * cols]
    return grid


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Return the squares of the ascending ``nums`` in ascending order."""
    result: deque[int] = deque()
    left, right = 0, len(nums) - 1
    while left <= right:
        left_square = nums[left] * nums[left]
        right_square = nums[right] * nums[right]
        if left_square > right_square:
            result.appendleft(left_square)
            left += 1
        else:
            result.appendleft(right_square)
            right -= 1
    return list(result)