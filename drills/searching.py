"""Searching exercises over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the ascending ``nums``, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] < target:
            left = mid + 1
        elif nums[mid] == target:
            return mid
        else:
            right = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in ``nums``, or where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[i, j]`` with ``j < i`` and ``nums[i] + nums[j] == target``.

    ``i`` is the smallest index that completes a pair; ``j`` is the latest
    earlier index holding the complement. Returns ``[]`` if there is no pair.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [index, partner]
        seen[value] = index
    return []


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two values of ascending ``numbers`` adding
    up to ``target``, or ``[]`` if there are none."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def pivot_index(nums: Sequence[int]) -> int:
    """Return the first index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left_sum = 0
    for index, value in enumerate(nums):
        if left_sum == total - left_sum - value:
            return index
        left_sum += value
    return -1


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the first larger value after it in
    ``nums2``, or -1."""
    position = {value: index for index, value in enumerate(nums1)}
    answer = [-1] * len(nums1)
    pending: list[int] = []
    for value in nums2:
        while pending and pending[-1] < value:
            answer[position[pending.pop()]] = value
        if value in position:
            pending.append(value)
    return answer