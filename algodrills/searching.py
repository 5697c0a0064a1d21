"""Binary searches over sorted lists."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def _binary_search(nums: Sequence[int], target: int) -> tuple[bool, int]:
    """Return whether ``target`` was hit, and the hit index or insertion point."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True, mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return False, low


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """Return the first and last index of ``target`` in a sorted list, or [-1, -1]."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return [-1, -1]
    return [first, bisect_right(nums, target) - 1]


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return where ``target`` sits in a sorted list, or where it would be inserted."""
    _, index = _binary_search(nums, target)
    return index


def search(nums: list[int], target: int) -> int:
    """Sort ``nums`` in place, then return an index of ``target`` in it, or -1."""
    nums.sort()
    found, index = _binary_search(nums, target)
    return index if found else -1