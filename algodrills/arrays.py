"""Classic problems on integer arrays and matrices."""

from __future__ import annotations

import math
import operator
from collections import Counter
from collections.abc import MutableSequence, Sequence
from itertools import accumulate


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return two distinct indices whose values add up to ``target``.

    The first index is the earliest that has a partner. The partner is the
    last index holding the complement. Gives an empty list if there is no pair.
    """
    last_index = {value: i for i, value in enumerate(nums)}
    for i, value in enumerate(nums):
        j = last_index.get(target - value)
        if j is not None and j != i:
            return [i, j]
    return []


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other element."""
    if not nums:
        return []
    prefix = accumulate(nums[:-1], operator.mul, initial=1)
    suffix = list(accumulate(reversed(nums[1:]), operator.mul, initial=1))
    return [p * s for p, s in zip(prefix, reversed(suffix))]


def max_area(height: Sequence[int]) -> int:
    """Return the most water two of the vertical lines can hold."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def trap(height: Sequence[int]) -> int:
    """Return the amount of rain water trapped between the bars."""
    if not height:
        return 0
    left_max = accumulate(height, max)
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(min(lm, rm) - h for lm, rm, h in zip(left_max, right_max, height))


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place by counting.

    Values outside 0..2 are not counted; the positions left over after the
    counted colours are written keep whatever they held.
    """
    counts = Counter(nums)
    ordered = [colour for colour in range(3) for _ in range(counts[colour])]
    nums[: len(ordered)] = ordered


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    best = 0
    lowest = math.inf
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return int(best)


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers present."""
    present = set(nums)
    longest = 0
    for start in present:
        if start - 1 in present:
            continue
        length = 1
        while start + length in present:
            length += 1
        longest = max(longest, length)
    return longest


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return 1-based indices of two values of a sorted list summing to ``target``.

    Gives an empty list if there is no such pair.
    """
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


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time, or -1."""
    half = len(nums) // 2
    counts = Counter(nums)
    return next((value for value, count in counts.items() if count > half), -1)


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate the list in place ``k`` steps to the right."""
    n = len(nums)
    if not n:
        return
    k %= n
    nums[:] = list(nums[n - k:]) + list(nums[: n - k])


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count the contiguous subarrays whose sum is ``k``."""
    seen = Counter({0: 1})
    total = 0
    prefix = 0
    for value in nums:
        prefix += value
        total += seen[prefix - k]
        seen[prefix] += 1
    return total


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Return the longest run of ones possible after flipping at most ``k`` zeros."""
    left = 0
    zeros = 0
    best = 0
    for right, value in enumerate(nums):
        if value == 0:
            zeros += 1
        while zeros > k:
            if nums[left] == 0:
                zeros -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def rearrange_array(nums: Sequence[int]) -> list[int]:
    """Interleave non-negative and negative values, keeping each group's order.

    Raises ValueError unless both groups have the same size.
    """
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != len(negatives):
        raise ValueError(
            f"need as many negative values as non-negative ones, "
            f"got {len(negatives)} and {len(positives)}"
        )
    return [value for pair in zip(positives, negatives) for value in pair]


def sort_even_odd(nums: list[int]) -> list[int]:
    """Sort even indices ascending and odd indices descending, in place.

    Returns the same list.
    """
    nums[::2] = sorted(nums[::2])
    nums[1::2] = sorted(nums[1::2], reverse=True)
    return nums