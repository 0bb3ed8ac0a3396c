"""Contiguous-subarray problems: maximum sums, target sums and trapped water."""

from collections.abc import Sequence


def max_subarray_sum_nonnegative(values: Sequence[int]) -> int:
    """Return the best contiguous sum, never less than zero."""
    best = 0
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    if not values:
        raise ValueError("sequence is empty")
    current = total = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        total = max(total, current)
    return total


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Return the length of the longest window summing to ``k``.

    The sliding window assumes the values are non-negative.
    """
    best = 0
    left = 0
    total = 0
    for right, value in enumerate(values):
        total += value
        while left <= right and total > k:
            total -= values[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def trapped_rain_water(heights: Sequence[int]) -> int:
    """Return how much water the elevation map traps."""
    if not heights:
        return 0
    left, right = 0, len(heights) - 1
    left_max, right_max = heights[0], 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] > left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] > right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water