"""Elementary queries and transformations on integer sequences."""

from collections import Counter
from collections.abc import Sequence


def _require_items(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("sequence is empty")


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest element, found by sorting."""
    _require_items(values)
    ordered = sorted(values)
    return ordered[0], ordered[-1]


def largest(values: Sequence[int]) -> int:
    """Return the largest element by a single linear scan."""
    _require_items(values)
    best = values[0]
    for value in values:
        if value > best:
            best = value
    return best


def second_largest(values: Sequence[int]) -> int:
    """Return the largest element that differs from the maximum."""
    top = largest(values)
    candidates = [value for value in values if value != top]
    if not candidates:
        raise ValueError("sequence has no second largest element")
    return max(candidates)


def rotate_left_by_one(values: Sequence[int]) -> list[int]:
    """Return a copy with the first element moved to the end."""
    items = list(values)
    if not items:
        return items
    return items[1:] + items[:1]


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Return a copy rotated ``k`` places to the right."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    if k == 0:
        return items
    return items[-k:] + items[:-k]


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy produced by bubble sort."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def median_of_sorted_arrays(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of the two sequences taken together."""
    merged = sorted([*first, *second])
    if not merged:
        raise ValueError("both sequences are empty")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle] + merged[middle - 1]) / 2


def count_good_pairs(values: Sequence[int]) -> int:
    """Count index pairs ``i < j`` whose elements are equal."""
    return sum(count * (count - 1) // 2 for count in Counter(values).values())