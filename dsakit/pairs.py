"""Searching for pairs and triples with given properties."""

from collections import Counter
from collections.abc import Sequence


def three_sum(values: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return every distinct ascending triple that sums to zero."""
    items = sorted(values)
    n = len(items)
    result: list[tuple[int, int, int]] = []
    for i, first in enumerate(items):
        if i and first == items[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + items[j] + items[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                result.append((first, items[j], items[k]))
                j += 1
                k -= 1
                while j < k and items[j] == items[j - 1]:
                    j += 1
                while j < k and items[k] == items[k + 1]:
                    k -= 1
    return result


def two_repeated(values: Sequence[int]) -> tuple[int, int]:
    """Return the two repeated values, the one repeated first coming first."""
    counts = Counter(values)
    repeated = sorted(value for value, count in counts.items() if count > 1)
    if len(repeated) < 2:
        raise ValueError("sequence does not hold two repeated values")
    first, second = repeated[:2]
    seen: Counter[int] = Counter()
    for value in values:
        if value in (first, second):
            seen[value] += 1
            if seen[value] == 2:
                return (value, second if value == first else first)
    raise ValueError("sequence does not hold two repeated values")


def two_sum(values: Sequence[int], target: int) -> tuple[int, int]:
    """Return the indices ``(later, earlier)`` of two values adding to ``target``."""
    positions: dict[int, int] = {}
    for index, value in enumerate(values):
        partner = target - value
        if partner in positions:
            return (index, positions[partner])
        positions[value] = index
    raise ValueError("no two values add up to the target")


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings use exactly the same characters."""
    return len(first) == len(second) and Counter(first) == Counter(second)