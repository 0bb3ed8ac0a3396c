"""Quick sort and merging of sorted sequences."""

from collections.abc import MutableSequence, Sequence


def partition(values: MutableSequence[int], start: int, end: int) -> int:
    """Partition ``values[start:end + 1]`` in place around its last element.

    Smaller elements end up left of the pivot and the rest right of it.
    Returns the pivot's final index.
    """
    pivot = values[end]
    boundary = start
    for i in range(start, end):
        if values[i] < pivot:
            values[boundary], values[i] = values[i], values[boundary]
            boundary += 1
    values[boundary], values[end] = values[end], values[boundary]
    return boundary


def quick_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy produced by quick sort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            p = partition(items, start, end)
            pending.append((start, p - 1))
            pending.append((p + 1, end))
    return items


def next_gap(gap: int) -> int:
    """Return the next gap of the shrinking-gap merge: half, rounded up, or 0."""
    if gap <= 1:
        return 0
    return gap // 2 + gap % 2


def merge_in_place(first: MutableSequence[int], second: MutableSequence[int]) -> None:
    """Merge two sorted sequences in place with the gap method.

    Afterwards ``first`` holds the smallest elements and ``second`` the rest,
    both in ascending order.
    """
    n, m = len(first), len(second)
    gap = next_gap(n + m)
    while gap > 0:
        i = 0
        while i + gap < n:
            if first[i] > first[i + gap]:
                first[i], first[i + gap] = first[i + gap], first[i]
            i += 1

        j = gap - n if gap > n else 0
        while i < n and j < m:
            if first[i] > second[j]:
                first[i], second[j] = second[j], first[i]
            i += 1
            j += 1

        if j < m:
            for j in range(m - gap):
                if second[j] > second[j + gap]:
                    second[j], second[j + gap] = second[j + gap], second[j]
        gap = next_gap(gap)


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the merge of two sorted sequences, preferring ``first`` on ties."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged