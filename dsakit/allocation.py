"""Distribution problems: candies, binomial coefficients and page allocation."""

from collections.abc import Sequence
from itertools import pairwise


def min_candies(ratings: Sequence[int]) -> int:
    """Return the fewest candies so higher-rated neighbours get more."""
    n = len(ratings)
    left = [1] * n
    right = [1] * n
    for i in range(1, n):
        if ratings[i] > ratings[i - 1]:
            left[i] = left[i - 1] + 1
    for i in range(n - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            right[i] = right[i + 1] + 1
    return sum(max(a, b) for a, b in zip(left, right))


def _triangle(n: int) -> int:
    return n * (n + 1) // 2


def min_candies_constant_space(ratings: Sequence[int]) -> int:
    """Same answer as :func:`min_candies`, counting slopes in constant space."""
    if len(ratings) <= 1:
        return len(ratings)
    up = down = candies = previous_slope = 0
    for before, after in pairwise(ratings):
        slope = (after > before) - (after < before)
        if (previous_slope < 0 and slope >= 0) or (previous_slope > 0 and slope == 0):
            candies += _triangle(up) + _triangle(down) + max(up, down)
            up = down = 0
        if slope > 0:
            up += 1
        elif slope < 0:
            down += 1
        else:
            candies += 1
        previous_slope = slope
    return candies + _triangle(up) + _triangle(down) + max(up, down) + 1


def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient by the multiplicative formula."""
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def pascal_element(row: int, col: int) -> int:
    """Return the entry at 1-based ``row`` and ``col`` of Pascal's triangle."""
    return n_choose_r(row - 1, col - 1)


def is_feasible(pages: Sequence[int], students: int, limit: int) -> bool:
    """Tell whether consecutive books fit ``students`` readers of ``limit`` pages."""
    needed = 1
    current = 0
    for count in pages:
        if current + count <= limit:
            current += count
        else:
            needed += 1
            current = count
    return needed <= students


def _check_allocation(pages: Sequence[int], students: int) -> None:
    if not pages:
        raise ValueError("no books to allocate")
    if students < 1:
        raise ValueError("at least one student is required")


def _split(pages: Sequence[int], students: int) -> int:
    if students == 1:
        return sum(pages)
    if len(pages) == 1:
        return pages[0]
    return min(
        max(sum(pages[i:]), _split(pages[:i], students - 1))
        for i in range(1, len(pages))
    )


def allocate_pages_brute_force(pages: Sequence[int], students: int) -> int:
    """Return the minimal maximum load by trying every split recursively."""
    _check_allocation(pages, students)
    return _split(list(pages), students)


def allocate_pages(pages: Sequence[int], students: int) -> int:
    """Return the minimal maximum load by binary search on the answer."""
    _check_allocation(pages, students)
    if students > len(pages):
        raise ValueError("more students than books")
    low, high = max(pages), sum(pages)
    answer = 0
    while low <= high:
        mid = low + (high - low) // 2
        if is_feasible(pages, students, mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer