"""String puzzles."""

from collections.abc import Iterable


def can_make_palindrome(words: Iterable[str]) -> bool:
    """Tell whether equal-length words can be concatenated into a palindrome.

    This holds when the words, taken as a multiset, equal their reversals.
    """
    items = list(words)
    return sorted(items) == sorted(word[::-1] for word in items)