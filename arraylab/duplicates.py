"""Finding repeated elements in sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from itertools import groupby


def find_duplicates_sorted(values: Iterable[Hashable]) -> list[tuple[Hashable, int]]:
    """Runs of equal adjacent values, as ``(value, count)`` pairs in order.

    Duplicates are only recognised when they stand next to each other.
    """
    result = []
    for value, run in groupby(values):
        count = sum(1 for _ in run)
        if count > 1:
            result.append((value, count))
    return result


def find_duplicates_hashing(values: Iterable[int]) -> list[tuple[int, int]]:
    """Repeated non-negative integers with their counts, ordered by value."""
    counts = Counter(values)
    if any(value < 0 for value in counts):
        raise ValueError("values must be non-negative")
    return sorted((value, count) for value, count in counts.items() if count > 1)


def find_duplicates_unsorted(values: Iterable[Hashable]) -> list[tuple[Hashable, int]]:
    """Repeated values with their counts, in order of first appearance."""
    return [(value, count) for value, count in Counter(values).items() if count > 1]