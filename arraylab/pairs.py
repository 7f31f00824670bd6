"""Finding pairs of elements that add up to a given total."""

from __future__ import annotations

from collections.abc import Sequence


def pairs_with_sum(values: Sequence[int], total: int) -> list[tuple[int, int]]:
    """Index pairs ``(i, j)`` with ``i < j`` whose values add up to ``total``."""
    return [
        (i, j)
        for i, first in enumerate(values)
        for j in range(i + 1, len(values))
        if first + values[j] == total
    ]


def pairs_with_sum_hashing(values: Sequence[int], total: int) -> list[tuple[int, int]]:
    """Value pairs ``(value, complement)`` adding up to ``total``, found in one pass.

    A pair is reported when its second member is reached; values not
    smaller than ``total`` are skipped.
    """
    seen: set[int] = set()
    pairs = []
    for value in values:
        if value >= total:
            continue
        complement = total - value
        if complement in seen:
            pairs.append((value, complement))
        seen.add(value)
    return pairs


def pairs_with_sum_sorted(values: Sequence[int], total: int) -> list[tuple[int, int]]:
    """Index pairs adding up to ``total`` in a sorted sequence of unique values."""
    pairs = []
    i, j = 0, len(values) - 1
    while i < j:
        current = values[i] + values[j]
        if current > total:
            j -= 1
        elif current < total:
            i += 1
        else:
            pairs.append((i, j))
            i += 1
            j -= 1
    return pairs