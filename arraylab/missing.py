"""Finding missing elements in sequences of consecutive integers."""

from __future__ import annotations

from collections.abc import Sequence


def _require(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("sequence is empty")


def first_missing_element(values: Sequence[int]) -> int | None:
    """First integer absent from a sorted run of consecutive integers, or None."""
    _require(values)
    diff = values[0]
    for position, value in enumerate(values):
        if value - position != diff:
            return diff + position
    return None


def missing_elements_sorted(values: Sequence[int]) -> list[int]:
    """All integers absent between the first and last element of a sorted sequence."""
    _require(values)
    diff = values[0]
    missing = []
    for position, value in enumerate(values):
        while value - position > diff:
            missing.append(diff + position)
            diff += 1
    return missing


def missing_elements_hashing(values: Sequence[int]) -> list[int]:
    """All integers absent between the smallest and largest value, in any order."""
    _require(values)
    present = set(values)
    return [n for n in range(min(present), max(present)) if n not in present]


def missing_natural_number(values: Sequence[int]) -> int:
    """The one natural number missing from 1..last, using the sum formula."""
    _require(values)
    last = values[-1]
    return last * (last + 1) // 2 - sum(values)