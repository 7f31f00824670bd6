"""Minimum and maximum of a sequence in a single pass."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return ``(minimum, maximum)`` found in one pass."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for value in iterator:
        if value > largest:
            largest = value
        elif value < smallest:
            smallest = value
    return smallest, largest