"""A walk through the ArrayADT operations, written to a text stream."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from arraylab.array_adt import ArrayADT, CapacityError


def _attempt(out: TextIO, action) -> None:
    try:
        action()
    except (CapacityError, IndexError) as error:
        print(error, file=out)


def run_demo(out: TextIO) -> None:
    """Exercise every ArrayADT operation, printing results to ``out``."""

    def say(*parts: object) -> None:
        print(*parts, file=out)

    array = ArrayADT(8, 6, [1, 2, 3, 4, 5, 6])
    say(array)

    say("Append 9")
    _attempt(out, lambda: array.append(9))
    say("Insert 33 at index 2")
    _attempt(out, lambda: array.insert(2, 33))
    say("Append 7")
    _attempt(out, lambda: array.append(7))
    say("Insert 55 at index 2")
    _attempt(out, lambda: array.insert(2, 55))
    say(array)

    say("Delete 33")
    _attempt(out, lambda: array.delete(2))
    say("Insert 55 at index 2")
    _attempt(out, lambda: array.insert(2, 55))
    say("Append 7")
    _attempt(out, lambda: array.append(7))
    say(array)

    say("Element 4 is at index:", array.linear_search(4))
    say("Element 12 is at index:", array.linear_search(12))
    say(array)

    for _ in range(3):
        say("Element 3 is at index:", array.linear_search_transposition(3))
    say(array)

    for key in (5, 4, 5):
        say(f"Element {key} is at index:", array.linear_search_move_to_head(key))
        say(array)

    say("[GetElement] Element at index 3 is equal to:", array[3])
    say("[SetElement] Element at index 3 is set to 33.")
    array[3] = 33
    say("[GetElement] Element at index 3 is equal to:", array[3])
    say("[MaxElement] Maximal element in the array is equal to:", array.max())
    say("[MinElement] Minimal element in the array is equal to:", array.min())
    say("[GetElementSum] Sum of all elements is equal to:", array.sum())
    say("[GetElementAvg] Avg of all elements is equal to:", array.average())

    array_sorted = ArrayADT(8, 6, [1, 2, 3, 4, 5, 6])
    for key in (4, 1, 6, 7):
        say(f"[BinarySearch] Element {key} is at index:", array_sorted.binary_search(key))
    for key in (4, 1, 6, 7):
        say(
            f"[RBinarySearch] Element {key} is at index:",
            array_sorted.binary_search_recursive(key),
        )
    say(array_sorted)

    say("Array is sorted ascending:", array_sorted.is_sorted_ascending())
    say("Array is sorted descending:", array_sorted.is_sorted_descending())
    array_sorted.reverse()
    say(array_sorted)
    say("Array is sorted ascending:", array_sorted.is_sorted_ascending())
    say("Array is sorted descending:", array_sorted.is_sorted_descending())

    array_sorted.left_rotate()
    array_sorted.right_rotate()
    array_sorted.left_shift()
    array_sorted.right_shift()
    say(array_sorted)

    with_negatives = ArrayADT(8, 6, [1, -2, 3, -4, 5, -6])
    say(with_negatives)
    with_negatives.place_negative_left()
    say(with_negatives)

    merged = ArrayADT(8, 6, [1, 3, 19, 23, 31, 33])
    other = ArrayADT(8, 3, [1, 18, 22])
    say(merged)
    say(other)
    merged.merge(other)
    say(merged)

    set_operations = [
        ("UNION:", ArrayADT.union),
        ("INTERSECTION:", ArrayADT.intersection),
        ("DIFFERENCE:", ArrayADT.difference),
    ]
    for title, operation in set_operations:
        say(title)
        pairs = [
            (ArrayADT(8, 6, [1, 3, 19, 23, 2, 8]), ArrayADT(8, 5, [1, 18, 23, 7, 11])),
            (ArrayADT(8, 5, [1, 3, 5, 7, 11]), ArrayADT(8, 6, [2, 3, 6, 7, 13, 15])),
        ]
        if title != "UNION:":
            pairs.reverse()
        for first, second in pairs:
            say(first)
            say(second)
            operation(first, second)
            say(first)

    say("arrayADT gymnastic:")
    gymnastic = ArrayADT(8, 5, [1, 3, 5, 7, 11])
    gymnastic_test = ArrayADT(8, 3, [5, 7, 11])
    gymnastic_copy = gymnastic.copy()
    gymnastic_assigned = gymnastic_copy.copy()
    gymnastic_assigned = gymnastic_test.copy()
    say(gymnastic_copy)
    say(gymnastic_assigned)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration on standard output."""
    parser = argparse.ArgumentParser(description="Demonstrate array operations.")
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())