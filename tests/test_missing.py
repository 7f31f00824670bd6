import pytest

from arraylab.missing import (
    first_missing_element,
    missing_elements_hashing,
    missing_elements_sorted,
    missing_natural_number,
)

MULTIPLE = [6, 7, 8, 9, 11, 12, 15, 16, 17, 18, 19]


def test_first_missing_source_example():
    assert first_missing_element([7, 8, 9, 10, 11, 13, 14, 15, 16, 17]) == 12


def test_first_missing_none_when_complete():
    assert first_missing_element([3, 4, 5]) is None


def test_missing_sorted_source_example():
    assert missing_elements_sorted(MULTIPLE) == [10, 13, 14]


def test_hashing_agrees_with_sorted():
    assert missing_elements_hashing(MULTIPLE) == missing_elements_sorted(MULTIPLE)


def test_hashing_handles_unsorted_input():
    shuffled = [19, 6, 12, 15, 8, 18, 7, 11, 17, 9, 16]
    assert missing_elements_hashing(shuffled) == missing_elements_sorted(MULTIPLE)


def test_missing_are_absent_and_in_range():
    found = missing_elements_sorted(MULTIPLE)
    assert all(n not in MULTIPLE and MULTIPLE[0] < n < MULTIPLE[-1] for n in found)
    assert len(found) + len(MULTIPLE) == MULTIPLE[-1] - MULTIPLE[0] + 1


def test_natural_number_source_example():
    assert missing_natural_number([1, 2, 3, 4, 5, 7, 8, 9, 10, 11]) == 6


@pytest.mark.parametrize("removed", [2, 5, 9])
def test_natural_number_round_trip(removed):
    values = [n for n in range(1, 11) if n != removed]
    assert missing_natural_number(values) == removed
    assert first_missing_element(values) == removed


def test_empty_raises():
    with pytest.raises(ValueError):
        missing_elements_sorted([])
    with pytest.raises(ValueError):
        missing_natural_number([])