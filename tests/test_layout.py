import itertools

import pytest

from arraylab.layout import (
    Order,
    column_major_offset,
    element_address,
    row_major_offset,
)

X = [
    [[1, 2], [3, 4], [5, 6], [7, 8], [9, 10]],
    [[11, 12], [13, 14], [15, 16], [17, 18], [19, 20]],
    [[21, 22], [23, 24], [25, 26], [27, 28], [29, 30]],
]
SHAPE = (3, 5, 2)
FLAT = [value for plane in X for row in plane for value in row]


def _all_indices(shape):
    return itertools.product(*(range(extent) for extent in shape))


def test_row_major_matches_nested_layout():
    for i, j, k in _all_indices(SHAPE):
        assert FLAT[row_major_offset(SHAPE, (i, j, k))] == X[i][j][k]


def test_worked_example_element():
    assert FLAT[row_major_offset(SHAPE, (2, 2, 0))] == 25
    assert FLAT[row_major_offset(SHAPE, (2, 2, 1))] == 26


def test_column_major_is_permutation():
    offsets = sorted(column_major_offset(SHAPE, idx) for idx in _all_indices(SHAPE))
    assert offsets == list(range(len(FLAT)))


def test_column_major_equals_reversed_row_major():
    for idx in _all_indices(SHAPE):
        assert column_major_offset(SHAPE, idx) == row_major_offset(SHAPE[::-1], idx[::-1])


def test_column_major_first_subscript_fastest():
    assert column_major_offset(SHAPE, (1, 0, 0)) == 1
    assert row_major_offset(SHAPE, (0, 0, 1)) == 1


def test_element_address_origin_is_base():
    assert element_address(1000, 4, SHAPE, (0, 0, 0), Order.ROW_MAJOR) == 1000
    assert element_address(1000, 4, SHAPE, (0, 0, 0), Order.COLUMN_MAJOR) == 1000


@pytest.mark.parametrize("order", list(Order))
def test_element_address_scales_offset(order):
    for idx in _all_indices(SHAPE):
        one = element_address(0, 1, SHAPE, idx, order)
        assert element_address(500, 8, SHAPE, idx, order) == 500 + one * 8


def test_index_out_of_range():
    with pytest.raises(IndexError):
        row_major_offset(SHAPE, (3, 0, 0))
    with pytest.raises(IndexError):
        column_major_offset(SHAPE, (0, -1, 0))


def test_dimension_mismatch():
    with pytest.raises(ValueError):
        row_major_offset(SHAPE, (1, 1))


def test_bad_width():
    with pytest.raises(ValueError):
        element_address(0, 0, SHAPE, (0, 0, 0))