"""Offsets and addresses of elements in multi-dimensional arrays."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum


class Order(Enum):
    """How the elements of a multi-dimensional array are laid out in memory."""

    ROW_MAJOR = "row"
    COLUMN_MAJOR = "column"


def _validate(shape: Sequence[int], index: Sequence[int]) -> tuple[tuple[int, ...], tuple[int, ...]]:
    shape = tuple(shape)
    index = tuple(index)
    if not shape:
        raise ValueError("shape must have at least one dimension")
    if len(shape) != len(index):
        raise ValueError(
            f"index has {len(index)} subscripts but shape has {len(shape)} dimensions"
        )
    for extent, subscript in zip(shape, index):
        if extent <= 0:
            raise ValueError("every dimension must be positive")
        if not 0 <= subscript < extent:
            raise IndexError(f"subscript {subscript} out of range for dimension {extent}")
    return shape, index


def _horner(shape: Sequence[int], index: Sequence[int]) -> int:
    offset = 0
    for extent, subscript in zip(shape, index):
        offset = offset * extent + subscript
    return offset


def row_major_offset(shape: Sequence[int], index: Sequence[int]) -> int:
    """Element offset when the last subscript varies fastest."""
    shape, index = _validate(shape, index)
    return _horner(shape, index)


def column_major_offset(shape: Sequence[int], index: Sequence[int]) -> int:
    """Element offset when the first subscript varies fastest."""
    shape, index = _validate(shape, index)
    return _horner(shape[::-1], index[::-1])


def element_address(
    base: int,
    width: int,
    shape: Sequence[int],
    index: Sequence[int],
    order: Order = Order.ROW_MAJOR,
) -> int:
    """Address of an element given the first element's address and element width."""
    if width <= 0:
        raise ValueError("element width must be positive")
    if order is Order.ROW_MAJOR:
        offset = row_major_offset(shape, index)
    else:
        offset = column_major_offset(shape, index)
    return base + offset * width