# arraylab

A small library of array algorithms. At its centre is `ArrayADT`, an array of
numbers with a fixed capacity and a current length. Around it sit a few modules
of classic algorithms on plain Python sequences.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The array type

`arraylab.array_adt` provides `ArrayADT` and two exceptions,
`LengthMismatchError` (a `ValueError`) and `CapacityError`.

```python
from arraylab.array_adt import ArrayADT, CapacityError

array = ArrayADT(8, 6, [1, 2, 3, 4, 5, 6])   # capacity, length, values
array.append(9)
array.insert(2, 33)
print(array)                      # 1 2 33 3 4 5 6 9
print(array.linear_search(4))     # 4
print(array.max(), array.min())   # 33 1

try:
    array.append(7)               # all 8 slots are taken
except CapacityError as error:
    print(error)
```

The constructor raises `LengthMismatchError` when `values` does not hold exactly
`length` items. It raises `CapacityError` when `length` is larger than `capacity`.
The `capacity` property gives the number of slots.

What an `ArrayADT` offers:

- Container behaviour: `len()`, iteration, `array[i]` and `array[i] = x`.
  Negative indices count from the end, and an index out of range raises
  `IndexError`. `str()` gives the elements separated by spaces. `copy()` returns
  an independent copy.
- Editing: `append`, `insert` and `delete`. `append` and `insert` raise
  `CapacityError` when the array is full. `insert` and `delete` raise `IndexError`
  for a bad index.
- Rearranging: `reverse`, `left_rotate`, `right_rotate`, `left_shift` and
  `right_shift`. A shift fills the vacated slot with `0`. `place_negative_left`
  moves the negative values in front of the others.
- Statistics: `max`, `min`, `sum` and `average`. `max`, `min` and `average`
  raise `ValueError` on an empty array.
- Order checks: `is_sorted_ascending` and `is_sorted_descending`.
- Searching: `linear_search`, `binary_search` and `binary_search_recursive`. Each
  returns the index of the key or `-1`; the binary searches expect sorted
  contents. Two self-organising variants also exist.
  `linear_search_transposition` swaps a found key one step towards the front.
  `linear_search_move_to_head` swaps it with the first element.
- Combining: `merge`, `union`, `intersection` and `difference`. Each replaces the
  array's contents in place and adds the other array's capacity to its own.
  `merge` expects both arrays sorted. The set operations use a linear walk when
  both arrays are sorted ascending, and otherwise a quadratic scan.

```python
a = ArrayADT(8, 5, [1, 3, 5, 7, 11])
a.intersection(ArrayADT(8, 6, [2, 3, 6, 7, 13, 15]))
print(list(a))                    # [3, 7]
```

## Algorithms on plain sequences

- `arraylab.duplicates`
  - `find_duplicates_sorted` returns `(value, count)` for runs of equal adjacent
    values.
  - `find_duplicates_hashing` returns repeated non-negative integers ordered by
    value.
  - `find_duplicates_unsorted` returns repeats in order of first appearance.
- `arraylab.extremes`
  - `min_max` returns `(minimum, maximum)` in one pass and raises `ValueError`
    when the input is empty.
- `arraylab.missing`
  - `first_missing_element` returns the first gap in a sorted run, or `None`.
  - `missing_elements_sorted` returns all gaps in a sorted sequence.
  - `missing_elements_hashing` returns all gaps in a sequence in any order.
  - `missing_natural_number` returns the one number missing from `1..last`.
- `arraylab.pairs`
  - `pairs_with_sum` returns index pairs.
  - `pairs_with_sum_hashing` returns value pairs found in one pass.
  - `pairs_with_sum_sorted` returns index pairs using two pointers over sorted,
    unique values.
- `arraylab.layout`
  - `row_major_offset`, `column_major_offset` and `element_address`, together
    with the `Order` enum (`ROW_MAJOR`, `COLUMN_MAJOR`). These compute where an
    element of an n-dimensional array sits in memory.

```python
from arraylab.missing import missing_elements_sorted
from arraylab.layout import Order, element_address

print(missing_elements_sorted([6, 7, 8, 9, 11, 12, 15]))             # [10, 13, 14]
print(element_address(1000, 4, (3, 5, 2), (2, 2, 0), Order.ROW_MAJOR))  # 1096
```

## Demo

The following command prints a walk-through of the `ArrayADT` operations to
standard output:

```
arraylab-demo
```

From code, `arraylab.demo.run_demo(stream)` writes the same walk-through to any
text stream.