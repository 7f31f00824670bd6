"""A fixed-capacity array with classic array operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Real


class LengthMismatchError(ValueError):
    """The initial values do not match the declared length."""

    def __init__(self, list_size: int, array_length: int) -> None:
        self.list_size = list_size
        self.array_length = array_length
        super().__init__(
            "Initializer list size and array length are not the same. "
            f"Expected array length = {array_length} "
            f"Actual initializer list size = {list_size}"
        )


class CapacityError(Exception):
    """The array has no free slot left."""


class ArrayADT:
    """An array of numbers with a fixed capacity and a current length."""

    def __init__(self, capacity: int, length: int, values: Iterable[Real]) -> None:
        items = list(values)
        if len(items) != length:
            raise LengthMismatchError(len(items), length)
        if length > capacity:
            raise CapacityError(
                f"length {length} exceeds capacity {capacity}"
            )
        self._capacity = capacity
        self._items: list[Real] = items

    @property
    def capacity(self) -> int:
        """Number of slots the array can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Real]:
        return iter(self._items)

    def _check_index(self, index: int) -> int:
        length = len(self._items)
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError("index out of range")
        return index

    def __getitem__(self, index: int) -> Real:
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, value: Real) -> None:
        self._items[self._check_index(index)] = value

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)

    def __repr__(self) -> str:
        return f"ArrayADT(capacity={self._capacity}, items={self._items!r})"

    def copy(self) -> ArrayADT:
        """Return an independent copy."""
        return ArrayADT(self._capacity, len(self._items), self._items)

    def append(self, value: Real) -> None:
        """Add a value after the last element."""
        if len(self._items) == self._capacity:
            raise CapacityError("[Append] FAILED: Not enough space.")
        self._items.append(value)

    def insert(self, index: int, value: Real) -> None:
        """Insert a value at ``index``, shifting later elements right."""
        if len(self._items) == self._capacity:
            raise CapacityError("[Insert] FAILED: Not enough space.")
        if not 0 <= index <= len(self._items):
            raise IndexError("index out of range")
        self._items.insert(index, value)

    def delete(self, index: int) -> None:
        """Remove the element at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError("[Delete] FAILED: Index out of range.")
        del self._items[index]

    def reverse(self) -> None:
        self._items.reverse()

    def left_shift(self) -> None:
        """Move every element one slot left; the last slot becomes 0."""
        if self._items:
            self._items = self._items[1:] + [0]

    def right_shift(self) -> None:
        """Move every element one slot right; the first slot becomes 0."""
        if self._items:
            self._items = [0] + self._items[:-1]

    def left_rotate(self) -> None:
        if self._items:
            self._items = self._items[1:] + self._items[:1]

    def right_rotate(self) -> None:
        if self._items:
            self._items = self._items[-1:] + self._items[:-1]

    def _require_items(self) -> None:
        if not self._items:
            raise ValueError("array is empty")

    def max(self) -> Real:
        self._require_items()
        return max(self._items)

    def min(self) -> Real:
        self._require_items()
        return min(self._items)

    def sum(self) -> Real:
        return sum(self._items)

    def average(self) -> float:
        self._require_items()
        return float(sum(self._items)) / len(self._items)

    def is_sorted_ascending(self) -> bool:
        return all(a <= b for a, b in zip(self._items, self._items[1:]))

    def is_sorted_descending(self) -> bool:
        return all(a >= b for a, b in zip(self._items, self._items[1:]))

    def linear_search(self, key: Real) -> int:
        """Index of the first occurrence of ``key``, or -1."""
        for position, item in enumerate(self._items):
            if item == key:
                return position
        return -1

    def linear_search_transposition(self, key: Real) -> int:
        """Find ``key`` and swap it one step towards the front."""
        position = self.linear_search(key)
        if position > 0:
            items = self._items
            items[position], items[position - 1] = items[position - 1], items[position]
            return position - 1
        return position

    def linear_search_move_to_head(self, key: Real) -> int:
        """Find ``key`` and swap it with the first element."""
        position = self.linear_search(key)
        if position < 0:
            return -1
        items = self._items
        items[position], items[0] = items[0], items[position]
        return 0

    def binary_search(self, key: Real) -> int:
        """Index of ``key`` in a sorted array, or -1."""
        low, high = 0, len(self._items) - 1
        while low <= high:
            mid = (low + high) // 2
            if key == self._items[mid]:
                return mid
            if key < self._items[mid]:
                high = mid - 1
            else:
                low = mid + 1
        return -1

    def binary_search_recursive(self, key: Real) -> int:
        """Index of ``key`` in a sorted array, or -1, found recursively."""
        return self._binary_search(0, len(self._items) - 1, key)

    def _binary_search(self, low: int, high: int, key: Real) -> int:
        if low > high:
            return -1
        mid = (low + high) // 2
        if key == self._items[mid]:
            return mid
        if key < self._items[mid]:
            return self._binary_search(low, mid - 1, key)
        return self._binary_search(mid + 1, high, key)

    def place_negative_left(self) -> None:
        """Move negative values before non-negative ones, in place."""
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            while i < len(items) and items[i] < 0:
                i += 1
            while j >= 0 and items[j] >= 0:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]

    def _replace(self, items: list[Real], other: ArrayADT) -> None:
        self._items = items
        self._capacity += other._capacity

    def merge(self, other: ArrayADT) -> None:
        """Merge a sorted array into this sorted array."""
        left, right = self._items, other._items
        merged: list[Real] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] < right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        self._replace(merged, other)

    def _both_sorted(self, other: ArrayADT) -> bool:
        return self.is_sorted_ascending() and other.is_sorted_ascending()

    def union(self, other: ArrayADT) -> None:
        """Replace the contents with the union of both arrays."""
        left, right = self._items, other._items
        result: list[Real] = []
        if self._both_sorted(other):
            i = j = 0
            while i < len(left) and j < len(right):
                if left[i] < right[j]:
                    result.append(left[i])
                    i += 1
                elif left[i] > right[j]:
                    result.append(right[j])
                    j += 1
                else:
                    result.append(left[i])
                    i += 1
                    j += 1
            result.extend(left[i:])
            result.extend(right[j:])
        else:
            result.extend(left)
            for item in right:
                if item not in result:
                    result.append(item)
        self._replace(result, other)

    def intersection(self, other: ArrayADT) -> None:
        """Replace the contents with the elements found in both arrays."""
        left, right = self._items, other._items
        result: list[Real] = []
        if self._both_sorted(other):
            i = j = 0
            while i < len(left) and j < len(right):
                if left[i] < right[j]:
                    i += 1
                elif left[i] > right[j]:
                    j += 1
                else:
                    result.append(left[i])
                    i += 1
                    j += 1
        else:
            result = [item for item in left if item in right]
        self._replace(result, other)

    def difference(self, other: ArrayADT) -> None:
        """Keep only the elements that are not in ``other``."""
        left, right = self._items, other._items
        result: list[Real] = []
        if self._both_sorted(other):
            i = j = 0
            while i < len(left) and j < len(right):
                if left[i] > right[j]:
                    j += 1
                elif left[i] < right[j]:
                    result.append(left[i])
                    i += 1
                else:
                    i += 1
                    j += 1
            result.extend(left[i:])
        else:
            result = [item for item in left if item not in right]
        self._replace(result, other)