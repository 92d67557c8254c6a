"""A fixed-capacity integer array with search, ordering and set operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise

from embedkit.sorting import binary_search as _binary_search

DEFAULT_CAPACITY = 10


class BoundedArray:
    """A list of integers that never grows beyond a fixed capacity."""

    def __init__(self, values: Iterable[int] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        items = list(values)
        if len(items) > capacity:
            raise OverflowError(f"{len(items)} values do not fit in capacity {capacity}")
        self.capacity = capacity
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedArray):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"BoundedArray({self._items!r}, capacity={self.capacity})"

    def _ensure_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise OverflowError("array is full")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} is out of range")

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        self._ensure_room()
        self._items.append(value)

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` before position ``index``; ``index`` may equal the length."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} is out of range")
        self._ensure_room()
        self._items.insert(index, value)

    def delete(self, index: int) -> int:
        """Remove and return the value at ``index``, shifting later values down."""
        self._check_index(index)
        return self._items.pop(index)

    def linear_search(self, key: int) -> int | None:
        """Return the first index holding ``key``, or ``None``."""
        try:
            return self._items.index(key)
        except ValueError:
            return None

    def binary_search(self, key: int) -> int | None:
        """Return an index of ``key``, assuming the values are in ascending order."""
        return _binary_search(self._items, key)

    def get(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, value: int) -> None:
        self._check_index(index)
        self._items[index] = value

    def max(self) -> int:
        if not self._items:
            raise ValueError("array is empty")
        return max(self._items)

    def min(self) -> int:
        if not self._items:
            raise ValueError("array is empty")
        return min(self._items)

    def reverse(self) -> None:
        """Reverse the values in place."""
        self._items.reverse()

    def insert_sorted(self, value: int) -> None:
        """Insert ``value`` after the last value from the end that is not greater."""
        self._ensure_room()
        pos = len(self._items)
        while pos > 0 and self._items[pos - 1] > value:
            pos -= 1
        self._items.insert(pos, value)

    def is_sorted(self) -> bool:
        return all(a <= b for a, b in pairwise(self._items))


def recursive_binary_search(values: Sequence[int], low: int, high: int, key: int) -> int | None:
    """Search ``values[low..high]`` (inclusive, ascending) for ``key`` by recursion."""
    if low > high:
        return None
    mid = (low + high) // 2
    if key == values[mid]:
        return mid
    if key < values[mid]:
        return recursive_binary_search(values, low, mid - 1, key)
    return recursive_binary_search(values, mid + 1, high, key)


def _result(items: list[int]) -> BoundedArray:
    return BoundedArray(items, capacity=max(DEFAULT_CAPACITY, len(items)))


def merge(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """Merge two ascending sequences into one ascending array, keeping duplicates."""
    a, b = list(first), list(second)
    i = j = 0
    out: list[int] = []
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            out.append(a[i])
            i += 1
        else:
            out.append(b[j])
            j += 1
    out.extend(a[i:])
    out.extend(b[j:])
    return _result(out)


def union(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """Merge two ascending sequences, keeping one copy where their heads are equal."""
    a, b = list(first), list(second)
    i = j = 0
    out: list[int] = []
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            out.append(a[i])
            i += 1
            j += 1
        elif a[i] < b[j]:
            out.append(a[i])
            i += 1
        else:
            out.append(b[j])
            j += 1
    out.extend(a[i:])
    out.extend(b[j:])
    return _result(out)


def intersection(first: Iterable[int], second: Iterable[int]) -> BoundedArray:
    """Return the values common to two ascending sequences, in ascending order."""
    a, b = list(first), list(second)
    i = j = 0
    out: list[int] = []
    while i < len(a) and j < len(b):
        if a[i] == b[j]:
            out.append(a[i])
            i += 1
            j += 1
        elif a[i] < b[j]:
            i += 1
        else:
            j += 1
    return _result(out)