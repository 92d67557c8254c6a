"""Simple comparison sorts, binary search and matrix transpose."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using bubble sort."""
    items = list(values)
    size = len(items)
    for done in range(1, size):
        for j in range(size - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, placing each into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        for j in range(i):
            if items[j] > items[i]:
                items[j], items[i] = items[i], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using selection by exchange."""
    items = list(values)
    size = len(items)
    for i in range(size):
        for j in range(i + 1, size):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or ``None``."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if target < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of a rectangular matrix given as rows."""
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")
    return [list(column) for column in zip(*rows)]