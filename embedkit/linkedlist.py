"""A singly linked list of integers with ordered and self-organising operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: int, next_node: _Node | None = None) -> None:
        self.data = data
        self.next = next_node


class LinkedList:
    """A singly linked list of integers.

    Positions given to :meth:`insert` count the nodes before the new one, so
    ``0`` inserts at the head. Positions given to :meth:`delete` count from one.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self._head is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LinkedList):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __str__(self) -> str:
        return "".join(f"{value}-->" for value in self)

    def append(self, data: int) -> None:
        """Add ``data`` at the tail."""
        new = _Node(data)
        if self._head is None:
            self._head = new
            return
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        tail.next = new

    def prepend(self, data: int) -> None:
        """Add ``data`` at the head."""
        self._head = _Node(data, self._head)

    def insert(self, pos: int, data: int) -> None:
        """Insert ``data`` so that ``pos`` nodes come before it; ``pos`` may equal the length."""
        if not 0 <= pos <= len(self):
            raise IndexError(f"position {pos} is out of range")
        if pos == 0:
            self.prepend(data)
            return
        before = self._head
        for _ in range(pos - 1):
            before = before.next
        before.next = _Node(data, before.next)

    def sorted_insert(self, data: int) -> None:
        """Insert ``data`` before the first node whose value is not less than it."""
        previous: _Node | None = None
        current = self._head
        while current is not None and current.data < data:
            previous, current = current, current.next
        if previous is None:
            self._head = _Node(data, self._head)
        else:
            previous.next = _Node(data, current)

    def delete(self, pos: int) -> int:
        """Remove the node at 1-based position ``pos`` and return its value."""
        if not 1 <= pos <= len(self):
            raise IndexError(f"position {pos} is out of range")
        if pos == 1:
            removed = self._head
            self._head = removed.next
            return removed.data
        before = self._head
        for _ in range(pos - 2):
            before = before.next
        removed = before.next
        before.next = removed.next
        return removed.data

    def sum(self) -> int:
        """Return the sum of all values; an empty list sums to zero."""
        return sum(self)

    def max(self) -> int:
        """Return the largest value."""
        if self._head is None:
            raise ValueError("list is empty")
        return max(self)

    def search(self, key: int) -> int | None:
        """Return the 0-based position of the first node holding ``key``, or ``None``."""
        for index, value in enumerate(self):
            if value == key:
                return index
        return None

    def move_to_front_search(self, key: int) -> bool:
        """Look for ``key``; if found, move its node to the head and return ``True``."""
        previous: _Node | None = None
        for node in self._nodes():
            if node.data == key:
                if previous is not None:
                    previous.next = node.next
                    node.next = self._head
                    self._head = node
                return True
            previous = node
        return False

    def is_sorted(self) -> bool:
        """Return whether the values never decrease from head to tail."""
        values = list(self)
        return all(a <= b for a, b in zip(values, values[1:]))

    def remove_duplicates(self) -> None:
        """Drop every node whose value equals that of the node before it."""
        node = self._head
        while node is not None and node.next is not None:
            if node.data == node.next.data:
                node.next = node.next.next
            else:
                node = node.next