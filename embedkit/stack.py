"""A last-in first-out stack with a fixed capacity."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 5


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class BoundedStack(Generic[T]):
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, capacity={self.capacity})"

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items.pop()