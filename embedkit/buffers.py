"""Fixed-capacity ring buffer of integers and a queue of byte messages."""

from __future__ import annotations

from collections import deque

RING_CAPACITY = 8
QUEUE_CAPACITY = 10
MESSAGE_SIZE = 128


class BufferFullError(Exception):
    """Raised when writing to a buffer that has no free slot."""


class BufferEmptyError(Exception):
    """Raised when reading from a buffer that holds nothing."""


class RingBuffer:
    """A circular buffer of integers with a fixed number of slots."""

    def __init__(self, capacity: int = RING_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[int] = [0] * capacity
        self._read_index = 0
        self._write_index = 0
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def is_full(self) -> bool:
        return self._length == self.capacity

    def is_empty(self) -> bool:
        return self._length == 0

    def write(self, data: int) -> None:
        """Store ``data`` in the next free slot."""
        if self.is_full():
            raise BufferFullError("ring buffer is full")
        self._slots[self._write_index] = data
        self._write_index = (self._write_index + 1) % self.capacity
        self._length += 1

    def read(self) -> int:
        """Remove and return the oldest value."""
        if self.is_empty():
            raise BufferEmptyError("ring buffer is empty")
        value = self._slots[self._read_index]
        self._read_index = (self._read_index + 1) % self.capacity
        self._length -= 1
        return value


class MessageQueue:
    """A bounded first-in first-out queue of byte messages of limited size."""

    def __init__(self, capacity: int = QUEUE_CAPACITY, message_size: int = MESSAGE_SIZE) -> None:
        if capacity < 1 or message_size < 0:
            raise ValueError("capacity must be positive and message size non-negative")
        self.capacity = capacity
        self.message_size = message_size
        self._items: deque[bytes] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, data: bytes | str) -> None:
        """Add a message; text is stored as UTF-8."""
        payload = data.encode() if isinstance(data, str) else bytes(data)
        if len(self._items) >= self.capacity:
            raise BufferFullError("queue is full")
        if len(payload) > self.message_size:
            raise ValueError("data too large for buffer")
        self._items.append(payload)

    def dequeue(self) -> bytes:
        """Remove and return the oldest message."""
        if not self._items:
            raise BufferEmptyError("queue is empty")
        return self._items.popleft()