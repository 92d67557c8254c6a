import pytest

from embedkit.buffers import (
    BufferEmptyError,
    BufferFullError,
    MessageQueue,
    RingBuffer,
)


def test_ring_round_trip_in_order():
    ring = RingBuffer()
    for value in range(5):
        ring.write(value)
    assert [ring.read() for _ in range(5)] == list(range(5))
    assert ring.is_empty()


def test_ring_default_capacity_is_eight():
    ring = RingBuffer()
    for value in range(8):
        ring.write(value)
    assert ring.is_full()
    with pytest.raises(BufferFullError):
        ring.write(99)


def test_ring_wraps_around():
    ring = RingBuffer(capacity=3)
    out = []
    for value in range(10):
        ring.write(value)
        if ring.is_full():
            out.append(ring.read())
    while not ring.is_empty():
        out.append(ring.read())
    assert out == list(range(10))


def test_ring_read_empty():
    with pytest.raises(BufferEmptyError):
        RingBuffer().read()


def test_ring_length_tracks_contents():
    ring = RingBuffer(capacity=4)
    ring.write(1)
    ring.write(2)
    ring.read()
    assert len(ring) == 1


def test_ring_invalid_capacity():
    with pytest.raises(ValueError):
        RingBuffer(capacity=0)


def test_queue_round_trip():
    queue = MessageQueue()
    queue.enqueue(b"hello-lorawan")
    queue.enqueue("lora-mac-v0.1.3!")
    assert queue.dequeue() == b"hello-lorawan"
    assert queue.dequeue() == b"lora-mac-v0.1.3!"
    assert len(queue) == 0


def test_queue_full():
    queue = MessageQueue()
    for index in range(10):
        queue.enqueue(bytes([index]))
    with pytest.raises(BufferFullError):
        queue.enqueue(b"x")
    assert queue.dequeue() == bytes([0])


def test_queue_message_size_limit():
    queue = MessageQueue()
    queue.enqueue(b"a" * 128)
    with pytest.raises(ValueError):
        queue.enqueue(b"a" * 129)
    assert len(queue) == 1


def test_queue_empty():
    with pytest.raises(BufferEmptyError):
        MessageQueue().dequeue()