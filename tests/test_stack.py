import pytest

from embedkit.stack import BoundedStack, StackOverflowError, StackUnderflowError


def test_push_pop_lifo():
    stack = BoundedStack(5)
    for value in range(5):
        stack.push(value)
    assert [stack.pop() for _ in range(5)] == [4, 3, 2, 1, 0]


def test_overflow_raises_and_keeps_contents():
    stack = BoundedStack(5)
    for value in range(1, 6):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(6)
    assert len(stack) == 5
    assert stack.pop() == 5


def test_push_after_pop_reuses_slot():
    stack = BoundedStack(5)
    for value in range(1, 6):
        stack.push(value)
    stack.pop()
    stack.push(6)
    assert stack.pop() == 6


def test_underflow_raises():
    stack = BoundedStack()
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_default_capacity_is_five():
    stack = BoundedStack()
    for value in range(5):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(5)


def test_holds_any_type():
    stack = BoundedStack(2)
    stack.push("a")
    stack.push(1.5)
    assert stack.pop() == 1.5
    assert stack.pop() == "a"
    assert len(stack) == 0


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedStack(0)