import pytest

from embedkit.arrays import (
    BoundedArray,
    intersection,
    merge,
    recursive_binary_search,
    union,
)

A1 = [2, 4, 11, 15, 81]
A2 = [1, 4, 7, 15, 67]


@pytest.fixture
def sample():
    return BoundedArray([1, 2, 5, 7, 9], capacity=10)


def test_append_adds_to_end(sample):
    sample.append(81)
    assert list(sample) == [1, 2, 5, 7, 9, 81]


def test_append_when_full_raises():
    arr = BoundedArray([1, 2], capacity=2)
    with pytest.raises(OverflowError):
        arr.append(3)
    assert list(arr) == [1, 2]


def test_constructor_rejects_too_many_values():
    with pytest.raises(OverflowError):
        BoundedArray([1, 2, 3], capacity=2)


def test_insert_and_delete_round_trip(sample):
    sample.insert(0, 8)
    assert sample.get(0) == 8
    assert sample.delete(0) == 8
    assert list(sample) == [1, 2, 5, 7, 9]


def test_insert_at_end_allowed(sample):
    sample.insert(len(sample), 42)
    assert sample.get(len(sample) - 1) == 42


def test_insert_bad_index_raises(sample):
    with pytest.raises(IndexError):
        sample.insert(7, 1)


def test_delete_shifts_values(sample):
    sample.append(81)
    assert sample.delete(1) == 2
    assert list(sample) == [1, 5, 7, 9, 81]
    assert sample.linear_search(81) == len(sample) - 1


def test_delete_bad_index_raises(sample):
    with pytest.raises(IndexError):
        sample.delete(5)


def test_linear_search_missing(sample):
    assert sample.linear_search(100) is None


def test_binary_search(sample):
    assert sample.binary_search(1) == 0
    assert sample.binary_search(8) is None
    for index, value in enumerate(sample):
        assert sample.binary_search(value) == index


def test_recursive_binary_search():
    values = [1, 5, 7, 9, 81]
    for index, value in enumerate(values):
        assert recursive_binary_search(values, 0, len(values) - 1, value) == index
    assert recursive_binary_search(values, 0, len(values) - 1, 6) is None


def test_get_set(sample):
    sample.set(1, 6)
    assert sample.get(1) == 6
    with pytest.raises(IndexError):
        sample.get(-1)
    with pytest.raises(IndexError):
        sample.set(5, 0)


def test_min_max(sample):
    sample.append(81)
    assert sample.min() == 1
    assert sample.max() == 81


def test_min_max_empty_raise():
    arr = BoundedArray()
    with pytest.raises(ValueError):
        arr.max()
    with pytest.raises(ValueError):
        arr.min()


def test_reverse_twice_restores():
    original = [1, 2, 11, 7, 9, 55, 81]
    arr = BoundedArray(original)
    arr.reverse()
    assert list(arr) == original[::-1]
    arr.reverse()
    assert list(arr) == original


def test_insert_sorted_scans_from_end():
    arr = BoundedArray([1, 2, 11, 7, 9, 55, 81])
    arr.insert_sorted(0)
    assert list(arr) == [0, 1, 2, 11, 7, 9, 55, 81]
    assert arr.is_sorted() is False


def test_insert_sorted_keeps_order():
    arr = BoundedArray([2, 4, 11, 15])
    arr.insert_sorted(5)
    arr.insert_sorted(20)
    assert arr.is_sorted() is True
    assert sorted(arr) == list(arr)
    assert len(arr) == 6


def test_insert_sorted_full_raises():
    arr = BoundedArray([1], capacity=1)
    with pytest.raises(OverflowError):
        arr.insert_sorted(0)


def test_merge():
    result = merge(BoundedArray(A1), BoundedArray(A2))
    assert list(result) == sorted(A1 + A2)
    assert result.is_sorted()


def test_union():
    result = union(A1, A2)
    assert list(result) == sorted(set(A1) | set(A2))


def test_intersection():
    result = intersection(A1, A2)
    assert list(result) == [4, 15]


def test_equality():
    assert BoundedArray([1, 2]) == BoundedArray([1, 2], capacity=5)