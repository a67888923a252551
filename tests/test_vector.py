import pytest

from drills.vector import DEFAULT_CAPACITY, Vector


def filled(values):
    vec = Vector()
    for value in values:
        vec.push_back(value)
    return vec


def test_new_vector_is_empty():
    vec = Vector()
    assert len(vec) == 0
    assert vec.capacity == 0
    assert list(vec) == []


def test_first_push_allocates_default():
    vec = filled([1.5])
    assert vec.capacity == DEFAULT_CAPACITY == 8
    assert len(vec) == 1


def test_push_back_keeps_order():
    values = [i * 0.05 for i in range(10)]
    vec = filled(values)
    assert list(vec) == values
    assert [vec[i] for i in range(len(vec))] == values


def test_capacity_doubles_when_full():
    vec = filled(range(DEFAULT_CAPACITY))
    assert vec.capacity == DEFAULT_CAPACITY
    vec.push_back(99)
    assert vec.capacity == 2 * DEFAULT_CAPACITY


def test_capacity_never_below_length():
    vec = Vector()
    for value in range(100):
        vec.push_back(value)
        assert vec.capacity >= len(vec)


def test_reserve_sets_capacity():
    vec = Vector()
    vec.reserve(22)
    assert vec.capacity == 22
    assert len(vec) == 0


def test_reserve_never_shrinks():
    vec = Vector()
    vec.reserve(22)
    vec.reserve(5)
    assert vec.capacity == 22


def test_reserve_negative_raises():
    with pytest.raises(ValueError):
        Vector().reserve(-1)


def test_reserved_capacity_used_before_growth():
    vec = Vector()
    vec.reserve(22)
    for value in range(22):
        vec.push_back(value)
    assert vec.capacity == 22
    vec.push_back(22)
    assert vec.capacity == 2 * 22


def test_insert_at_middle():
    values = list(range(20))
    vec = filled(values)
    vec.insert_at(10, -100.0008)
    assert list(vec) == values[:10] + [-100.0008] + values[10:]


def test_insert_at_front_and_end():
    vec = filled([2, 3])
    vec.insert_at(0, 1)
    vec.insert_at(len(vec), 4)
    assert list(vec) == [1, 2, 3, 4]


def test_insert_out_of_range_raises():
    vec = filled([1, 2])
    with pytest.raises(IndexError):
        vec.insert_at(3, 0)
    with pytest.raises(IndexError):
        vec.insert_at(-1, 0)


def test_front_and_back():
    vec = filled([-10.8, 1.0, 19.0])
    assert vec.front() == -10.8
    assert vec.back() == 19.0


def test_front_back_empty_raise():
    vec = Vector()
    with pytest.raises(IndexError):
        vec.front()
    with pytest.raises(IndexError):
        vec.back()


def test_getitem_out_of_range_raises():
    with pytest.raises(IndexError):
        filled([1])[1]