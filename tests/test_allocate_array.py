import pytest

from structkit.allocate_array import ALLOCATE, GrowableArray


def test_append_returns_value():
    array = GrowableArray()
    assert array.append(42) == 42
    assert len(array) == 1


def test_get_round_trip():
    array = GrowableArray()
    values = [5, -3, 17, 0, 99]
    for value in values:
        array.append(value)
    assert [array.get(i) for i in range(len(array))] == values


def test_initial_capacity_is_one_chunk():
    array = GrowableArray()
    assert array.capacity == ALLOCATE
    assert len(array) == 0


def test_capacity_grows_by_chunk_when_full():
    array = GrowableArray()
    for value in range(ALLOCATE):
        array.append(value)
    assert array.capacity == ALLOCATE
    array.append(ALLOCATE)
    assert array.capacity == 2 * ALLOCATE
    assert array.get(ALLOCATE) == ALLOCATE


def test_many_appends_keep_capacity_above_length():
    array = GrowableArray()
    for value in range(5 * ALLOCATE + 3):
        array.append(value)
        assert array.capacity >= len(array)
        assert array.capacity % ALLOCATE == 0
    assert array.get(0) == 0
    assert array.get(len(array) - 1) == 5 * ALLOCATE + 2


@pytest.mark.parametrize("index", [-1, 0, 3])
def test_get_out_of_range_on_empty(index):
    with pytest.raises(IndexError):
        GrowableArray().get(index)


def test_get_at_length_raises():
    array = GrowableArray()
    array.append(1)
    array.append(2)
    with pytest.raises(IndexError):
        array.get(2)