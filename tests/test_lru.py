import pytest

from structkit.lru import LruList


def _filled(*indices):
    lru = LruList()
    for i in indices:
        lru.add(i, f"n{i}")
    return lru


def _indices(lru):
    return [n.index for n in lru]


def _backward(lru):
    out = []
    node = lru.bottom()
    while node is not None:
        out.append(node.index)
        node = node.prev
    return out


def test_add_puts_new_node_on_top():
    lru = _filled(1, 2, 3)
    assert _indices(lru) == [3, 2, 1]
    assert lru.current().index == 3
    assert len(lru) == 3


def test_search_moves_bottom_to_top():
    lru = _filled(1, 2, 3)
    found = lru.search(1)
    assert found.index == 1
    assert _indices(lru) == [1, 3, 2]
    assert lru.bottom().index == 2
    assert _backward(lru) == [2, 3, 1]


def test_search_moves_middle_to_top():
    lru = _filled(1, 2, 3)
    lru.search(2)
    assert _indices(lru) == [2, 3, 1]
    assert _backward(lru) == [1, 3, 2]


def test_search_top_keeps_order():
    lru = _filled(1, 2, 3)
    lru.bottom()
    lru.search(3)
    assert _indices(lru) == [3, 2, 1]
    assert lru.current().index == 3


def test_search_missing():
    lru = _filled(1, 2)
    assert lru.search(7) is None
    assert len(lru) == 2


def test_navigation_stops_at_ends():
    lru = _filled(1, 2)
    top = lru.top()
    assert lru.prev() is None
    assert lru.current() is top
    bottom = lru.bottom()
    assert lru.next() is None
    assert lru.current() is bottom


def test_delete_prefers_next_node():
    lru = _filled(1, 2, 3)
    lru.top()
    assert lru.delete().index == 2
    assert _indices(lru) == [2, 1]
    assert lru.top().prev is None


def test_delete_bottom_moves_to_previous():
    lru = _filled(1, 2, 3)
    lru.bottom()
    assert lru.delete().index == 2
    assert lru.bottom().next is None
    assert _backward(lru) == [2, 3]


def test_delete_only_node_empties():
    lru = _filled(5)
    assert lru.delete() is None
    assert len(lru) == 0
    assert lru.top() is None
    assert lru.bottom() is None


def test_delete_empty_raises():
    with pytest.raises(IndexError):
        LruList().delete()


def test_clear():
    lru = _filled(1, 2, 3)
    lru.clear()
    assert list(lru) == []
    assert lru.current() is None


def test_long_name_rejected():
    with pytest.raises(ValueError):
        LruList().add(1, "z" * 20)