import pytest

from structkit.tree import BinarySearchTree


def _filled(*indices):
    tree = BinarySearchTree()
    for i in indices:
        tree.add(i, f"n{i}")
    return tree


def test_iteration_is_sorted():
    values = [5, 3, 8, 1, 4, 9, 7]
    tree = _filled(*values)
    assert [n.index for n in tree] == sorted(values)
    assert len(tree) == len(values)


def test_structure_of_children():
    tree = _filled(5, 3, 8)
    root = tree.top()
    assert root.index == 5
    assert root.left.index == 3
    assert root.right.index == 8
    assert root.left.left is None and root.left.right is None


def test_duplicates_go_right():
    tree = _filled(5, 5)
    root = tree.top()
    assert root.left is None
    assert root.right.index == 5
    assert len(tree) == 2


def test_search():
    tree = _filled(5, 3, 8, 1)
    found = tree.search(1)
    assert found.name == "n1"
    assert tree.search(2) is None


def test_search_empty():
    assert BinarySearchTree().search(1) is None
    assert BinarySearchTree().top() is None


def test_format_lines():
    tree = BinarySearchTree()
    tree.add(2, "hanako")
    tree.add(1, "taro")
    assert tree.format_lines() == [
        "index = 1 / name = taro",
        "index = 2 / name = hanako",
    ]


def test_clear():
    tree = _filled(3, 1, 2)
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.top() is None


def test_degenerate_tree_iterates():
    count = 1500
    tree = _filled(*range(count))
    assert [n.index for n in tree] == list(range(count))
    assert tree.search(count - 1).index == count - 1


def test_long_name_rejected():
    tree = BinarySearchTree()
    with pytest.raises(ValueError):
        tree.add(1, "w" * 30)
    assert len(tree) == 0