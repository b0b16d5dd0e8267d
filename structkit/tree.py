"""An unbalanced binary search tree of indexed names."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from structkit.fifo import _check_name


@dataclass(eq=False)
class TreeNode:
    """One node; smaller indices go left, equal or larger go right."""

    index: int
    name: str
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


class BinarySearchTree:
    """Nodes kept in index order; duplicates are placed to the right."""

    def __init__(self) -> None:
        self._root: TreeNode | None = None
        self._count = 0

    def add(self, index: int, name: str) -> TreeNode:
        """Insert a new node and return it."""
        _check_name(name)
        node = TreeNode(index, name)
        self._count += 1
        if self._root is None:
            self._root = node
            return node
        parent = self._root
        while True:
            side = "left" if parent.index > index else "right"
            child = getattr(parent, side)
            if child is None:
                setattr(parent, side, node)
                return node
            parent = child

    def search(self, index: int) -> TreeNode | None:
        """Return a node with ``index``, or None."""
        node = self._root
        while node is not None and node.index != index:
            node = node.left if node.index > index else node.right
        return node

    def top(self) -> TreeNode | None:
        """Return the root node, or None if the tree is empty."""
        return self._root

    def clear(self) -> None:
        """Drop the whole tree."""
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[TreeNode]:
        """Yield nodes in ascending index order."""
        stack: list[TreeNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def format_lines(self) -> list[str]:
        """Describe each node, in index order, one line per node."""
        return [f"index = {node.index} / name = {node.name}" for node in self]