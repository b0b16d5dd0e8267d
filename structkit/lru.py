"""A most-recently-used-first list: new and looked-up nodes go to the top."""

from __future__ import annotations

from collections.abc import Iterator

from structkit.doubly_linked_list import ListNode, _NodeChain
from structkit.fifo import _check_name


class LruNode(ListNode):
    """One element of the most-recently-used list."""


class LruList(_NodeChain):
    """Nodes ordered from most to least recently used."""

    def __init__(self) -> None:
        self._reset()

    def _push_top(self, node: ListNode) -> None:
        node.prev = None
        node.next = self._top
        if self._top is not None:
            self._top.prev = node
        else:
            self._bottom = node
        self._top = node
        self._count += 1

    def add(self, index: int, name: str) -> LruNode:
        """Put a new node at the top and make it current."""
        _check_name(name)
        node = LruNode(index, name)
        self._push_top(node)
        self._current = node
        return node

    def delete(self) -> ListNode | None:
        """Remove the current node; the one after it (or else before it) becomes current."""
        before, after = self._unlink(self._require_current())
        self._current = after if after is not None else before
        return self._current

    def current(self) -> ListNode | None:
        """Return the current node, or None if the list is empty."""
        return self._current

    def top(self) -> ListNode | None:
        """Move the cursor to the most recently used node and return it."""
        self._current = self._top
        return self._current

    def bottom(self) -> ListNode | None:
        """Move the cursor to the least recently used node and return it."""
        self._current = self._bottom
        return self._current

    def next(self) -> ListNode | None:
        """Move towards the bottom; return None without moving at the bottom."""
        return self._step_next()

    def prev(self) -> ListNode | None:
        """Move towards the top; return None without moving at the top."""
        return self._step_prev()

    def search(self, index: int) -> ListNode | None:
        """Find the node with ``index``, move it to the top and make it current."""
        node = self._find(index)
        if node is None:
            return None
        if node is not self._top:
            self._unlink(node)
            self._push_top(node)
        self._current = node
        return node

    def clear(self) -> None:
        """Remove every node."""
        self._reset()

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[ListNode]:
        """Walk from most to least recently used."""
        return self._walk()