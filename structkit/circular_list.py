"""A circular doubly linked list of indexed names with a movable cursor."""

from __future__ import annotations

from collections.abc import Iterator

from structkit.doubly_linked_list import ListNode
from structkit.fifo import _check_name


class CircularNode(ListNode):
    """One element of the ring."""


class CircularList:
    """A ring of nodes; the cursor marks the current node."""

    def __init__(self) -> None:
        self._current: ListNode | None = None
        self._count = 0

    def insert(self, index: int, name: str) -> CircularNode:
        """Insert a node after the current one and make it current."""
        _check_name(name)
        node = CircularNode(index, name)
        current = self._current
        if current is None:
            node.prev = node.next = node
        else:
            node.prev = current
            node.next = current.next
            current.next.prev = node
            current.next = node
        self._current = node
        self._count += 1
        return node

    def delete(self) -> ListNode | None:
        """Remove the current node; the following node becomes current and is returned."""
        node = self._current
        if node is None:
            raise IndexError("delete from an empty list")
        if self._count == 1:
            self._current = None
        else:
            node.next.prev = node.prev
            node.prev.next = node.next
            self._current = node.next
        node.prev = node.next = None
        self._count -= 1
        return self._current

    def current(self) -> ListNode | None:
        """Return the current node, or None if the ring is empty."""
        return self._current

    def _step(self, forward: bool) -> ListNode | None:
        if self._current is not None:
            self._current = self._current.next if forward else self._current.prev
        return self._current

    def next(self) -> ListNode | None:
        """Move the cursor forward round the ring and return the new current node."""
        return self._step(True)

    def prev(self) -> ListNode | None:
        """Move the cursor backward round the ring and return the new current node."""
        return self._step(False)

    def search(self, index: int) -> ListNode | None:
        """Find the first node with ``index`` going forward from the cursor and make it current."""
        for node in self:
            if node.index == index:
                self._current = node
                return node
        return None

    def clear(self) -> None:
        """Empty the ring."""
        self._current = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[ListNode]:
        """Walk once round the ring, starting at the current node."""
        node = self._current
        for _ in range(self._count):
            yield node
            node = node.next