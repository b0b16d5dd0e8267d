"""A doubly linked list of indexed names with a movable cursor."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from structkit.fifo import _check_name


@dataclass(eq=False)
class ListNode:
    """One element of a linked list."""

    index: int
    name: str
    prev: ListNode | None = field(default=None, repr=False)
    next: ListNode | None = field(default=None, repr=False)


class _NodeChain:
    """Top, bottom and cursor bookkeeping shared by the linear lists."""

    _top: ListNode | None
    _bottom: ListNode | None
    _current: ListNode | None
    _count: int

    def _reset(self) -> None:
        self._top = self._bottom = self._current = None
        self._count = 0

    def _require_current(self) -> ListNode:
        if self._current is None:
            raise IndexError("delete from an empty list")
        return self._current

    def _unlink(self, node: ListNode) -> tuple[ListNode | None, ListNode | None]:
        """Detach ``node`` and return its former neighbours."""
        before, after = node.prev, node.next
        if after is not None:
            after.prev = before
        else:
            self._bottom = before
        if before is not None:
            before.next = after
        else:
            self._top = after
        node.prev = node.next = None
        self._count -= 1
        return before, after

    def _walk(self) -> Iterator[ListNode]:
        node = self._top
        while node is not None:
            yield node
            node = node.next

    def _find(self, index: int) -> ListNode | None:
        return next((node for node in self._walk() if node.index == index), None)

    def _step_next(self) -> ListNode | None:
        if self._current is None or self._current.next is None:
            return None
        self._current = self._current.next
        return self._current

    def _step_prev(self) -> ListNode | None:
        if self._current is None or self._current.prev is None:
            return None
        self._current = self._current.prev
        return self._current


class DoublyLinkedList(_NodeChain):
    """Nodes from top to bottom; the cursor marks the current node."""

    def __init__(self) -> None:
        self._reset()

    def add(self, index: int, name: str) -> ListNode:
        """Append a node at the bottom and make it current."""
        _check_name(name)
        node = ListNode(index, name)
        if self._bottom is None:
            self._top = node
        else:
            node.prev = self._bottom
            self._bottom.next = node
        self._bottom = self._current = node
        self._count += 1
        return node

    def insert(self, index: int, name: str) -> ListNode:
        """Insert a node after the current one and make it current."""
        _check_name(name)
        node = ListNode(index, name)
        current = self._current
        if current is None:
            self._top = self._bottom = node
        else:
            node.prev = current
            node.next = current.next
            if current.next is None:
                self._bottom = node
            else:
                current.next.prev = node
            current.next = node
        self._current = node
        self._count += 1
        return node

    def delete(self) -> ListNode | None:
        """Remove the current node; the one before it (or else after it) becomes current."""
        before, after = self._unlink(self._require_current())
        self._current = before if before is not None else after
        return self._current

    def current(self) -> ListNode | None:
        """Return the current node, or None if the list is empty."""
        return self._current

    def top(self) -> ListNode | None:
        """Move the cursor to the first node and return it."""
        self._current = self._top
        return self._current

    def bottom(self) -> ListNode | None:
        """Move the cursor to the last node and return it."""
        self._current = self._bottom
        return self._current

    def next(self) -> ListNode | None:
        """Move towards the bottom; return None without moving at the bottom."""
        return self._step_next()

    def prev(self) -> ListNode | None:
        """Move towards the top; return None without moving at the top."""
        return self._step_prev()

    def search(self, index: int) -> ListNode | None:
        """Find the first node from the top with ``index`` and make it current."""
        node = self._find(index)
        if node is not None:
            self._current = node
        return node

    def clear(self) -> None:
        """Remove every node."""
        self._reset()

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[ListNode]:
        """Walk from top to bottom."""
        return self._walk()