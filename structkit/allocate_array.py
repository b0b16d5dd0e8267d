"""An integer array that grows its capacity in fixed-size chunks."""

from __future__ import annotations

ALLOCATE = 10
"""Number of slots added to the capacity each time the array fills up."""


class GrowableArray:
    """Append-only array whose capacity grows by ``ALLOCATE`` slots at a time."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._capacity = ALLOCATE

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def append(self, value: int) -> int:
        """Store ``value`` after the last element and return it."""
        if len(self._items) >= self._capacity:
            self._capacity += ALLOCATE
        self._items.append(value)
        return value

    def get(self, index: int) -> int:
        """Return the element at ``index``; raise IndexError outside the stored range."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for {len(self._items)} elements")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)