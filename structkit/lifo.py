"""A last-in, first-out stack of short names."""

from __future__ import annotations

from collections.abc import Iterator

from structkit.fifo import NAME_MAX, _check_name

__all__ = ["NAME_MAX", "NameStack"]


class NameStack:
    """Names come out in the reverse of the order they were pushed."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def push(self, name: str) -> str:
        """Put ``name`` on top of the stack and return it."""
        _check_name(name)
        self._items.append(name)
        return name

    def pop(self) -> str:
        """Remove and return the top name; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from an empty NameStack")
        return self._items.pop()

    def clear(self) -> None:
        """Drop every stacked name."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the top of the stack down, without removing anything."""
        return reversed(self._items)