"""A first-in, first-out queue of short names, and the name rules shared by the package."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

NAME_MAX = 20
"""Storage for a name, including its terminator."""


def _check_name(name: str) -> None:
    if len(name) >= NAME_MAX:
        raise ValueError(f"name {name!r} longer than {NAME_MAX - 1} characters")


class NameQueue:
    """Names come out in the order they were put in."""

    def __init__(self) -> None:
        self._items: deque[str] = deque()

    def put(self, name: str) -> str:
        """Add ``name`` at the back of the queue and return it."""
        _check_name(name)
        self._items.append(name)
        return name

    def get(self) -> str:
        """Remove and return the name at the front; raise IndexError if empty."""
        if not self._items:
            raise IndexError("get from an empty NameQueue")
        return self._items.popleft()

    def clear(self) -> None:
        """Drop every queued name."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate front to back without removing anything."""
        return iter(self._items)


def main(argv: list[str] | None = None) -> int:
    """Queue some names, discard them, queue more and drain the queue."""
    queue = NameQueue()
    for name in ("taro", "hanako"):
        queue.put(name)
    queue.clear()
    for name in ("tama", "pochi", "hanako"):
        queue.put(name)
    while queue:
        print(f"name = {queue.get()}")
    return 0