"""A fixed-size array of integers with bounds-checked access."""

from __future__ import annotations

import sys
from collections.abc import Iterator

SIZE = 10
"""Number of slots in the array."""


class NumArray:
    """Ten integer slots, all starting at zero."""

    def __init__(self) -> None:
        self._values = [0] * SIZE

    def clear(self) -> None:
        """Reset every slot to zero."""
        self._values = [0] * SIZE

    def get(self, index: int) -> int:
        """Return the value in slot ``index``."""
        if not 0 <= index < SIZE:
            raise IndexError(f"index {index} outside array of {SIZE}")
        return self._values[index]

    def set(self, index: int, value: int) -> None:
        """Store ``value`` in slot ``index``."""
        if not 0 <= index < SIZE:
            raise IndexError(f"index {index} outside array of {SIZE}")
        self._values[index] = value

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __len__(self) -> int:
        return SIZE


def _print_values(array: NumArray) -> None:
    print("".join(f"{value} " for value in array))


def main(argv: list[str] | None = None) -> int:
    """Print the cleared array, set two slots and print it again."""
    array = NumArray()
    array.clear()
    _print_values(array)
    array.set(3, 2)
    array.set(5, 1)
    _print_values(array)
    return 0