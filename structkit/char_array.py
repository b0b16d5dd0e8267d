"""A fixed-size, NUL-terminated character buffer and C-style string comparison."""

from __future__ import annotations

import sys

BUFFER_SIZE = 20
"""Number of character slots in a buffer, including the terminator."""

NUL = "\0"


def _terminated(text: object) -> str:
    return str(text).split(NUL, 1)[0]


class CharBuffer:
    """A buffer of ``BUFFER_SIZE`` characters holding a NUL-terminated string."""

    def __init__(self, text: str = "") -> None:
        self._chars = [NUL] * BUFFER_SIZE
        self.copy_from(text)

    def clear(self) -> None:
        """Fill every slot with the terminator."""
        self._chars = [NUL] * BUFFER_SIZE

    def get_char(self, index: int) -> str:
        """Return the character stored at ``index``."""
        if not 0 <= index < BUFFER_SIZE:
            raise IndexError(f"index {index} outside buffer of {BUFFER_SIZE}")
        return self._chars[index]

    def set_char(self, index: int, value: str) -> None:
        """Store the single character ``value`` at ``index``."""
        if not 0 <= index < BUFFER_SIZE:
            raise IndexError(f"index {index} outside buffer of {BUFFER_SIZE}")
        if len(value) != 1:
            raise ValueError("value must be a single character")
        self._chars[index] = value

    def copy_from(self, text: str) -> None:
        """Replace the string with ``text``; slots past its terminator are left as they were."""
        text = _terminated(text)
        if len(text) + 1 > BUFFER_SIZE:
            raise ValueError(f"{text!r} does not fit in a buffer of {BUFFER_SIZE}")
        self._chars[: len(text) + 1] = [*text, NUL]

    def append(self, text: str) -> None:
        """Concatenate ``text`` onto the end of the current string."""
        text = _terminated(text)
        start = len(str(self))
        end = start + len(text)
        if end + 1 > BUFFER_SIZE:
            raise ValueError(f"appending {text!r} overflows a buffer of {BUFFER_SIZE}")
        self._chars[start : end + 1] = [*text, NUL]

    def __str__(self) -> str:
        return _terminated("".join(self._chars))

    def __repr__(self) -> str:
        return f"CharBuffer({str(self)!r})"


def compare_strings(first: object, second: object) -> int:
    """Compare like ``strcmp``: the code difference at the first mismatch, else 0."""
    a = _terminated(first)
    b = _terminated(second)
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    n = min(len(a), len(b))
    tail_a = ord(a[n]) if n < len(a) else 0
    tail_b = ord(b[n]) if n < len(b) else 0
    return tail_a - tail_b


def main(argv: list[str] | None = None) -> int:
    """Exercise two buffers and print their contents after each step."""
    out = sys.stdout
    str1 = CharBuffer()
    str2 = CharBuffer()
    str1.clear()
    str2.clear()
    print(f"g_str1 = {str1} / g_str2 = {str2}", file=out)

    str1.copy_from("test1")
    str2.copy_from("test2")
    print(f"g_str1 = {str1} / g_str2 = {str2}", file=out)
    print(f"compare = {compare_strings(str1, str2)}", file=out)

    str2.set_char(4, "1")
    print(f"g_str1 = {str1} / g_str2 = {str2}", file=out)
    print(f"compare = {compare_strings(str1, str2)}", file=out)

    str1.append(str(str2))
    print(f"g_str1 = {str1} / g_str2 = {str2}", file=out)

    print(f"getchar = g_str1(2) = {str1.get_char(2)}", file=out)
    return 0