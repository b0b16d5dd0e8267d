"""Compact classic data structures: arrays, buffers, records, queues, stacks, lists and a tree."""

__version__ = "0.1.0"

__all__ = [
    "allocate_array",
    "char_array",
    "num_array",
    "structure",
    "fifo",
    "lifo",
    "circular_list",
    "doubly_linked_list",
    "lru",
    "tree",
]