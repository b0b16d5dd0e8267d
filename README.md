# structkit

A collection of compact, dependency-free data structures. Each one is a plain
Python class that can be read end to end in a few minutes.

## What is inside

| Module | Names | What it is |
| --- | --- | --- |
| `structkit.allocate_array` | `GrowableArray` | An append-only integer array whose `capacity` grows by 10 slots whenever it fills up |
| `structkit.char_array` | `CharBuffer`, `compare_strings` | A 20-slot character buffer holding a terminated string, and a `strcmp`-style comparison |
| `structkit.num_array` | `NumArray` | Ten integer slots, starting at zero, with bounds-checked `get` and `set` |
| `structkit.structure` | `Record`, `RecordTable` | Ten numbered, named records with `search_element` by number |
| `structkit.fifo` | `NameQueue` | A first-in, first-out queue of names |
| `structkit.lifo` | `NameStack` | A last-in, first-out stack of names |
| `structkit.circular_list` | `CircularNode`, `CircularList` | A circular doubly linked list with a movable cursor |
| `structkit.doubly_linked_list` | `ListNode`, `DoublyLinkedList` | A doubly linked list with top, bottom and a movable cursor |
| `structkit.lru` | `LruNode`, `LruList` | A list that puts new elements, and every element found by `search`, at the top |
| `structkit.tree` | `TreeNode`, `BinarySearchTree` | An unbalanced binary search tree keyed by index |

Names stored in the queues, stacks, lists, tree and record table must be at
most 19 characters long; a longer name raises `ValueError`.

## Installation

```
pip install .
```

Python 3.10 or newer is required. There are no runtime dependencies.

## Usage

### Queues and stacks

```python
from structkit.fifo import NameQueue
from structkit.lifo import NameStack

queue = NameQueue()
queue.put("tama")
queue.put("pochi")
print(queue.get())   # tama
print(len(queue))    # 1

stack = NameStack()
stack.push("tama")
stack.push("pochi")
print(stack.pop())   # pochi
```

`get` on an empty queue and `pop` on an empty stack raise `IndexError`.
Iterating a queue goes front to back; iterating a stack goes from the top
down. Neither removes anything.

### Linked lists with a cursor

```python
from structkit.doubly_linked_list import DoublyLinkedList

items = DoublyLinkedList()
items.add(1, "taro")
items.add(2, "hanako")
items.top()
items.insert(3, "tama")       # inserted right after the cursor
print([node.name for node in items])   # ['taro', 'tama', 'hanako']
```

`add` appends at the bottom, `insert` places the new node after the current
one, and both make the new node current. `next` and `prev` return `None`
without moving at either end. `delete` removes the current node and makes the
one before it (or, at the top, the one after it) current; on an empty list it
raises `IndexError`.

`CircularList` has the same cursor operations, except that `next` and `prev`
wrap around, `delete` makes the following node current, and `search` looks
forward round the ring from the cursor. Iterating it walks once round the
ring starting at the current node.

`LruList` adds new elements at the top, and `search` moves the found element
to the top and makes it current. Its `delete` makes the following node (or,
at the bottom, the preceding one) current.

### Binary search tree

```python
from structkit.tree import BinarySearchTree

tree = BinarySearchTree()
for index, name in [(5, "five"), (2, "two"), (8, "eight")]:
    tree.add(index, name)

print(tree.search(2).name)    # two
print(len(tree))              # 3
for line in tree.format_lines():
    print(line)               # index = 2 / name = two, ...
```

Equal indices go to the right. Iteration yields nodes in ascending index
order; `top` returns the root.

### Fixed-size arrays, buffers and records

```python
from structkit.allocate_array import GrowableArray
from structkit.char_array import CharBuffer, compare_strings
from structkit.num_array import NumArray
from structkit.structure import RecordTable

growing = GrowableArray()
for value in range(12):
    growing.append(value)
print(len(growing), growing.capacity)   # 12 20

numbers = NumArray()
numbers.set(3, 2)
print(list(numbers))   # [0, 0, 0, 2, 0, 0, 0, 0, 0, 0]

text = CharBuffer("test1")
text.append("test2")
print(str(text))                         # test1test2
print(compare_strings("test1", "test2")) # -1

table = RecordTable()
table.set_element(1, 11, "hanako")
print(table.search_element(11).name)   # hanako
```

Out-of-range positions raise `IndexError`. A `CharBuffer` whose string would
not fit in its 20 slots, terminator included, raises `ValueError`.

## Demonstration commands

Four modules come with a small demonstration that prints its structure at
work:

```
structkit-char-array
structkit-num-array
structkit-structure
structkit-fifo
```

The other modules have no command; they are used from Python only.

## Running the tests

```
pip install .[test]
pytest
```