# linkstruct

A singly linked list and a last-in, first-out stack built on top of it.
Both hold values of any Python type.

## Installation

```
pip install linkstruct
```

## Singly linked list

```python
from linkstruct.linkedlist import SinglyLinkedList

items = SinglyLinkedList(10, 30)   # start with initial values, or none at all
items.append(40)                   # add at the end
items.prepend(5)                   # add at the beginning
items.insert(2, 20)                # insert at a 0-based position
list(items)                        # [5, 10, 20, 30, 40]

items.pop_begin()                  # 5
items.pop_end()                    # 40
items.delete(1)                    # 20, removed from position 1
items.reverse()
list(items)                        # [30, 10]
len(items)                         # 2
```

Errors:

- `insert(pos, data)` raises `IndexError` when `pos` is negative or greater
  than the length of the list. Inserting at position `len(items)` adds at
  the end.
- `delete(pos)` raises `IndexError` on an empty list, or when `pos` is
  negative or not less than the length.
- `pop_begin()` and `pop_end()` raise `IndexError` on an empty list.
- `reverse()` raises `ValueError` on an empty list.

A call that raises leaves the list unchanged.

The list is a chain of `Node` objects starting at the `head` attribute
(`None` when the list is empty). Each `Node` has a `data` field and a `next`
field pointing to the following node. `nodes()` yields the nodes from head
to tail; iterating over the list itself yields their data.

`format_node(node)` describes one node on a single line, by the identities
of its data and of its successor, for example
`data = 0x7f... | next = (nil)`; given `None` it returns an empty string.
`dump(file)` writes one such line per node to a text stream (standard output
when `file` is omitted), or `<empty>` when the list has no nodes.

`byte_size()` gives the space taken by the nodes themselves, counted as two
native pointers per node; the data they hold is not counted.

## Stack

```python
from linkstruct.stack import Stack

stack = Stack()
stack.push(1)
stack.push(2)
stack.peek()       # 2
stack.pop()        # 2
stack.is_empty()   # False
len(stack)         # 1
stack.clear()
stack.is_empty()   # True
```

`pop()` and `peek()` raise `IndexError` when the stack is empty. `None` may
be pushed like any other value. Iterating over a stack yields its items from
the top down. The items are kept in a `SinglyLinkedList`, with the top of
the stack at the head of the list.

## Scope

linkstruct is a library only: it has no command-line program, and it keeps
its structures in memory without saving them anywhere.

## Running the tests

```
pip install "linkstruct[test]"
pytest
```