"""A singly linked list holding arbitrary Python objects."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Iterator, TextIO

# A node holds two native pointers: one to its data and one to the next node.
_NODE_BYTES = struct.calcsize("PP")


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    data: Any
    next: Node | None = field(default=None, repr=False)


def _address(obj: object) -> str:
    return "(nil)" if obj is None else hex(id(obj))


def format_node(node: Node | None) -> str:
    """Describe a node by the identities of its data and its successor."""
    if node is None:
        return ""
    return f"data = {_address(node.data)} | next = {_address(node.next)}"


class SinglyLinkedList:
    """A chain of nodes reachable from ``head``.

    The items given to the constructor become the initial contents, in order.
    """

    def __init__(self, *args: Any) -> None:
        self.head: Node | None = None
        for item in reversed(args):
            self.prepend(item)

    def append(self, data: Any) -> None:
        """Add ``data`` after the last node."""
        new_node = Node(data)
        if self.head is None:
            self.head = new_node
            return
        *_, last = self.nodes()
        last.next = new_node

    def prepend(self, data: Any) -> None:
        """Add ``data`` before the first node."""
        self.head = Node(data, self.head)

    def insert(self, pos: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at position ``pos``.

        Raises IndexError when ``pos`` is negative or past the end.
        """
        if pos < 0:
            raise IndexError(f"position {pos} is negative")
        if pos == 0:
            self.prepend(data)
            return
        if self.head is None:
            raise IndexError(f"cannot insert at position {pos} of an empty list")
        size = len(self)
        if pos > size:
            raise IndexError(f"position {pos} is past the end of a list of {size}")
        previous = self._node_at(pos - 1)
        previous.next = Node(data, previous.next)

    def pop_end(self) -> Any:
        """Remove the last node and return its data."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        if self.head.next is None:
            data = self.head.data
            self.head = None
            return data
        previous = self.head
        while previous.next.next is not None:
            previous = previous.next
        last = previous.next
        previous.next = None
        return last.data

    def pop_begin(self) -> Any:
        """Remove the first node and return its data."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        first = self.head
        self.head = first.next
        return first.data

    def delete(self, pos: int) -> Any:
        """Remove the node at 0-based position ``pos`` and return its data."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        if pos < 0:
            raise IndexError(f"position {pos} is negative")
        size = len(self)
        if pos >= size:
            raise IndexError(f"position {pos} is out of range for a list of {size}")
        if pos == 0:
            return self.pop_begin()
        previous = self._node_at(pos - 1)
        target = previous.next
        previous.next = target.next
        return target.data

    def reverse(self) -> None:
        """Reverse the order of the nodes in place.

        Raises ValueError on an empty list.
        """
        if self.head is None:
            raise ValueError("cannot reverse an empty list")
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def byte_size(self) -> int:
        """Bytes taken by the nodes themselves, not counting their data."""
        return len(self) * _NODE_BYTES

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def dump(self, file: TextIO | None = None) -> None:
        """Write one line per node, or ``<empty>`` for an empty list."""
        out = sys.stdout if file is None else file
        if self.head is None:
            print("<empty>", file=out)
            return
        for node in self.nodes():
            print(format_node(node), file=out)

    def _node_at(self, index: int) -> Node:
        return next(islice(self.nodes(), index, None))

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self.nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self))})"