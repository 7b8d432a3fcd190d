"""A last-in, first-out stack built on a singly linked list."""

from __future__ import annotations

from typing import Any, Iterator

from linkstruct.linkedlist import SinglyLinkedList


class Stack:
    """A LIFO stack whose top is the head of a linked list."""

    def __init__(self) -> None:
        self._items = SinglyLinkedList()

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        self._items.prepend(data)

    def pop(self) -> Any:
        """Remove and return the top item; IndexError if the stack is empty."""
        if self.is_empty():
            raise IndexError("pop from an empty stack")
        return self._items.pop_begin()

    def peek(self) -> Any:
        """Return the top item without removing it; IndexError if empty."""
        if self._items.head is None:
            raise IndexError("peek at an empty stack")
        return self._items.head.data

    def is_empty(self) -> bool:
        """True when the stack holds nothing."""
        return self._items.head is None

    def clear(self) -> None:
        """Remove every item from the stack."""
        while not self.is_empty():
            self._items.pop_begin()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(top->bottom: {list(self)!r})"