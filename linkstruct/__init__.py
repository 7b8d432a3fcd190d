"""A singly linked list and a LIFO stack of arbitrary values."""

__version__ = "0.1.0"
__all__ = ["linkedlist", "stack"]