"""A growable array and a doubly linked list with a small, shared interface."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

__all__ = ["Vector", "DoublyLinkedList"]

T = TypeVar("T")


def _spaced(values: Iterator[Any]) -> str:
    return "".join(f" {value}" for value in values)


class Vector(Generic[T]):
    """A growable array of values."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        self._items.append(value)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def insert(self, position: int, value: T) -> None:
        """Insert ``value`` before ``position``; ``position`` may equal the length.

        Raises IndexError when ``position`` is negative or past the end.
        """
        if not 0 <= position <= len(self._items):
            raise IndexError("Invalid position for insertion")
        self._items.insert(position, value)

    def remove_first(self, value: T) -> bool:
        """Remove the first item equal to ``value``; report whether one was found."""
        try:
            self._items.remove(value)
        except ValueError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        return _spaced(iter(self))

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"


@dataclass(eq=False)
class _Node(Generic[T]):
    value: T
    prev: Optional[_Node[T]] = field(default=None, repr=False)
    next: Optional[_Node[T]] = field(default=None, repr=False)


class DoublyLinkedList(Generic[T]):
    """A list of values linked in both directions."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: T) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def __contains__(self, value: object) -> bool:
        return any(node.value == value for node in self._nodes())

    def remove_first(self, value: T) -> bool:
        """Unlink the first node holding ``value``; report whether one was found."""
        for node in self._nodes():
            if node.value == value:
                if node.prev is None:
                    self._head = node.next
                else:
                    node.prev.next = node.next
                if node.next is None:
                    self._tail = node.prev
                else:
                    node.next.prev = node.prev
                node.prev = node.next = None
                self._size -= 1
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return _spaced(iter(self))

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"