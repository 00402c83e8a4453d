"""A singly linked list holding arbitrary values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list with positional insertion, removal and lookup."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._size = 0
        for item in items or ():
            self.append(item)

    def is_empty(self) -> bool:
        """Return True when the list holds no values."""
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def _node_at(self, pos: int) -> _Node:
        if pos < 0 or pos >= self._size:
            raise IndexError(f"position {pos} out of range")
        node = self._head
        for _ in range(pos):
            node = node.next
        return node

    def insert(self, pos: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at position ``pos``."""
        if pos < 0 or pos > self._size:
            raise IndexError(f"position {pos} out of range")
        if pos == 0:
            self._head = _Node(value, self._head)
        else:
            previous = self._node_at(pos - 1)
            previous.next = _Node(value, previous.next)
        self._size += 1

    def insert_first(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        self.insert(0, value)

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end of the list."""
        self.insert(self._size, value)

    def remove(self, pos: int) -> None:
        """Remove the value at position ``pos``."""
        if self._head is None:
            raise IndexError("remove from empty list")
        if pos == 0:
            self._head = self._head.next
        else:
            if pos < 0 or pos >= self._size:
                raise IndexError(f"position {pos} out of range")
            previous = self._node_at(pos - 1)
            previous.next = previous.next.next
        self._size -= 1

    def get(self, pos: int) -> Any:
        """Return the value at position ``pos``."""
        return self._node_at(pos).value

    def replace(self, pos: int, value: Any) -> None:
        """Replace the value stored at position ``pos``."""
        self._node_at(pos).value = value

    def clear(self) -> None:
        """Remove every value from the list."""
        self._head = None
        self._size = 0

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"