"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class SinglyLinkedList:
    """A list built from nodes that each point to the next one."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def insert_start(self, value: Any) -> None:
        """Put a value in front of the first node."""
        self._head = _Node(value, self._head)
        self._size += 1

    def insert_end(self, value: Any) -> None:
        """Append a value after the last node."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert a value so that it becomes the node at 1-based ``position``."""
        if position < 1 or position > self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.insert_start(value)
            return
        before = self._head
        for _ in range(position - 2):
            before = before.next
        before.next = _Node(value, before.next)
        self._size += 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size