"""A bounded last-in first-out stack and string reversal built on it."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

STACK_SIZE = 100


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class Stack:
    """A stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int = STACK_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError(f"stack is full ({self.capacity} items)")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the value on top of the stack."""
        if not self._items:
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down to the bottom."""
        return reversed(self._items)


def reverse_string(text: str) -> str:
    """Reverse a string by pushing its characters and popping them back."""
    stack = Stack(len(text))
    for char in text:
        stack.push(char)
    return "".join(stack.pop() for _ in range(len(stack)))