"""Binary addition, a binary min-heap and a set of classic comparison sorts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


def add_binary(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two equal-length bit sequences, most significant bit first.

    The result always has one more bit than the inputs; its first bit is the
    final carry.
    """
    if len(a) != len(b):
        raise ValueError("bit sequences must have the same length")
    for bit in (*a, *b):
        if bit not in (0, 1):
            raise ValueError(f"not a bit: {bit!r}")

    digits: list[int] = []
    carry = 0
    for x, y in zip(reversed(a), reversed(b)):
        carry, digit = divmod(x + y + carry, 2)
        digits.append(digit)
    digits.append(carry)
    digits.reverse()
    return digits


class MinHeap:
    """A binary min-heap kept in level order."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Insert a value and restore the heap order by sifting it up."""
        items = self._items
        items.append(value)
        child = len(items) - 1
        while child > 0:
            parent = (child - 1) // 2
            if not items[parent] > items[child]:
                break
            items[parent], items[child] = items[child], items[parent]
            child = parent

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        smallest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down()
        return smallest

    def _sift_down(self) -> None:
        items = self._items
        size = len(items)
        node = 0
        while True:
            left = 2 * node + 1
            if left >= size:
                return
            right = left + 1
            if right >= size or items[left] < items[right]:
                child = left
            else:
                child = right
            if not items[child] < items[node]:
                return
            items[child], items[node] = items[node], items[child]
            node = child

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[Any]:
        """Return the heap contents in level order."""
        return list(self._items)


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort through a min-heap; each removed minimum fills the list from the
    back, so the result is in descending order."""
    heap = MinHeap(values)
    removed = [heap.pop() for _ in range(len(heap))]
    removed.reverse()
    return removed


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by insertion."""
    result: list[Any] = []
    for key in values:
        position = len(result)
        while position > 0 and result[position - 1] > key:
            position -= 1
        result.insert(position, key)
    return result


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order; equal values keep their order."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    left_iter, right_iter = iter(left), iter(right)
    left_head = next(left_iter, _EMPTY)
    right_head = next(right_iter, _EMPTY)
    while left_head is not _EMPTY and right_head is not _EMPTY:
        if left_head <= right_head:
            merged.append(left_head)
            left_head = next(left_iter, _EMPTY)
        else:
            merged.append(right_head)
            right_head = next(right_iter, _EMPTY)
    if left_head is not _EMPTY:
        merged.append(left_head)
        merged.extend(left_iter)
    if right_head is not _EMPTY:
        merged.append(right_head)
        merged.extend(right_iter)
    return merged


_EMPTY = object()


def selection_sort_passes(values: Iterable[Any]) -> Iterator[tuple[list[Any], Any]]:
    """Run selection sort, yielding the list and the selected minimum after
    each pass."""
    items = list(values)
    for start in range(len(items)):
        chosen = min(range(start, len(items)), key=lambda i: (items[i], i))
        minimum = items[chosen]
        items[start], items[chosen] = items[chosen], items[start]
        yield list(items), minimum


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by selection."""
    items = list(values)
    final = items
    for snapshot, _ in selection_sort_passes(items):
        final = snapshot
    return list(final)


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using gaps that halve each round."""
    items = list(values)
    gap = len(items) // 2
    while gap >= 1:
        for j in range(gap, len(items)):
            i = j - gap
            while i >= 0 and items[i] > items[i + gap]:
                items[i], items[i + gap] = items[i + gap], items[i]
                i -= gap
        gap //= 2
    return items