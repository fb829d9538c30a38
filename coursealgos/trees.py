"""Binary trees in three shapes: linked nodes, an implicit array and an array of
nodes that refer to each other by index."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

DEFAULT_SIZE = 100


class TreeError(Exception):
    """Raised when a tree operation cannot be carried out."""


@dataclass
class TreeNode:
    """A node of a linked binary tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None

    def set_left(self, value: Any) -> TreeNode:
        """Attach a new left child holding ``value`` and return it."""
        if self.left is not None:
            raise TreeError("node already has a left child")
        self.left = TreeNode(value)
        return self.left

    def set_right(self, value: Any) -> TreeNode:
        """Attach a new right child holding ``value`` and return it."""
        if self.right is not None:
            raise TreeError("node already has a right child")
        self.right = TreeNode(value)
        return self.right


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield node.value
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.value
    yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is None:
        return
    yield from _postorder(node.left)
    yield from _postorder(node.right)
    yield node.value


def preorder(node: Optional[TreeNode]) -> list[Any]:
    """Return the values in root, left, right order."""
    return list(_preorder(node))


def inorder(node: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, root, right order."""
    return list(_inorder(node))


def postorder(node: Optional[TreeNode]) -> list[Any]:
    """Return the values in left, right, root order."""
    return list(_postorder(node))


class ArrayTree:
    """A binary tree stored in a fixed-size array: the children of slot ``p``
    live in slots ``2p+1`` and ``2p+2``."""

    ROOT = 0

    def __init__(self, root: Any, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        if root is None:
            raise ValueError("a tree cannot hold None")
        self._slots: list[Any] = [None] * size
        self._slots[self.ROOT] = root

    def _attach(self, parent: int, child: int, value: Any) -> int:
        if value is None:
            raise ValueError("a tree cannot hold None")
        if not 0 <= parent < len(self._slots) or self._slots[parent] is None:
            raise TreeError(f"no node at slot {parent}")
        if child >= len(self._slots):
            raise TreeError(f"slot {child} is beyond the tree's size")
        if self._slots[child] is not None:
            raise TreeError(f"slot {child} is already taken")
        self._slots[child] = value
        return child

    def set_left(self, parent: int, value: Any) -> int:
        """Store ``value`` as the left child of ``parent``; return its slot."""
        return self._attach(parent, 2 * parent + 1, value)

    def set_right(self, parent: int, value: Any) -> int:
        """Store ``value`` as the right child of ``parent``; return its slot."""
        return self._attach(parent, 2 * parent + 2, value)

    def inorder(self) -> list[Any]:
        """Return the values in left, root, right order."""
        return array_inorder(self._slots)


@dataclass
class _Slot:
    value: Any = None
    left: int = 0
    right: int = 0
    used: bool = False


class LinkedArrayTree:
    """A binary tree whose nodes sit in an array and point to their children
    by index; index 0 stands for no child and the root is at index 1."""

    ROOT = 1

    def __init__(self, root: Any, size: int = DEFAULT_SIZE) -> None:
        if size < 2:
            raise ValueError("size must be at least 2")
        self._nodes = [_Slot() for _ in range(size)]
        self._nodes[self.ROOT] = _Slot(root, used=True)
        self._next_free = self.ROOT + 1

    def _new_node(self, value: Any) -> int:
        if self._next_free >= len(self._nodes):
            raise TreeError("no free nodes left")
        index = self._next_free
        self._next_free += 1
        self._nodes[index] = _Slot(value, used=True)
        return index

    def _parent(self, parent: int) -> _Slot:
        if not 0 < parent < len(self._nodes) or not self._nodes[parent].used:
            raise TreeError(f"no node at index {parent}")
        return self._nodes[parent]

    def set_left(self, parent: int, value: Any) -> int:
        """Attach ``value`` as the left child of ``parent``; return its index."""
        node = self._parent(parent)
        if node.left:
            raise TreeError(f"node {parent} already has a left child")
        node.left = self._new_node(value)
        return node.left

    def set_right(self, parent: int, value: Any) -> int:
        """Attach ``value`` as the right child of ``parent``; return its index."""
        node = self._parent(parent)
        if node.right:
            raise TreeError(f"node {parent} already has a right child")
        node.right = self._new_node(value)
        return node.right

    def _walk(self, index: int) -> Iterator[Any]:
        if not index:
            return
        node = self._nodes[index]
        yield from self._walk(node.left)
        yield node.value
        yield from self._walk(node.right)

    def inorder(self) -> list[Any]:
        """Return the values in left, root, right order."""
        return list(self._walk(self.ROOT))


def balanced_tree_array(sorted_values: Sequence[Any]) -> list[Any]:
    """Lay sorted values out as a balanced search tree in implicit-array form.

    Each subtree's root is the upper middle of its range. Slots that hold no
    node are None.
    """
    items = list(sorted_values)
    if any(later < earlier for earlier, later in zip(items, items[1:])):
        raise ValueError("values must be in sorted order")
    array: list[Any] = []

    def place(start: int, stop: int, slot: int) -> None:
        if start > stop:
            return
        middle = start + (stop - start + 1) // 2
        if slot >= len(array):
            array.extend([None] * (slot + 1 - len(array)))
        array[slot] = items[middle]
        place(start, middle - 1, 2 * slot + 1)
        place(middle + 1, stop, 2 * slot + 2)

    place(0, len(items) - 1, 0)
    return array


def _present(array: Sequence[Any], slot: int) -> bool:
    return slot < len(array) and array[slot] is not None


def _array_walk(array: Sequence[Any], slot: int, order: str) -> Iterator[Any]:
    if not _present(array, slot):
        return
    if order == "pre":
        yield array[slot]
    yield from _array_walk(array, 2 * slot + 1, order)
    if order == "in":
        yield array[slot]
    yield from _array_walk(array, 2 * slot + 2, order)
    if order == "post":
        yield array[slot]


def array_preorder(array: Sequence[Any]) -> list[Any]:
    """Preorder traversal of a tree in implicit-array form."""
    return list(_array_walk(array, 0, "pre"))


def array_inorder(array: Sequence[Any]) -> list[Any]:
    """Inorder traversal of a tree in implicit-array form."""
    return list(_array_walk(array, 0, "in"))


def array_postorder(array: Sequence[Any]) -> list[Any]:
    """Postorder traversal of a tree in implicit-array form."""
    return list(_array_walk(array, 0, "post"))