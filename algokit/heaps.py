"""Mergeable min-heaps: leftist heap and skew heap."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class _Node:
    __slots__ = ("value", "left", "right", "dist")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.dist = 1


def _dist(node: _Node | None) -> int:
    return node.dist if node else 0


def _right_spine(a: _Node | None, b: _Node | None) -> tuple[list[_Node], _Node | None]:
    stack = []
    while a and b:
        if a.value > b.value:
            a, b = b, a
        stack.append(a)
        a = a.right
    return stack, a or b


def _leftist_merge(a: _Node | None, b: _Node | None) -> _Node | None:
    stack, rest = _right_spine(a, b)
    for node in reversed(stack):
        node.right = rest
        if _dist(node.left) < _dist(node.right):
            node.left, node.right = node.right, node.left
        node.dist = _dist(node.right) + 1
        rest = node
    return rest


def _skew_merge(a: _Node | None, b: _Node | None) -> _Node | None:
    stack, rest = _right_spine(a, b)
    for node in reversed(stack):
        node.right = rest
        node.left, node.right = node.right, node.left
        rest = node
    return rest


class _MeldableHeap:
    _merge = staticmethod(_leftist_merge)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._len = 0
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return self._len

    def push(self, value: Any) -> None:
        """Insert ``value``."""
        self._root = self._merge(self._root, _Node(value))
        self._len += 1

    def peek(self) -> Any:
        """Smallest value, left in place."""
        if self._root is None:
            raise IndexError("peek from empty heap")
        return self._root.value

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        if self._root is None:
            raise IndexError("pop from empty heap")
        root = self._root
        self._root = self._merge(root.left, root.right)
        self._len -= 1
        return root.value

    def meld(self, other: _MeldableHeap) -> None:
        """Move every value of ``other`` into this heap, emptying ``other``."""
        if type(other) is not type(self):
            raise TypeError("can only meld heaps of the same kind")
        if other is self:
            return
        self._root = self._merge(self._root, other._root)
        self._len += other._len
        other._root, other._len = None, 0


class LeftistHeap(_MeldableHeap):
    """Leftist min-heap."""

    _merge = staticmethod(_leftist_merge)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        super().__init__(values)

    def push(self, value: Any) -> None:
        super().push(value)

    def pop(self) -> Any:
        return super().pop()

    def peek(self) -> Any:
        return super().peek()

    def meld(self, other: LeftistHeap) -> None:
        super().meld(other)

    def __len__(self) -> int:
        return super().__len__()


class SkewHeap(_MeldableHeap):
    """Skew min-heap."""

    _merge = staticmethod(_skew_merge)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        super().__init__(values)

    def push(self, value: Any) -> None:
        super().push(value)

    def pop(self) -> Any:
        return super().pop()

    def peek(self) -> Any:
        return super().peek()

    def meld(self, other: SkewHeap) -> None:
        super().meld(other)

    def __len__(self) -> int:
        return super().__len__()