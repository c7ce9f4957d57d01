"""Implicit and ordered treap operations on immutable-root node trees."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from typing import Any

_rng = random.Random()


class TreapNode:
    """Treap node holding a value, subtree size and random priority."""

    __slots__ = ("value", "left", "right", "size", "priority")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: TreapNode | None = None
        self.right: TreapNode | None = None
        self.size = 1
        self.priority = _rng.random()

    def pull(self) -> None:
        self.size = size(self.left) + size(self.right) + 1


def size(node: TreapNode | None) -> int:
    """Number of nodes in the subtree."""
    return node.size if node else 0


def merge(a: TreapNode | None, b: TreapNode | None) -> TreapNode | None:
    """Concatenate two treaps, all of ``a`` before all of ``b``."""
    if not a or not b:
        return a or b
    if a.priority > b.priority:
        a.right = merge(a.right, b)
        a.pull()
        return a
    b.left = merge(a, b.left)
    b.pull()
    return b


def split_by_size(root: TreapNode | None, count: int) -> tuple[TreapNode | None, TreapNode | None]:
    """Split off the first ``count`` nodes."""
    if not root:
        return None, None
    if size(root.left) + 1 > count:
        a, root.left = split_by_size(root.left, count)
        root.pull()
        return a, root
    root.right, b = split_by_size(root.right, count - size(root.left) - 1)
    root.pull()
    return root, b


def split_by_value(root: TreapNode | None, value: Any) -> tuple[TreapNode | None, TreapNode | None]:
    """Split into nodes with values ``<= value`` and the rest."""
    if not root:
        return None, None
    if root.value <= value:
        root.right, b = split_by_value(root.right, value)
        root.pull()
        return root, b
    a, root.left = split_by_value(root.left, value)
    root.pull()
    return a, root


def inorder(node: TreapNode | None) -> Iterator[Any]:
    """Values in order."""
    stack: list[TreapNode] = []
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def from_values(values: Iterable[Any]) -> TreapNode | None:
    """Treap holding ``values`` in the given order."""
    root = None
    for value in values:
        root = merge(root, TreapNode(value))
    return root