"""Persistent implicit treap over characters; operations copy touched nodes."""

from __future__ import annotations

import random

_rng = random.Random()


class PersistentNode:
    """Node of a persistent treap; never mutated once shared."""

    __slots__ = ("char", "left", "right", "priority", "size")

    def __init__(self, char: str = "$") -> None:
        self.char = char
        self.left: PersistentNode | None = None
        self.right: PersistentNode | None = None
        self.priority = _rng.getrandbits(32)
        self.size = 1

    def _copy(self) -> PersistentNode:
        node = PersistentNode.__new__(PersistentNode)
        node.char, node.left, node.right = self.char, self.left, self.right
        node.priority, node.size = self.priority, self.size
        return node

    def _pull(self) -> None:
        self.size = 1 + size(self.left) + size(self.right)


def size(node: PersistentNode | None) -> int:
    """Number of nodes in the subtree."""
    return node.size if node else 0


def merge(a: PersistentNode | None, b: PersistentNode | None) -> PersistentNode | None:
    """Concatenation of ``a`` and ``b``; the inputs are left unchanged."""
    if not a or not b:
        return a or b
    if a.priority < b.priority:
        ret = a._copy()
        ret.right = merge(ret.right, b)
    else:
        ret = b._copy()
        ret.left = merge(a, ret.left)
    ret._pull()
    return ret


def split(node: PersistentNode | None, count: int) -> tuple[PersistentNode | None, PersistentNode | None]:
    """First ``count`` characters and the rest; the input is left unchanged."""
    if not node:
        return None, None
    if count >= size(node.left) + 1:
        a, b = split(node.right, count - size(node.left) - 1)
        ret = node._copy()
        ret.right = a
        ret._pull()
        return ret, b
    a, b = split(node.left, count)
    ret = node._copy()
    ret.left = b
    ret._pull()
    return a, ret


def from_string(text: str) -> PersistentNode | None:
    """Treap holding the characters of ``text``."""
    root = None
    for ch in text:
        root = merge(root, PersistentNode(ch))
    return root


def to_string(node: PersistentNode | None) -> str:
    """Characters of the treap in order."""
    out: list[str] = []
    stack: list[PersistentNode] = []
    while stack or node:
        while node:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.char)
        node = node.right
    return "".join(out)