"""Trie counting how many times each word was inserted."""

from __future__ import annotations


class _Node:
    __slots__ = ("children", "count")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.count = 0


class Trie:
    """Prefix tree of inserted words with multiplicities."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Record one occurrence of ``word``."""
        node = self._root
        for c in word:
            node = node.children.setdefault(c, _Node())
        node.count += 1

    def count(self, word: str) -> int:
        """How many times ``word`` itself was inserted."""
        node = self._root
        for c in word:
            node = node.children.get(c)
            if node is None:
                return 0
        return node.count