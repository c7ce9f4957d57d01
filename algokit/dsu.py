"""Disjoint-set union with union by size and path compression."""

from __future__ import annotations


class DisjointSet:
    """Union-find over the elements ``0..size-1``."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; False if already joined."""
        x, y = self.find(x), self.find(y)
        if x == y:
            return False
        if self._size[x] < self._size[y]:
            x, y = y, x
        self._size[x] += self._size[y]
        self._size[y] = 0
        self._parent[y] = x
        return True

    def size_of(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return self._size[self.find(x)]