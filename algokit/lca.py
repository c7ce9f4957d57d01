"""Lowest common ancestor by binary lifting."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class LowestCommonAncestor:
    """Ancestor tables for a tree on nodes ``0..n-1``."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        if n < 1:
            raise ValueError("tree needs at least one node")
        adj: list[list[int]] = [[] for _ in range(n)]
        for a, b in edges:
            adj[a].append(b)
            adj[b].append(a)
        parent = [-1] * n
        parent[root] = root
        self._depth = [0] * n
        queue = deque([root])
        while queue:
            u = queue.popleft()
            for v in adj[u]:
                if parent[v] == -1:
                    parent[v] = u
                    self._depth[v] = self._depth[u] + 1
                    queue.append(v)
        if -1 in parent:
            raise ValueError("edges do not connect every node to the root")
        self._up = [parent]
        for _ in range(max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n)])

    def depth(self, u: int) -> int:
        """Distance from the root to ``u``."""
        return self._depth[u]

    def lca(self, u: int, v: int) -> int:
        """Deepest node that is an ancestor of both ``u`` and ``v``."""
        if self._depth[u] > self._depth[v]:
            u, v = v, u
        diff = self._depth[v] - self._depth[u]
        for k, row in enumerate(self._up):
            if diff >> k & 1:
                v = row[v]
        if u == v:
            return u
        for row in reversed(self._up):
            if row[u] != row[v]:
                u, v = row[u], row[v]
        return self._up[0][u]