"""Maximum flow with Dinic's algorithm."""

from __future__ import annotations

import math
from collections import deque


class Dinic:
    """Flow network on nodes ``0..n-1`` solved by blocking flows on level graphs."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("network needs at least one node")
        self._n = n
        # each edge is [to, residual capacity, index of reverse edge]
        self._graph: list[list[list[int]]] = [[] for _ in range(n)]
        self._level: list[int] = []
        self._iter: list[int] = []

    def add_edge(self, u: int, v: int, capacity: int) -> None:
        """Add a directed edge ``u -> v`` with the given capacity."""
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._graph[u].append([v, capacity, len(self._graph[v])])
        self._graph[v].append([u, 0, len(self._graph[u]) - 1])

    def _bfs(self, source: int) -> None:
        self._level = [-1] * self._n
        self._level[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v, cap, _ in self._graph[u]:
                if cap > 0 and self._level[v] == -1:
                    self._level[v] = self._level[u] + 1
                    queue.append(v)

    def _dfs(self, u: int, sink: int, flow: float) -> int:
        if u == sink:
            return flow
        edges = self._graph[u]
        while self._iter[u] < len(edges):
            edge = edges[self._iter[u]]
            v, cap, rev = edge
            if cap > 0 and self._level[v] == self._level[u] + 1:
                pushed = self._dfs(v, sink, min(flow, cap))
                if pushed > 0:
                    edge[1] -= pushed
                    self._graph[v][rev][1] += pushed
                    return pushed
            self._iter[u] += 1
        return 0

    def max_flow(self, source: int, sink: int) -> int:
        """Push as much flow as possible from ``source`` to ``sink``."""
        if source == sink:
            raise ValueError("source and sink must differ")
        total = 0
        while True:
            self._bfs(source)
            if self._level[sink] == -1:
                return total
            self._iter = [0] * self._n
            while (pushed := self._dfs(source, sink, math.inf)) > 0:
                total += pushed