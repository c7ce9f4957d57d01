"""Minimum-cost maximum flow with shortest augmenting paths found by SPFA."""

from __future__ import annotations

import math
from collections import deque


class MinCostFlow:
    """Flow network on nodes ``0..n-1`` with per-unit edge costs."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("network needs at least one node")
        self._n = n
        # each edge is [to, residual capacity, index of reverse edge, cost]
        self._graph: list[list[list[int]]] = [[] for _ in range(n)]

    def add_edge(self, u: int, v: int, capacity: int, cost: int) -> None:
        """Add a directed edge ``u -> v``."""
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._graph[u].append([v, capacity, len(self._graph[v]), cost])
        self._graph[v].append([u, 0, len(self._graph[u]) - 1, -cost])

    def _spfa(self, source: int) -> tuple[list[float], list[tuple[int, int]]]:
        dist: list[float] = [math.inf] * self._n
        prev = [(-1, -1)] * self._n
        queued = [False] * self._n
        dist[source] = 0
        queued[source] = True
        queue = deque([source])
        while queue:
            u = queue.popleft()
            queued[u] = False
            for i, (v, cap, _, cost) in enumerate(self._graph[u]):
                if cap > 0 and dist[v] > dist[u] + cost:
                    dist[v] = dist[u] + cost
                    prev[v] = (u, i)
                    if not queued[v]:
                        queued[v] = True
                        queue.append(v)
        return dist, prev

    def _dfs(self, u: int, sink: int, cur: float, dist: list[float],
             it: list[int], active: list[bool]) -> int:
        if u == sink:
            return cur
        sent = 0
        active[u] = True
        edges = self._graph[u]
        while it[u] < len(edges):
            edge = edges[it[u]]
            v, cap, rev, cost = edge
            if cap > 0 and not active[v] and dist[v] == dist[u] + cost:
                pushed = self._dfs(v, sink, min(cur, cap), dist, it, active)
                edge[1] -= pushed
                self._graph[v][rev][1] += pushed
                cur -= pushed
                sent += pushed
                if cur == 0:
                    active[u] = False
                    return sent
            it[u] += 1
        active[u] = False
        return sent

    def _check(self, source: int, sink: int) -> None:
        if source == sink:
            raise ValueError("source and sink must differ")

    def flow(self, source: int, sink: int) -> tuple[int, int]:
        """Maximum flow and its minimum cost, pushing many paths per round."""
        self._check(source, sink)
        total_flow = total_cost = 0
        while True:
            dist, _ = self._spfa(source)
            if dist[sink] == math.inf:
                break
            pushed = self._dfs(source, sink, math.inf, dist,
                               [0] * self._n, [False] * self._n)
            if pushed == 0:
                break
            total_flow += pushed
            total_cost += pushed * dist[sink]
        return total_flow, total_cost

    def flow_by_paths(self, source: int, sink: int) -> tuple[int, int]:
        """Maximum flow and its minimum cost, one shortest path at a time."""
        self._check(source, sink)
        total_flow = total_cost = 0
        while True:
            dist, prev = self._spfa(source)
            if dist[sink] == math.inf:
                break
            path = []
            v = sink
            while v != source:
                u, i = prev[v]
                path.append(self._graph[u][i])
                v = u
            pushed = min(edge[1] for edge in path)
            for edge in path:
                edge[1] -= pushed
                self._graph[edge[0]][edge[2]][1] += pushed
            total_flow += pushed
            total_cost += dist[sink] * pushed
        return total_flow, total_cost