"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

from algokit.dsu import DisjointSet


def kruskal(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Weight of a minimum spanning forest over undirected edges ``(u, v, w)``."""
    dsu = DisjointSet(n)
    total = 0
    for u, v, w in sorted(edges, key=lambda e: e[2]):
        if dsu.union(u, v):
            total += w
    return total


def prim(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Weight of a minimum spanning tree; raises if the graph is disconnected."""
    if n == 0:
        return 0
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((w, v))
        adj[v].append((w, u))
    visited = [False] * n
    heap = [(0, 0)]
    total = 0
    reached = 0
    while heap:
        w, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        total += w
        reached += 1
        for wv, v in adj[u]:
            if not visited[v]:
                heapq.heappush(heap, (wv, v))
    if reached < n:
        raise ValueError("graph is not connected")
    return total