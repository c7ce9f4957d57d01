"""Single-source (Dijkstra) and all-pairs (Floyd-Warshall) shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable


def dijkstra(n: int, edges: Iterable[tuple[int, int, float]], source: int) -> list[float]:
    """Distances from ``source`` along directed edges ``(u, v, w)``; inf if unreachable."""
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for u, v, w in edges:
        if w < 0:
            raise ValueError("edge weights must be non-negative")
        adj[u].append((v, w))
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adj[u]:
            if dist[v] > d + w:
                dist[v] = d + w
                heapq.heappush(heap, (dist[v], v))
    return dist


def floyd_warshall(n: int, edges: Iterable[tuple[int, int, float]]) -> list[list[float]]:
    """All-pairs distances over undirected edges ``(u, v, w)``; inf if unreachable."""
    dist: list[list[float]] = [[math.inf] * n for _ in range(n)]
    for i, row in enumerate(dist):
        row[i] = 0
    for u, v, w in edges:
        dist[u][v] = min(dist[u][v], w)
        dist[v][u] = min(dist[v][u], w)
    for k, dk in enumerate(dist):
        for di in dist:
            dik = di[k]
            if dik == math.inf:
                continue
            for j, dkj in enumerate(dk):
                if dik + dkj < di[j]:
                    di[j] = dik + dkj
    return dist