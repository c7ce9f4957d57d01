"""Eulerian paths from node 0 to node n-1 (Hierholzer's algorithm)."""

from __future__ import annotations

from collections.abc import Iterable


def directed_euler_path(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Walk from 0 to n-1 using every directed edge once, or None if there is none."""
    if n < 1:
        raise ValueError("graph needs at least one node")
    edge_list = list(edges)
    adj: list[list[int]] = [[] for _ in range(n)]
    balance = [0] * n
    for u, v in edge_list:
        adj[u].append(v)
        balance[u] += 1
        balance[v] -= 1
    for v, b in enumerate(balance):
        expected = 1 if v == 0 else -1 if v == n - 1 else 0
        if b != expected or (v == 0 and v == n - 1):
            return None
    stack = [0]
    path: list[int] = []
    while stack:
        u = stack[-1]
        if adj[u]:
            stack.append(adj[u].pop())
        else:
            path.append(stack.pop())
    if len(path) != len(edge_list) + 1:
        return None
    path.reverse()
    return path


def undirected_euler_path(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Walk from 0 to n-1 using every undirected edge once, or None if there is none."""
    if n < 1:
        raise ValueError("graph needs at least one node")
    edge_list = list(edges)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    odd = [False] * n
    for i, (u, v) in enumerate(edge_list):
        odd[u] = not odd[u]
        odd[v] = not odd[v]
        adj[u].append((v, i))
        adj[v].append((u, i))
    start, end = 0, n - 1
    for v, parity in enumerate(odd):
        if parity != (start != end and v in (start, end)):
            return None
    used = [False] * len(edge_list)
    stack = [start]
    path: list[int] = []
    while stack:
        u = stack[-1]
        while adj[u] and used[adj[u][-1][1]]:
            adj[u].pop()
        if adj[u]:
            v, i = adj[u].pop()
            used[i] = True
            stack.append(v)
        else:
            path.append(stack.pop())
    if len(path) != len(edge_list) + 1:
        return None
    path.reverse()
    return path