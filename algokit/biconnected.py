"""Articulation points, biconnected blocks, bridges and 2-edge-connected components."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from algokit.dsu import DisjointSet


@dataclass
class _LowLink:
    is_cut: list[bool]
    blocks: list[list[int]]
    bridge_ids: list[int]


def _analyse(n: int, edges: list[tuple[int, int]]) -> _LowLink:
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for i, (u, v) in enumerate(edges):
        adj[u].append((v, i))
        adj[v].append((u, i))
    dfn = [0] * n
    low = [0] * n
    timer = 0
    is_cut = [False] * n
    blocks: list[list[int]] = []
    bridge_ids: list[int] = []

    for root in range(n):
        if dfn[root]:
            continue
        timer += 1
        dfn[root] = low[root] = timer
        stack = [root]
        kids = 0
        work = [(root, -1, iter(adj[root]))]
        while work:
            u, parent_edge, it = work[-1]
            for v, e in it:
                if e == parent_edge:
                    continue
                if dfn[v]:
                    low[u] = min(low[u], dfn[v])
                else:
                    timer += 1
                    dfn[v] = low[v] = timer
                    stack.append(v)
                    work.append((v, e, iter(adj[v])))
                    break
            else:
                work.pop()
                if not work:
                    continue
                p = work[-1][0]
                low[p] = min(low[p], low[u])
                if low[u] > dfn[p]:
                    bridge_ids.append(parent_edge)
                if low[u] >= dfn[p]:
                    if p == root:
                        kids += 1
                    else:
                        is_cut[p] = True
                    block = [p]
                    while True:
                        w = stack.pop()
                        block.append(w)
                        if w == u:
                            break
                    blocks.append(block)
        if kids > 1:
            is_cut[root] = True
        if kids == 0:
            blocks.append([root])
    return _LowLink(is_cut, blocks, bridge_ids)


def articulation_points(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Vertices whose removal disconnects their component, in increasing order."""
    info = _analyse(n, list(edges))
    return [v for v, cut in enumerate(info.is_cut) if cut]


def biconnected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Vertex sets of the biconnected blocks; an isolated vertex is its own block."""
    info = _analyse(n, list(edges))
    return sorted(sorted(block) for block in info.blocks)


def bridges(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Edges whose removal disconnects their component, as sorted ``(low, high)`` pairs."""
    edge_list = list(edges)
    info = _analyse(n, edge_list)
    return sorted((min(edge_list[e]), max(edge_list[e])) for e in info.bridge_ids)


def two_edge_components(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Vertex sets that stay connected after removing any single edge."""
    edge_list = list(edges)
    bridge_set = set(_analyse(n, edge_list).bridge_ids)
    dsu = DisjointSet(n)
    for i, (u, v) in enumerate(edge_list):
        if i not in bridge_set:
            dsu.union(u, v)
    groups: dict[int, list[int]] = defaultdict(list)
    for v in range(n):
        groups[dsu.find(v)].append(v)
    return sorted(groups.values())