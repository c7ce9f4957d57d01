"""Strongly connected components (Tarjan, Kosaraju) and 2-SAT."""

from __future__ import annotations

from collections.abc import Iterable


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
    return adj


def tarjan_scc(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Component id of each node; ids follow reverse topological order."""
    adj = _adjacency(n, edges)
    index = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    comp = [-1] * n
    counter = 0
    next_id = 0
    for s in range(n):
        if index[s] != -1:
            continue
        index[s] = low[s] = counter
        counter += 1
        stack.append(s)
        on_stack[s] = True
        work = [(s, iter(adj[s]))]
        while work:
            u, it = work[-1]
            for v in it:
                if index[v] == -1:
                    index[v] = low[v] = counter
                    counter += 1
                    stack.append(v)
                    on_stack[v] = True
                    work.append((v, iter(adj[v])))
                    break
                if on_stack[v]:
                    low[u] = min(low[u], index[v])
            else:
                work.pop()
                if work:
                    p = work[-1][0]
                    low[p] = min(low[p], low[u])
                if low[u] == index[u]:
                    while True:
                        w = stack.pop()
                        on_stack[w] = False
                        comp[w] = next_id
                        if w == u:
                            break
                    next_id += 1
    return comp


def kosaraju_scc(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Component id of each node; ids follow topological order."""
    edge_list = list(edges)
    adj = _adjacency(n, edge_list)
    radj = _adjacency(n, ((v, u) for u, v in edge_list))
    seen = [False] * n
    order: list[int] = []
    for s in range(n):
        if seen[s]:
            continue
        seen[s] = True
        work = [(s, iter(adj[s]))]
        while work:
            u, it = work[-1]
            for v in it:
                if not seen[v]:
                    seen[v] = True
                    work.append((v, iter(adj[v])))
                    break
            else:
                work.pop()
                order.append(u)
    comp = [-1] * n
    next_id = 0
    for s in reversed(order):
        if comp[s] != -1:
            continue
        comp[s] = next_id
        stack = [s]
        while stack:
            u = stack.pop()
            for v in radj[u]:
                if comp[v] == -1:
                    comp[v] = next_id
                    stack.append(v)
        next_id += 1
    return comp


def two_sat(n: int, clauses: Iterable[tuple[int, int]]) -> list[bool] | None:
    """Satisfying assignment of variables ``1..n`` or None.

    Each clause ``(a, b)`` means ``a or b``; literal ``+i`` is variable i, ``-i`` its negation.
    """

    def node(lit: int) -> int:
        if lit == 0 or abs(lit) > n:
            raise ValueError(f"literal {lit} out of range")
        return lit - 1 if lit > 0 else -lit - 1 + n

    def negate(x: int) -> int:
        return x + n if x < n else x - n

    edges = []
    for a, b in clauses:
        u, v = node(a), node(b)
        edges.append((negate(u), v))
        edges.append((negate(v), u))
    comp = tarjan_scc(2 * n, edges)
    if any(comp[i] == comp[i + n] for i in range(n)):
        return None
    return [comp[i] < comp[i + n] for i in range(n)]