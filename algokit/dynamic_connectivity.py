"""Offline dynamic connectivity: component counts under edge insertions and removals."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable


class RollbackDSU:
    """Union by size without path compression, so unions can be undone."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size
        self._history: list[tuple[int, int, int]] = []

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        while self._parent[x] != x:
            x = self._parent[x]
        return x

    def union(self, x: int, y: int) -> bool:
        """Join two sets; False if already joined (nothing recorded)."""
        a, b = self.find(x), self.find(y)
        if a == b:
            return False
        if self._size[a] > self._size[b]:
            a, b = b, a
        self._history.append((a, b, self._size[b]))
        self._parent[a] = b
        self._size[b] += self._size[a]
        return True

    def rollback(self) -> None:
        """Undo the most recent successful union."""
        if not self._history:
            raise IndexError("nothing to roll back")
        a, b, s = self._history.pop()
        self._parent[a] = a
        self._size[b] = s


def count_components(
    n: int,
    edges: Iterable[tuple[int, int]],
    operations: Iterable[tuple[int, int, int]],
) -> list[int]:
    """Component count at time 0 and after each operation.

    Operations are ``(1, a, b)`` to add an edge and ``(2, a, b)`` to remove one.
    """
    ops = list(operations)
    q = len(ops) + 1
    alive: dict[tuple[int, int], list[int]] = defaultdict(list)
    for a, b in edges:
        alive[(min(a, b), max(a, b))].append(0)
    buckets: list[list[tuple[int, int]]] = [[] for _ in range(4 * q + 4)]

    def insert(ql: int, qr: int, edge: tuple[int, int], i: int, l: int, r: int) -> None:
        if qr <= l or r <= ql:
            return
        if ql <= l and r <= qr:
            buckets[i].append(edge)
            return
        m = (l + r) // 2
        insert(ql, qr, edge, 2 * i, l, m)
        insert(ql, qr, edge, 2 * i + 1, m, r)

    for t, (op, a, b) in enumerate(ops, start=1):
        key = (min(a, b), max(a, b))
        if op == 1:
            alive[key].append(t)
        elif op == 2:
            if not alive.get(key):
                raise ValueError(f"edge {key} is not present at time {t}")
            insert(alive[key].pop(), t, key, 1, 0, q)
        else:
            raise ValueError(f"unknown operation {op}")
    for key, starts in alive.items():
        for start in starts:
            insert(start, q, key, 1, 0, q)

    dsu = RollbackDSU(n)
    answer = [0] * q
    components = n

    def traverse(i: int, l: int, r: int) -> None:
        nonlocal components
        done = 0
        for a, b in buckets[i]:
            if dsu.union(a, b):
                done += 1
                components -= 1
        if r - l == 1:
            answer[l] = components
        else:
            m = (l + r) // 2
            traverse(2 * i, l, m)
            traverse(2 * i + 1, m, r)
        for _ in range(done):
            dsu.rollback()
        components += done

    traverse(1, 0, q)
    return answer