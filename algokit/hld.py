"""Heavy-light decomposition with path assignment, path maximum and path sum."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator


class _Decomposition:
    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int) -> None:
        if n < 1:
            raise ValueError("tree needs at least one node")
        adj: list[list[int]] = [[] for _ in range(n)]
        for a, b in edges:
            adj[a].append(b)
            adj[b].append(a)
        self.parent = [-1] * n
        self.depth = [0] * n
        order = [root]
        seen = [False] * n
        seen[root] = True
        for u in order:
            for v in adj[u]:
                if not seen[v]:
                    seen[v] = True
                    self.parent[v] = u
                    self.depth[v] = self.depth[u] + 1
                    order.append(v)
        sizes = [1] * n
        heavy = [-1] * n
        for u in reversed(order):
            p = self.parent[u]
            if p >= 0:
                sizes[p] += sizes[u]
        for u in order:
            best = 0
            for v in adj[u]:
                if v != self.parent[u] and sizes[v] > best:
                    best, heavy[u] = sizes[v], v
        self.head = [0] * n
        self.pos = [0] * n
        counter = 0
        stack = [root]
        while stack:
            h = stack.pop()
            u = h
            while u != -1:
                self.head[u] = h
                self.pos[u] = counter
                counter += 1
                for v in adj[u]:
                    if v != self.parent[u] and v != heavy[u]:
                        stack.append(v)
                u = heavy[u]

    def segments(self, u: int, v: int) -> Iterator[tuple[int, int]]:
        head, depth, pos, parent = self.head, self.depth, self.pos, self.parent
        while head[u] != head[v]:
            if depth[head[u]] < depth[head[v]]:
                u, v = v, u
            yield pos[head[u]], pos[u]
            u = parent[head[u]]
        if pos[u] > pos[v]:
            u, v = v, u
        yield pos[u], pos[v]


class PathAssignMax:
    """Tree whose node values start at 0: assign along a path, query path maximum."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        self._hld = _Decomposition(n, edges, root)
        self._n = n
        self._max = [0] * (4 * n)
        self._tag: list[int | None] = [None] * (4 * n)

    def _push(self, idx: int) -> None:
        tag = self._tag[idx]
        if tag is not None:
            for child in (2 * idx, 2 * idx + 1):
                self._max[child] = tag
                self._tag[child] = tag
            self._tag[idx] = None

    def _modify(self, ml: int, mr: int, value: int, idx: int, l: int, r: int) -> None:
        if ml <= l and r <= mr:
            self._max[idx] = value
            self._tag[idx] = value
            return
        self._push(idx)
        mid = (l + r) // 2
        if ml <= mid:
            self._modify(ml, mr, value, 2 * idx, l, mid)
        if mr > mid:
            self._modify(ml, mr, value, 2 * idx + 1, mid + 1, r)
        self._max[idx] = max(self._max[2 * idx], self._max[2 * idx + 1])

    def _query(self, ml: int, mr: int, idx: int, l: int, r: int) -> int:
        if ml <= l and r <= mr:
            return self._max[idx]
        self._push(idx)
        mid = (l + r) // 2
        if mr <= mid:
            return self._query(ml, mr, 2 * idx, l, mid)
        if ml > mid:
            return self._query(ml, mr, 2 * idx + 1, mid + 1, r)
        return max(self._query(ml, mr, 2 * idx, l, mid), self._query(ml, mr, 2 * idx + 1, mid + 1, r))

    def assign(self, u: int, v: int, value: int) -> None:
        """Set every node on the path ``u``..``v`` to ``value``."""
        for lo, hi in self._hld.segments(u, v):
            self._modify(lo, hi, value, 1, 0, self._n - 1)

    def path_max(self, u: int, v: int) -> int:
        """Largest value on the path ``u``..``v``."""
        return max(self._query(lo, hi, 1, 0, self._n - 1) for lo, hi in self._hld.segments(u, v))


class PathSumMax:
    """Tree with node values: point update, path maximum and path sum."""

    def __init__(
        self, n: int, edges: Iterable[tuple[int, int]], values: Iterable[int], root: int = 0
    ) -> None:
        self._hld = _Decomposition(n, edges, root)
        self._size = 1 << n.bit_length()
        self._max: list[float] = [-math.inf] * (2 * self._size)
        self._sum = [0] * (2 * self._size)
        vals = list(values)
        if len(vals) != n:
            raise ValueError("need one value per node")
        for node, value in enumerate(vals):
            self.update(node, value)

    def update(self, node: int, value: int) -> None:
        """Set the value of ``node``."""
        x = self._hld.pos[node] + self._size
        self._max[x] = self._sum[x] = value
        x //= 2
        while x:
            self._max[x] = max(self._max[2 * x], self._max[2 * x + 1])
            self._sum[x] = self._sum[2 * x] + self._sum[2 * x + 1]
            x //= 2

    def _range(self, lo: int, hi: int) -> Iterator[int]:
        l, r = lo + self._size, hi + self._size + 1
        while l < r:
            if l & 1:
                yield l
                l += 1
            if r & 1:
                r -= 1
                yield r
            l //= 2
            r //= 2

    def _cells(self, u: int, v: int) -> list[int]:
        return [c for lo, hi in self._hld.segments(u, v) for c in self._range(lo, hi)]

    def path_max(self, u: int, v: int) -> int:
        """Largest value on the path ``u``..``v``."""
        return max(self._max[c] for c in self._cells(u, v))

    def path_sum(self, u: int, v: int) -> int:
        """Sum of values on the path ``u``..``v``."""
        return sum(self._sum[c] for c in self._cells(u, v))