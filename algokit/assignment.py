"""Maximum-weight perfect matching in a complete bipartite graph (Kuhn-Munkres)."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence


def kuhn_munkres(weights: Sequence[Sequence[float]]) -> tuple[float, list[int]]:
    """Best assignment of rows to columns of a square weight matrix.

    Returns the total weight and, for each row, the column it is matched to.
    """
    g = [list(row) for row in weights]
    n = len(g)
    if any(len(row) != n for row in g):
        raise ValueError("weight matrix must be square")
    if n == 0:
        return 0, []

    match_x = [-1] * n
    match_y = [-1] * n
    pred = [-1] * n
    lx = [max(0, max(row)) for row in g]
    ly = [0] * n

    def augment(y: int) -> None:
        while y != -1:
            x = pred[y]
            z = match_x[x]
            match_y[y] = x
            match_x[x] = y
            y = z

    def search(start: int) -> None:
        slack = [math.inf] * n
        vx = [False] * n
        vy = [False] * n
        queue = deque([start])
        while True:
            while queue:
                x = queue.popleft()
                vx[x] = True
                for y in range(n):
                    if vy[y]:
                        continue
                    t = lx[x] + ly[y] - g[x][y]
                    if t == 0:
                        pred[y] = x
                        if match_y[y] == -1:
                            augment(y)
                            return
                        vy[y] = True
                        queue.append(match_y[y])
                    elif slack[y] > t:
                        pred[y] = x
                        slack[y] = t
            cut = min(slack[y] for y in range(n) if not vy[y])
            for j in range(n):
                if vx[j]:
                    lx[j] -= cut
                if vy[j]:
                    ly[j] += cut
                else:
                    slack[j] -= cut
            for y in range(n):
                if not vy[y] and slack[y] == 0:
                    if match_y[y] == -1:
                        augment(y)
                        return
                    vy[y] = True
                    queue.append(match_y[y])

    for x in range(n):
        search(x)
    total = sum(g[match_y[y]][y] for y in range(n))
    return total, match_x