"""Li Chao tree for maximum of lines at integer points."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """The line ``y = slope * x + intercept``."""

    slope: float
    intercept: float

    def __call__(self, x: float) -> float:
        if self.intercept == -math.inf:
            return -math.inf
        return self.slope * x + self.intercept


_EMPTY = Line(0, -math.inf)


class LiChaoTree:
    """Maximum of inserted lines over the integer domain ``[0, size)``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._lines = [_EMPTY] * (4 * size + 4)

    def insert(self, slope: float, intercept: float) -> None:
        """Add a line."""
        x = Line(slope, intercept)
        i, l, r = 1, 0, self._size
        while r - l > 1:
            cur = self._lines[i]
            a, b = (cur, x) if cur.slope >= x.slope else (x, cur)
            m = (l + r) // 2
            if a(m) > b(m):
                self._lines[i], x = a, b
                i, r = 2 * i, m
            else:
                self._lines[i], x = b, a
                i, l = 2 * i + 1, m
        if x(l) > self._lines[i](l):
            self._lines[i] = x

    def query(self, x: int) -> float:
        """Largest value of any line at ``x``; minus infinity if none."""
        if not 0 <= x < self._size:
            raise IndexError(f"x={x} outside the domain")
        best = -math.inf
        i, l, r = 1, 0, self._size
        while True:
            best = max(best, self._lines[i](x))
            if r - l == 1:
                return best
            m = (l + r) // 2
            if x < m:
                i, r = 2 * i, m
            else:
                i, l = 2 * i + 1, m