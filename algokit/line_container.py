"""Container of lines answering maximum value queries at integer points."""

from __future__ import annotations

import bisect
import math


class LineContainer:
    """Upper envelope of lines ``y = slope * x + intercept`` with integer arithmetic."""

    def __init__(self) -> None:
        self._slopes: list[int] = []
        self._intercepts: list[int] = []
        self._ends: list[float] = []

    def __len__(self) -> int:
        return len(self._slopes)

    def _erase(self, i: int) -> None:
        """Remove the line stored at position ``i``."""
        self._slopes.pop(i)
        self._intercepts.pop(i)
        self._ends.pop(i)

    def _isect(self, x: int, y: int) -> bool:
        if y == len(self._slopes):
            self._ends[x] = math.inf
            return False
        if self._slopes[x] == self._slopes[y]:
            self._ends[x] = math.inf if self._intercepts[x] > self._intercepts[y] else -math.inf
        else:
            self._ends[x] = (self._intercepts[y] - self._intercepts[x]) // (
                self._slopes[x] - self._slopes[y]
            )
        return self._ends[x] >= self._ends[y]

    def add(self, slope: int, intercept: int) -> None:
        """Insert a line."""
        y = bisect.bisect_right(self._slopes, slope)
        self._slopes.insert(y, slope)
        self._intercepts.insert(y, intercept)
        self._ends.insert(y, 0)
        while self._isect(y, y + 1):
            self._erase(y + 1)
        x = y
        if x > 0:
            x -= 1
            if self._isect(x, y):
                self._erase(y)
                self._isect(x, y)
        while True:
            y = x
            if y == 0:
                break
            x = y - 1
            if self._ends[x] < self._ends[y]:
                break
            self._erase(y)
            self._isect(x, y)

    def query(self, x: int) -> int:
        """Maximum over all lines at ``x``."""
        if not self._slopes:
            raise ValueError("query on empty container")
        i = bisect.bisect_left(self._ends, x)
        return self._slopes[i] * x + self._intercepts[i]