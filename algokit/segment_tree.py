"""Segment trees: lazy range add/assign sums, point-update minimum, max prefix sum."""

from __future__ import annotations

import math
from collections.abc import Iterable


class LazySegmentTree:
    """Range add, range assign and range sum over 0-based inclusive ranges."""

    def __init__(self, values: Iterable[int]) -> None:
        data = list(values)
        if not data:
            raise ValueError("values must not be empty")
        self._n = len(data)
        size = 4 * self._n
        self._sum = [0] * size
        self._add = [0] * size
        self._set: list[int | None] = [None] * size
        self._len = [0] * size
        self._build(data, 0, self._n - 1, 1)

    def _build(self, data: list[int], l: int, r: int, idx: int) -> None:
        self._len[idx] = r - l + 1
        if l == r:
            self._sum[idx] = data[l]
            return
        mid = (l + r) // 2
        self._build(data, l, mid, 2 * idx)
        self._build(data, mid + 1, r, 2 * idx + 1)
        self._sum[idx] = self._sum[2 * idx] + self._sum[2 * idx + 1]

    def _apply_set(self, idx: int, value: int) -> None:
        self._sum[idx] = value * self._len[idx]
        self._set[idx] = value
        self._add[idx] = 0

    def _apply_add(self, idx: int, value: int) -> None:
        self._sum[idx] += value * self._len[idx]
        self._add[idx] += value

    def _push(self, idx: int) -> None:
        for child in (2 * idx, 2 * idx + 1):
            if self._set[idx] is not None:
                self._apply_set(child, self._set[idx])
            if self._add[idx]:
                self._apply_add(child, self._add[idx])
        self._set[idx] = None
        self._add[idx] = 0

    def _update(self, ql: int, qr: int, value: int, assign: bool, l: int, r: int, idx: int) -> None:
        if qr < l or r < ql:
            return
        if ql <= l and r <= qr:
            if assign:
                self._apply_set(idx, value)
            else:
                self._apply_add(idx, value)
            return
        self._push(idx)
        mid = (l + r) // 2
        self._update(ql, qr, value, assign, l, mid, 2 * idx)
        self._update(ql, qr, value, assign, mid + 1, r, 2 * idx + 1)
        self._sum[idx] = self._sum[2 * idx] + self._sum[2 * idx + 1]

    def _query(self, ql: int, qr: int, l: int, r: int, idx: int) -> int:
        if qr < l or r < ql:
            return 0
        if ql <= l and r <= qr:
            return self._sum[idx]
        self._push(idx)
        mid = (l + r) // 2
        return self._query(ql, qr, l, mid, 2 * idx) + self._query(ql, qr, mid + 1, r, 2 * idx + 1)

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._n:
            raise IndexError("range out of bounds")

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every element in ``left..right``."""
        self._check(left, right)
        self._update(left, right, value, False, 0, self._n - 1, 1)

    def assign(self, left: int, right: int, value: int) -> None:
        """Set every element in ``left..right`` to ``value``."""
        self._check(left, right)
        self._update(left, right, value, True, 0, self._n - 1, 1)

    def query(self, left: int, right: int) -> int:
        """Sum of ``left..right``."""
        self._check(left, right)
        return self._query(left, right, 0, self._n - 1, 1)


class MinSegmentTree:
    """Bottom-up minimum tree; queries are half-open ``[left, right)``."""

    def __init__(self, size: int) -> None:
        self._n = 1 << max(size, 1).bit_length()
        self._seg: list[float] = [math.inf] * (2 * self._n)

    def update(self, index: int, value: float) -> None:
        """Set the element at ``index``."""
        x = index + self._n
        self._seg[x] = value
        x //= 2
        while x:
            self._seg[x] = min(self._seg[2 * x], self._seg[2 * x + 1])
            x //= 2

    def query(self, left: int, right: int) -> float:
        """Minimum over ``[left, right)``; infinity when empty."""
        l, r = left + self._n, right + self._n
        result = math.inf
        while l < r:
            if l & 1:
                result = min(result, self._seg[l])
                l += 1
            if r & 1:
                r -= 1
                result = min(result, self._seg[r])
            l //= 2
            r //= 2
        return result


def _merge(x: tuple[int, int], y: tuple[int, int]) -> tuple[int, int]:
    return x[0] + y[0], max(x[1], x[0] + y[1])


class MaxPrefixSegmentTree:
    """Maximum (non-negative) prefix sum over half-open ranges."""

    def __init__(self, size: int) -> None:
        self._n = 1 << max(size, 1).bit_length()
        self._seg = [(0, 0)] * (2 * self._n)

    def update(self, index: int, value: int) -> None:
        """Set the element at ``index``."""
        x = index + self._n
        self._seg[x] = (value, max(0, value))
        x //= 2
        while x:
            self._seg[x] = _merge(self._seg[2 * x], self._seg[2 * x + 1])
            x //= 2

    def query(self, left: int, right: int) -> int:
        """Largest prefix sum of ``[left, right)``, counting the empty prefix."""
        l, r = left + self._n, right + self._n
        res_l = res_r = (0, 0)
        while l < r:
            if l & 1:
                res_l = _merge(res_l, self._seg[l])
                l += 1
            if r & 1:
                r -= 1
                res_r = _merge(self._seg[r], res_r)
            l //= 2
            r //= 2
        return _merge(res_l, res_r)[1]

    def levels(self) -> list[list[int]]:
        """Node sums level by level, root first."""
        depth = self._n.bit_length()
        return [[self._seg[j][0] for j in range(1 << (i - 1), 1 << i)] for i in range(1, depth + 1)]