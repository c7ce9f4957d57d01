"""Sparse table for static range-minimum queries."""

from __future__ import annotations

from collections.abc import Iterable


class SparseTable:
    """Range minimum over a fixed sequence, 0-based inclusive ranges."""

    def __init__(self, values: Iterable[int]) -> None:
        base = list(values)
        self._n = len(base)
        self._table = [base]
        k = 1
        while (1 << k) <= self._n:
            prev = self._table[-1]
            half = 1 << (k - 1)
            self._table.append([min(prev[i], prev[i + half]) for i in range(self._n - (1 << k) + 1)])
            k += 1

    def query(self, left: int, right: int) -> int:
        """Minimum of ``left..right``."""
        if not 0 <= left <= right < self._n:
            raise IndexError("range out of bounds")
        lg = (right - left + 1).bit_length() - 1
        row = self._table[lg]
        return min(row[left], row[right - (1 << lg) + 1])