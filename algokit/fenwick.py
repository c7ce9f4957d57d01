"""Binary indexed trees for prefix sums and range updates."""

from __future__ import annotations

from collections.abc import Iterable


class FenwickTree:
    """Point-update, range-sum Fenwick tree with 1-based indices."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        data = list(values)
        self._n = len(data)
        self._tree = [0] + data
        for i in range(1, self._n + 1):
            j = i + (i & -i)
            if j <= self._n:
                self._tree[j] += self._tree[i]

    def __len__(self) -> int:
        return self._n

    def _check(self, index: int, low: int) -> None:
        if not low <= index <= self._n:
            raise IndexError(f"index {index} out of range")

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the element at ``index``."""
        self._check(index, 1)
        while index <= self._n:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of elements ``1..index``."""
        self._check(index, 0)
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of elements ``left..right`` inclusive."""
        if left > right:
            raise ValueError("left must not exceed right")
        self._check(left, 1)
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class RangeFenwickTree:
    """Range-add, range-sum Fenwick tree with 1-based indices."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._size = size
        self._first = FenwickTree([0] * (size + 1))
        self._second = FenwickTree([0] * (size + 1))

    def __len__(self) -> int:
        return self._size

    def add(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every element in ``left..right``."""
        if not 1 <= left <= right <= self._size:
            raise IndexError("range out of bounds")
        self._first.add(left, delta)
        self._first.add(right + 1, -delta)
        self._second.add(left, delta * left)
        self._second.add(right + 1, -delta * (right + 1))

    def prefix_sum(self, index: int) -> int:
        """Sum of elements ``1..index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range")
        return (index + 1) * self._first.prefix_sum(index) - self._second.prefix_sum(index)

    def range_sum(self, left: int, right: int) -> int:
        """Sum of elements ``left..right`` inclusive."""
        if not 1 <= left <= right <= self._size:
            raise IndexError("range out of bounds")
        return self.prefix_sum(right) - (self.prefix_sum(left - 1) if left > 1 else 0)