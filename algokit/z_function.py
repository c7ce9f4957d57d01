"""Z-function and substring counting built on it."""

from __future__ import annotations

from collections.abc import Sequence


def z_function(text: Sequence) -> list[int]:
    """``z[i]`` is the longest common prefix of ``text`` and ``text[i:]``; ``z[0] == len(text)``."""
    n = len(text)
    if n == 0:
        return []
    z = [0] * n
    z[0] = n
    l = r = 0
    for i in range(1, n):
        if i <= r:
            z[i] = min(z[i - l], r - i + 1)
        while i + z[i] < n and text[z[i]] == text[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > r:
            l, r = i, i + z[i] - 1
    return z


_SEPARATOR = object()


def count_occurrences(text: Sequence, pattern: Sequence) -> int:
    """Number of (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    combined = [*pattern, _SEPARATOR, *text]
    m = len(pattern)
    return sum(1 for value in z_function(combined)[m + 1:] if value == m)