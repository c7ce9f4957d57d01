"""Knuth-Morris-Pratt prefix function and substring counting."""

from __future__ import annotations

from collections.abc import Sequence


def prefix_function(pattern: Sequence) -> list[int]:
    """Length of the longest proper border of each prefix of ``pattern``."""
    f = [0] * len(pattern)
    ptr = 0
    for i in range(1, len(pattern)):
        while ptr and pattern[i] != pattern[ptr]:
            ptr = f[ptr - 1]
        if pattern[i] == pattern[ptr]:
            ptr += 1
        f[i] = ptr
    return f


def count_occurrences(text: Sequence, pattern: Sequence) -> int:
    """Number of (possibly overlapping) occurrences of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    f = prefix_function(pattern)
    m = len(pattern)
    count = pi = 0
    for c in text:
        while pi and c != pattern[pi]:
            pi = f[pi - 1]
        if c == pattern[pi]:
            pi += 1
        if pi == m:
            count += 1
            pi = f[pi - 1]
    return count