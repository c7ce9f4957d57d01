"""Suffix arrays by prefix doubling, with LCP arrays by Kasai's algorithm."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def _counting_sort(items: Sequence[int], key: Callable[[int], int], buckets: int) -> list[int]:
    counts = [0] * (buckets + 1)
    for item in items:
        counts[key(item) + 1] += 1
    for i in range(buckets):
        counts[i + 1] += counts[i]
    out = [0] * len(items)
    for item in items:
        k = key(item)
        out[counts[k]] = item
        counts[k] += 1
    return out


def _codes(text: str) -> list[int]:
    # 0 acts as a sentinel smaller than every character
    return [ord(c) + 1 for c in text] + [0]


def _ranks_from(order: list[int], same: Callable[[int, int], bool]) -> tuple[list[int], bool]:
    rank = [0] * len(order)
    distinct = True
    for prev, cur in zip(order, order[1:]):
        if same(prev, cur):
            rank[cur] = rank[prev]
            distinct = False
        else:
            rank[cur] = rank[prev] + 1
    return rank, distinct


def _kasai(s: list[int], order: list[int], rank: list[int]) -> list[int]:
    n = len(s)
    lcp = [0] * n
    k = 0
    for i in range(n):
        pi = rank[i]
        if pi == 0:
            k = 0
            continue
        j = order[pi - 1]
        while i + k < n and j + k < n and s[i + k] == s[j + k]:
            k += 1
        lcp[pi] = k
        k = max(k - 1, 0)
    return lcp


class SuffixArray:
    """Sorted suffixes of ``text`` with ranks and adjacent LCP lengths.

    ``suffixes[i]`` is the start of the i-th smallest suffix, ``rank[p]`` the
    position of the suffix starting at ``p``, and ``lcp[i]`` the common-prefix
    length of ``suffixes[i]`` and ``suffixes[i-1]`` (``lcp[0] == 0``).
    """

    def __init__(self, text: str) -> None:
        self.text = text
        s = _codes(text)
        n = len(s)
        order = sorted(range(n), key=s.__getitem__)
        rank, done = _ranks_from(order, lambda a, b: s[a] == s[b])
        shift = 1
        while not done and shift < n:
            pair = [(rank[i], rank[(i + shift) % n]) for i in range(n)]
            order = _counting_sort(range(n), lambda i: pair[i][1], n)
            order = _counting_sort(order, lambda i: pair[i][0], n)
            rank, done = _ranks_from(order, lambda a, b: pair[a] == pair[b])
            shift *= 2
        lcp = _kasai(s, order, rank)
        self.suffixes = order[1:]
        self.rank = [r - 1 for r in rank[:-1]]
        self.lcp = lcp[1:]


def suffix_array_doubling(text: str) -> tuple[list[int], list[int]]:
    """Sorted suffix starts and adjacent LCP lengths, by cyclic-shift counting sort."""
    s = _codes(text)
    n = len(s)
    pos = sorted(range(n), key=s.__getitem__)
    rank, _ = _ranks_from(pos, lambda a, b: s[a] == s[b])
    shift = 1
    while shift < n:
        pos = [(p - shift) % n for p in pos]
        pos = _counting_sort(pos, rank.__getitem__, n)
        old = rank
        rank, _ = _ranks_from(
            pos,
            lambda a, b: (old[a], old[(a + shift) % n]) == (old[b], old[(b + shift) % n]),
        )
        shift *= 2
    lcp = _kasai(s, pos, rank)
    return pos[1:], lcp[1:]