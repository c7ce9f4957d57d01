"""Counting Hamiltonian paths from node 0 to node n-1 by bitmask DP."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 10**9 + 7


def count_hamiltonian_paths(n: int, edges: Iterable[tuple[int, int]], modulus: int = MOD) -> int:
    """Number of directed paths 0 -> n-1 visiting every node once, modulo ``modulus``.

    Parallel edges count as distinct routes; self-loops are ignored.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    mult = [[0] * n for _ in range(n)]
    for u, v in edges:
        if u != v:
            mult[u][v] += 1
    dp = [[0] * n for _ in range(1 << n)]
    dp[1][0] = 1 % modulus
    for mask in range(1, 1 << n, 2):
        row = dp[mask]
        for u, ways in enumerate(row):
            if not ways:
                continue
            for v, count in enumerate(mult[u]):
                if count and not mask >> v & 1:
                    nxt = dp[mask | 1 << v]
                    nxt[v] = (nxt[v] + ways * count) % modulus
    return dp[(1 << n) - 1][n - 1]