"""Gauss-Jordan elimination over the integers modulo a prime."""

from __future__ import annotations

from collections.abc import Sequence

from algokit.modular import MOD, mod_inverse


def gauss_mod(matrix: Sequence[Sequence[int]], modulus: int = MOD) -> list[list[int]]:
    """Reduced row echelon form of an ``n x (n+1)`` augmented matrix modulo ``modulus``."""
    v = [[x % modulus for x in row] for row in matrix]
    n = len(v)
    if any(len(row) != n + 1 for row in v):
        raise ValueError("matrix must be n x (n+1)")
    r = 0
    for i in range(n):
        pivot = next((j for j in range(r, n) if v[j][i]), None)
        if pivot is None:
            continue
        v[pivot], v[r] = v[r], v[pivot]
        inv = mod_inverse(v[r][i], modulus)
        v[r] = [x * inv % modulus for x in v[r]]
        for j, row in enumerate(v):
            if j == r or not row[i]:
                continue
            t = row[i]
            v[j] = [(x - y * t) % modulus for x, y in zip(row, v[r])]
        r += 1
    return v