"""Modular exponentiation, extended Euclid, modular inverses and matrix powers."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 10**9 + 7

Matrix = list[list[int]]


def power_mod(base: int, exponent: int, modulus: int = MOD) -> int:
    """``base ** exponent % modulus`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)`` for non-negative inputs."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def bezout(a: int, b: int, c: int) -> tuple[int, int] | None:
    """Some ``(x, y)`` with ``a*x + b*y == c``, or None if no integer solution exists."""
    g, x, y = ext_gcd(abs(a), abs(b))
    if g == 0:
        return (0, 0) if c == 0 else None
    if c % g:
        return None
    k = c // g
    return x * k * (-1 if a < 0 else 1), y * k * (-1 if b < 0 else 1)


def mod_inverse(a: int, p: int) -> int:
    """Inverse of ``a`` modulo ``p``; raises ValueError if it does not exist."""
    if p <= 1:
        raise ValueError("modulus must exceed 1")
    solution = bezout(a % p, -p, 1)
    if solution is None:
        raise ValueError(f"{a} has no inverse modulo {p}")
    return solution[0] % p


def mat_mul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], modulus: int = MOD) -> Matrix:
    """Product of two matrices modulo ``modulus``."""
    if not a or not b or len(a[0]) != len(b):
        raise ValueError("matrix dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % modulus for col in columns] for row in a]


def mat_pow(matrix: Sequence[Sequence[int]], exponent: int, modulus: int = MOD) -> Matrix:
    """``matrix ** exponent`` modulo ``modulus``."""
    n = len(matrix)
    if n == 0 or any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = [[int(i == j) % modulus for j in range(n)] for i in range(n)]
    base = [[x % modulus for x in row] for row in matrix]
    while exponent > 0:
        if exponent & 1:
            result = mat_mul(result, base, modulus)
        base = mat_mul(base, base, modulus)
        exponent >>= 1
    return result