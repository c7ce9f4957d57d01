"""Number-theoretic transform modulo 998244353 and formal power series operations."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 998244353
G = 3
_INV2 = (MOD + 1) // 2


def _pad(a: Sequence[int], k: int) -> list[int]:
    out = [x % MOD for x in a[:k]]
    return out + [0] * (k - len(out))


def ntt(values: Sequence[int], inverse: bool = False) -> list[int]:
    """Transform of a sequence whose length is a power of two."""
    a = [v % MOD for v in values]
    n = len(a)
    if n == 0 or n & (n - 1):
        raise ValueError("length must be a power of two")
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit
        if i < j:
            a[i], a[j] = a[j], a[i]
    length = 2
    while length <= n:
        half = length // 2
        w = pow(G, (MOD - 1) // length, MOD)
        if inverse:
            w = pow(w, MOD - 2, MOD)
        roots = [1] * half
        for k in range(1, half):
            roots[k] = roots[k - 1] * w % MOD
        for start in range(0, n, length):
            for k, r in enumerate(roots):
                u = a[start + k]
                t = a[start + k + half] * r % MOD
                a[start + k] = (u + t) % MOD
                a[start + k + half] = (u - t) % MOD
        length <<= 1
    if inverse:
        inv_n = pow(n, MOD - 2, MOD)
        a = [x * inv_n % MOD for x in a]
    return a


def convolve(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Product of two polynomials modulo MOD."""
    if not a or not b:
        return []
    total = len(a) + len(b) - 1
    n = 1
    while n < total:
        n <<= 1
    fa, fb = ntt(_pad(a, n)), ntt(_pad(b, n))
    return ntt([x * y % MOD for x, y in zip(fa, fb)], inverse=True)[:total]


def _check_m(m: int) -> None:
    if m < 1:
        raise ValueError("m must be positive")


def poly_inverse(a: Sequence[int], m: int) -> list[int]:
    """First ``m`` coefficients of ``1 / a``."""
    _check_m(m)
    if not a or a[0] % MOD == 0:
        raise ValueError("constant term must be non-zero")
    b = [pow(a[0], MOD - 2, MOD)]
    k = 1
    while k < m:
        k *= 2
        fb = _pad(convolve(_pad(a, k), b), k)
        t = [(-x) % MOD for x in fb]
        t[0] = (t[0] + 2) % MOD
        b = _pad(convolve(b, t), k)
    return _pad(b, m)


def poly_sqrt(a: Sequence[int], m: int) -> list[int]:
    """First ``m`` coefficients of the square root of ``a`` with constant term 1."""
    _check_m(m)
    if not a or a[0] % MOD != 1:
        raise ValueError("constant term must be 1")
    b = [1]
    k = 1
    while k < m:
        k *= 2
        t = _pad(convolve(_pad(a, k), poly_inverse(b, k)), k)
        b = [(x + y) * _INV2 % MOD for x, y in zip(_pad(b, k), t)]
    return _pad(b, m)


def poly_derivative(a: Sequence[int]) -> list[int]:
    """Derivative, keeping the input length (top coefficient becomes 0)."""
    if not a:
        return []
    return [a[i] * i % MOD for i in range(1, len(a))] + [0]


def poly_integral(a: Sequence[int]) -> list[int]:
    """Integral with zero constant, keeping the input length."""
    if not a:
        return []
    return [0] + [a[i - 1] * pow(i, MOD - 2, MOD) % MOD for i in range(1, len(a))]


def poly_ln(a: Sequence[int], m: int) -> list[int]:
    """First ``m`` coefficients of ``ln(a)`` for ``a`` with constant term 1."""
    _check_m(m)
    if not a or a[0] % MOD != 1:
        raise ValueError("constant term must be 1")
    d = poly_derivative(_pad(a, m))
    prod = _pad(convolve(d, poly_inverse(a, m)), m)
    return poly_integral(prod)


def poly_exp(a: Sequence[int], m: int) -> list[int]:
    """First ``m`` coefficients of ``exp(a)`` for ``a`` with constant term 0."""
    _check_m(m)
    if a and a[0] % MOD != 0:
        raise ValueError("constant term must be 0")
    b = [1]
    k = 1
    while k < m:
        k *= 2
        ln_b = poly_ln(b, k)
        t = [(x - y) % MOD for x, y in zip(_pad(a, k), ln_b)]
        t[0] = (t[0] + 1) % MOD
        b = _pad(convolve(b, t), k)
    return _pad(b, m)