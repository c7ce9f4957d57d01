"""Complex fast Fourier transform and integer polynomial multiplication."""

from __future__ import annotations

import cmath
from collections.abc import Sequence


def fft(values: Sequence[complex], inverse: bool = False) -> list[complex]:
    """Discrete Fourier transform of a sequence whose length is a power of two."""
    a = [complex(v) for v in values]
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
    sign = -1 if inverse else 1
    length = 2
    while length <= n:
        half = length // 2
        roots = [cmath.exp(sign * 2j * cmath.pi * k / length) for k in range(half)]
        for start in range(0, n, length):
            for k, w in enumerate(roots):
                u = a[start + k]
                t = w * a[start + k + half]
                a[start + k] = u + t
                a[start + k + half] = u - t
        length <<= 1
    if inverse:
        a = [x / n for x in a]
    return a


def multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Coefficients of the product of two integer polynomials."""
    if not a or not b:
        return []
    total = len(a) + len(b) - 1
    n = 1
    while n < total:
        n <<= 1
    packed = []
    for i in range(n):
        x = a[i] if i < len(a) else 0
        y = b[i] if i < len(b) else 0
        packed.append(complex(x + y, x - y))
    spectrum = [z * z for z in fft(packed)]
    result = fft(spectrum, inverse=True)
    return [round(result[i].real / 4) for i in range(total)]