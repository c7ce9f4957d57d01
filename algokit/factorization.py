"""Primality testing, Pollard's rho factorisation and a linear sieve."""

from __future__ import annotations

import math
import random

_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_rng = random.Random()


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin for all 64-bit (and somewhat larger) integers."""
    if n < 2:
        return False
    for p in _BASES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _BASES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def pollard_rho(n: int) -> int:
    """A non-trivial divisor of the composite number ``n``."""
    if n < 4 or is_prime(n):
        raise ValueError(f"{n} is not composite")
    if n % 2 == 0:
        return 2
    while True:
        y, x, res = 2, _rng.randrange(1, n), 1
        size = 2
        while res == 1:
            for _ in range(size):
                x = (x * x + 1) % n
                res = math.gcd(abs(x - y), n)
                if res > 1:
                    break
            y = x
            size *= 2
        if res != n:
            return res


def factorize(n: int) -> list[int]:
    """Prime factors of ``n`` with multiplicity, in increasing order."""
    if n < 1:
        raise ValueError("n must be positive")
    factors: list[int] = []
    stack = [n] if n > 1 else []
    while stack:
        x = stack.pop()
        if is_prime(x):
            factors.append(x)
        else:
            d = pollard_rho(x)
            stack += [d, x // d]
    return sorted(factors)


class LinearSieve:
    """Least prime factors of all integers below ``limit``."""

    def __init__(self, limit: int) -> None:
        if limit < 2:
            raise ValueError("limit must be at least 2")
        self.limit = limit
        self.lpf = [1] * limit
        self.primes: list[int] = []
        for i in range(2, limit):
            if self.lpf[i] == 1:
                self.lpf[i] = i
                self.primes.append(i)
            for p in self.primes:
                if i * p >= limit:
                    break
                self.lpf[i * p] = p
                if p == self.lpf[i]:
                    break

    def factorize(self, value: int) -> list[tuple[int, int]]:
        """``(prime, exponent)`` pairs of ``value`` in increasing prime order."""
        if not 1 <= value < self.limit:
            raise ValueError("value out of sieve range")
        out: list[tuple[int, int]] = []
        while value > 1:
            d = self.lpf[value]
            count = 0
            while value % d == 0:
                value //= d
                count += 1
            out.append((d, count))
        return out