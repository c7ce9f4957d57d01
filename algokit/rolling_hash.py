"""Polynomial rolling hash of lowercase strings with substring queries."""

from __future__ import annotations

BASE = 27
DEFAULT_MODULUS = 10**9 + 7


def _code(c: str) -> int:
    return ord(c) - ord("a") + 1


class RollingHash:
    """Prefix hashes of ``text`` under base 27, letters mapped ``a=1 .. z=26``."""

    def __init__(self, text: str, modulus: int = DEFAULT_MODULUS) -> None:
        if not text:
            raise ValueError("text must not be empty")
        if modulus < 1:
            raise ValueError("modulus must be positive")
        self.text = text
        self.modulus = modulus
        self._powers = [1 % modulus]
        self._prefix: list[int] = []
        h = 0
        for c in text:
            h = (h * BASE + _code(c)) % modulus
            self._prefix.append(h)
            self._powers.append(self._powers[-1] * BASE % modulus)

    def query(self, left: int, right: int) -> int:
        """Hash of ``text[left..right]`` inclusive."""
        if not 0 <= left <= right < len(self.text):
            raise IndexError("range out of bounds")
        res = self._prefix[right]
        if left:
            res -= self._prefix[left - 1] * self._powers[right - left + 1]
        return res % self.modulus