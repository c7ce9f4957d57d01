"""Aho-Corasick automaton reporting the longest pattern ending at each text position."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

_LOWERCASE = "abcdefghijklmnopqrstuvwxyz"


class AhoCorasick:
    """Multi-pattern matcher over a fixed alphabet."""

    def __init__(self, alphabet: Iterable[str] = _LOWERCASE) -> None:
        letters = list(alphabet)
        if not letters:
            raise ValueError("alphabet must not be empty")
        if len(set(letters)) != len(letters):
            raise ValueError("alphabet must not repeat characters")
        self._index = {c: i for i, c in enumerate(letters)}
        self._width = len(letters)
        self._goto: list[list[int]] = [[0] * self._width]
        self._fail = [0]
        self._longest = [0]
        self._built = False

    def _code(self, c: str) -> int:
        try:
            return self._index[c]
        except KeyError:
            raise ValueError(f"character {c!r} is not in the alphabet") from None

    def insert(self, pattern: str) -> None:
        """Add a pattern; only allowed before the automaton is built."""
        if self._built:
            raise RuntimeError("cannot insert after build")
        if not pattern:
            raise ValueError("pattern must not be empty")
        state = 0
        for c in pattern:
            idx = self._code(c)
            nxt = self._goto[state][idx]
            if not nxt:
                nxt = len(self._goto)
                self._goto.append([0] * self._width)
                self._fail.append(0)
                self._longest.append(0)
                self._goto[state][idx] = nxt
            state = nxt
        self._longest[state] = len(pattern)

    def build(self) -> None:
        """Compute failure links and complete the transition table."""
        if self._built:
            return
        goto, fail, longest = self._goto, self._fail, self._longest
        queue = deque(child for child in goto[0] if child)
        while queue:
            now = queue.popleft()
            row = goto[now]
            fallback = goto[fail[now]]
            for i in range(self._width):
                to = row[i]
                if not to:
                    row[i] = fallback[i]
                    continue
                fail[to] = fallback[i]
                longest[to] = max(longest[to], longest[fail[to]])
                queue.append(to)
        self._built = True

    def match(self, text: str) -> list[tuple[int, int]]:
        """``(end_index, length)`` of the longest pattern ending at each matching position.

        Characters outside the alphabet reset the automaton to its start.
        """
        self.build()
        out: list[tuple[int, int]] = []
        state = 0
        for i, c in enumerate(text):
            idx = self._index.get(c)
            state = self._goto[state][idx] if idx is not None else 0
            if self._longest[state]:
                out.append((i, self._longest[state]))
        return out