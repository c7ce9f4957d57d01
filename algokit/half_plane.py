"""Intersection of half-planes, bounded by a large box."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

EPS = 1e-9
INF = 1e9


@dataclass(frozen=True)
class Point:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        return self.x * other.y - self.y * other.x


class HalfPlane:
    """The half-plane to the left of the directed line from ``a`` to ``b``."""

    def __init__(self, a: Point, b: Point) -> None:
        self.p = a
        self.pq = b - a
        self.angle = math.atan2(self.pq.y, self.pq.x)

    def out(self, point: Point) -> bool:
        """True if ``point`` lies strictly outside."""
        return self.pq.cross(point - self.p) < -EPS

    def __lt__(self, other: HalfPlane) -> bool:
        return self.angle < other.angle


def intersect(s: HalfPlane, t: HalfPlane) -> Point:
    """Intersection point of the boundary lines of ``s`` and ``t``."""
    alpha = (t.p - s.p).cross(t.pq) / s.pq.cross(t.pq)
    return s.p + s.pq * alpha


def half_plane_intersection(planes: Iterable[HalfPlane]) -> list[Point]:
    """Vertices, counter-clockwise, of the intersection; empty if it is empty or degenerate."""
    box = [Point(INF, INF), Point(-INF, INF), Point(-INF, -INF), Point(INF, -INF)]
    hs = list(planes) + [HalfPlane(box[i], box[(i + 1) % 4]) for i in range(4)]
    hs.sort()
    dq: deque[HalfPlane] = deque()
    for h in hs:
        while len(dq) > 1 and h.out(intersect(dq[-1], dq[-2])):
            dq.pop()
        while len(dq) > 1 and h.out(intersect(dq[0], dq[1])):
            dq.popleft()
        if dq and abs(h.pq.cross(dq[-1].pq)) < EPS:
            if h.pq.dot(dq[-1].pq) < 0:
                return []
            if h.out(dq[-1].p):
                dq.pop()
            else:
                continue
        dq.append(h)
    while len(dq) > 2 and dq[0].out(intersect(dq[-1], dq[-2])):
        dq.pop()
    while len(dq) > 2 and dq[-1].out(intersect(dq[0], dq[1])):
        dq.popleft()
    if len(dq) < 3:
        return []
    items = list(dq)
    return [intersect(items[i], items[(i + 1) % len(items)]) for i in range(len(items))]