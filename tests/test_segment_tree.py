import math
import random

import pytest

from algokit.segment_tree import LazySegmentTree, MaxPrefixSegmentTree, MinSegmentTree


def test_lazy_matches_list():
    rng = random.Random(3)
    values = [rng.randint(-9, 9) for _ in range(25)]
    tree = LazySegmentTree(values)
    for _ in range(300):
        l = rng.randint(0, 24)
        r = rng.randint(l, 24)
        v = rng.randint(-5, 5)
        op = rng.randint(0, 2)
        if op == 0:
            tree.add(l, r, v)
            for k in range(l, r + 1):
                values[k] += v
        elif op == 1:
            tree.assign(l, r, v)
            for k in range(l, r + 1):
                values[k] = v
        else:
            assert tree.query(l, r) == sum(values[l : r + 1])


def test_lazy_assign_zero():
    tree = LazySegmentTree([5, 5, 5, 5])
    tree.assign(0, 3, 0)
    tree.add(1, 2, 1)
    assert tree.query(0, 3) == 2


def test_lazy_bad_range():
    with pytest.raises(IndexError):
        LazySegmentTree([1, 2]).query(0, 2)


def test_min_tree():
    rng = random.Random(4)
    values = [math.inf] * 20
    tree = MinSegmentTree(20)
    for _ in range(200):
        i = rng.randrange(20)
        v = rng.randint(-100, 100)
        tree.update(i, v)
        values[i] = v
        l = rng.randint(0, 20)
        r = rng.randint(l, 20)
        assert tree.query(l, r) == min(values[l:r], default=math.inf)


def test_max_prefix():
    rng = random.Random(5)
    values = [0] * 16
    tree = MaxPrefixSegmentTree(16)
    for _ in range(200):
        i = rng.randrange(16)
        v = rng.randint(-10, 10)
        tree.update(i, v)
        values[i] = v
        l = rng.randint(0, 16)
        r = rng.randint(l, 16)
        best = max([0] + [sum(values[l:k]) for k in range(l + 1, r + 1)])
        assert tree.query(l, r) == best


def test_levels():
    tree = MaxPrefixSegmentTree(3)
    for i, v in enumerate([4, -1, 2]):
        tree.update(i, v)
    levels = tree.levels()
    assert levels[0] == [5]
    assert levels[-1] == [4, -1, 2, 0]
    assert all(sum(level) == 5 for level in levels)