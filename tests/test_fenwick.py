import random

import pytest

from algokit.fenwick import FenwickTree, RangeFenwickTree


def test_matches_list_sums():
    rng = random.Random(1)
    values = [rng.randint(-50, 50) for _ in range(40)]
    tree = FenwickTree(values)
    for _ in range(200):
        i = rng.randint(1, 40)
        d = rng.randint(-10, 10)
        tree.add(i, d)
        values[i - 1] += d
        l = rng.randint(1, 40)
        r = rng.randint(l, 40)
        assert tree.range_sum(l, r) == sum(values[l - 1 : r])
        assert tree.prefix_sum(r) == sum(values[:r])


def test_out_of_range():
    tree = FenwickTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.add(4, 1)
    with pytest.raises(IndexError):
        tree.add(0, 1)


def test_range_tree_matches_list():
    rng = random.Random(2)
    size = 30
    values = [0] * size
    tree = RangeFenwickTree(size)
    for _ in range(200):
        l = rng.randint(1, size)
        r = rng.randint(l, size)
        d = rng.randint(-20, 20)
        tree.add(l, r, d)
        for k in range(l - 1, r):
            values[k] += d
        a = rng.randint(1, size)
        b = rng.randint(a, size)
        assert tree.range_sum(a, b) == sum(values[a - 1 : b])


def test_range_tree_bad_range():
    tree = RangeFenwickTree(5)
    with pytest.raises(IndexError):
        tree.add(3, 6, 1)