import random

from algokit.hld import PathAssignMax, PathSumMax


def _random_tree(rng, n):
    return [(rng.randrange(i), i) for i in range(1, n)]


def _path(n, edges, u, v):
    parent = [-1] * n
    adj = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    order, seen = [0], {0}
    for x in order:
        for y in adj[x]:
            if y not in seen:
                seen.add(y)
                parent[y] = x
                order.append(y)
    up = []
    x = u
    while x != -1:
        up.append(x)
        x = parent[x]
    ancestors = set(up)
    down = []
    y = v
    while y not in ancestors:
        down.append(y)
        y = parent[y]
    return up[: up.index(y) + 1] + down


def test_path_sum_max():
    rng = random.Random(11)
    n = 40
    edges = _random_tree(rng, n)
    values = [rng.randint(-50, 50) for _ in range(n)]
    tree = PathSumMax(n, edges, values, 0)
    for _ in range(200):
        if rng.random() < 0.3:
            node = rng.randrange(n)
            values[node] = rng.randint(-50, 50)
            tree.update(node, values[node])
        u, v = rng.randrange(n), rng.randrange(n)
        nodes = _path(n, edges, u, v)
        assert tree.path_sum(u, v) == sum(values[x] for x in nodes)
        assert tree.path_max(u, v) == max(values[x] for x in nodes)


def test_path_assign_max():
    rng = random.Random(12)
    n = 35
    edges = _random_tree(rng, n)
    values = [0] * n
    tree = PathAssignMax(n, edges, 0)
    for _ in range(200):
        u, v = rng.randrange(n), rng.randrange(n)
        if rng.random() < 0.5:
            val = rng.randint(-30, 30)
            tree.assign(u, v, val)
            for x in _path(n, edges, u, v):
                values[x] = val
        else:
            assert tree.path_max(u, v) == max(values[x] for x in _path(n, edges, u, v))


def test_single_node():
    tree = PathSumMax(1, [], [7], 0)
    assert tree.path_sum(0, 0) == 7