from collections import Counter

import pytest
from hypothesis import given, strategies as st

from algokit.euler import directed_euler_path, undirected_euler_path


def _check_directed(n, edges, path):
    assert path[0] == 0 and path[-1] == n - 1
    assert Counter(zip(path, path[1:])) == Counter(edges)


def _check_undirected(n, edges, path):
    assert path[0] == 0 and path[-1] == n - 1
    key = lambda e: (min(e), max(e))
    assert Counter(map(key, zip(path, path[1:]))) == Counter(map(key, edges))


def test_directed_path_found():
    edges = [(0, 1), (1, 2), (2, 0), (0, 3)]
    path = directed_euler_path(4, edges)
    _check_directed(4, edges, path)


def test_directed_unbalanced_is_impossible():
    assert directed_euler_path(3, [(0, 1), (0, 2)]) is None


def test_directed_disconnected_is_impossible():
    assert directed_euler_path(4, [(0, 3), (1, 2), (2, 1)]) is None


def test_directed_single_node_is_impossible():
    assert directed_euler_path(1, []) is None


def test_undirected_path_found():
    edges = [(0, 1), (1, 2), (2, 0), (0, 3), (3, 4), (4, 0), (0, 5)]
    path = undirected_euler_path(6, edges)
    _check_undirected(6, edges, path)


def test_undirected_wrong_parity_is_impossible():
    assert undirected_euler_path(3, [(0, 1), (1, 2), (2, 0)]) is None


def test_undirected_single_node_cycle():
    assert undirected_euler_path(1, [(0, 0)]) == [0, 0]


def test_empty_graph_rejected():
    with pytest.raises(ValueError):
        undirected_euler_path(0, [])


@given(st.lists(st.integers(1, 4), min_size=1, max_size=8))
def test_directed_chain_with_loops(mids):
    n = 6
    walk = [0] + mids + [n - 1]
    edges = list(zip(walk, walk[1:]))
    _check_directed(n, edges, directed_euler_path(n, edges))


@given(st.lists(st.integers(1, 4), min_size=1, max_size=8))
def test_undirected_chain_with_loops(mids):
    n = 6
    walk = [0] + mids + [n - 1]
    edges = list(zip(walk, walk[1:]))
    _check_undirected(n, edges, undirected_euler_path(n, edges))