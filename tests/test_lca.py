import pytest
from hypothesis import given, strategies as st

from algokit.lca import LowestCommonAncestor


@st.composite
def trees(draw):
    n = draw(st.integers(1, 30))
    parents = [draw(st.integers(0, i - 1)) for i in range(1, n)]
    return n, parents


def _ancestors(parents, u):
    chain = [u]
    while u:
        u = parents[u - 1]
        chain.append(u)
    return chain


def test_path_tree():
    tree = LowestCommonAncestor(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    assert tree.lca(4, 2) == 2
    assert tree.depth(4) == 4


def test_other_root():
    tree = LowestCommonAncestor(3, [(0, 1), (0, 2)], root=1)
    assert tree.lca(0, 2) == 0
    assert tree.depth(2) == 2


def test_disconnected_rejected():
    with pytest.raises(ValueError):
        LowestCommonAncestor(3, [(0, 1)])


@given(trees(), st.data())
def test_matches_naive_walk(tree, data):
    n, parents = tree
    lca = LowestCommonAncestor(n, [(i, p) for i, p in enumerate(parents, start=1)])
    u = data.draw(st.integers(0, n - 1))
    v = data.draw(st.integers(0, n - 1))
    up_u, up_v = _ancestors(parents, u), _ancestors(parents, v)
    expected = next(a for a in up_u if a in up_v)
    assert lca.lca(u, v) == expected
    assert lca.depth(u) == len(up_u) - 1