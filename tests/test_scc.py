import itertools

import pytest
from hypothesis import given, strategies as st

from algokit.scc import kosaraju_scc, tarjan_scc, two_sat


def _reach(n, edges):
    reach = [{v} for v in range(n)]
    changed = True
    while changed:
        changed = False
        for u, v in edges:
            if not reach[v] <= reach[u]:
                reach[u] |= reach[v]
                changed = True
    return reach


@st.composite
def graphs(draw):
    n = draw(st.integers(1, 7))
    node = st.integers(0, n - 1)
    return n, draw(st.lists(st.tuples(node, node), max_size=14))


def test_cycle_and_tail():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3)]
    comp = tarjan_scc(4, edges)
    assert comp[0] == comp[1] == comp[2] != comp[3]
    assert comp[3] < comp[0]
    assert kosaraju_scc(4, edges)[3] > kosaraju_scc(4, edges)[0]


@pytest.mark.parametrize("scc", [tarjan_scc, kosaraju_scc])
@given(data=graphs())
def test_components_are_mutual_reachability(scc, data):
    n, edges = data
    comp = scc(n, edges)
    reach = _reach(n, edges)
    for u in range(n):
        for v in range(n):
            assert (comp[u] == comp[v]) == (v in reach[u] and u in reach[v])


@given(graphs())
def test_component_orders(data):
    n, edges = data
    tarjan = tarjan_scc(n, edges)
    kosaraju = kosaraju_scc(n, edges)
    for u, v in edges:
        if tarjan[u] != tarjan[v]:
            assert tarjan[u] > tarjan[v]
            assert kosaraju[u] < kosaraju[v]


def test_two_sat_contradiction():
    assert two_sat(1, [(1, 1), (-1, -1)]) is None


def test_two_sat_forced_value():
    assert two_sat(2, [(1, 1), (-1, 2)]) == [True, True]


def test_two_sat_bad_literal():
    with pytest.raises(ValueError):
        two_sat(2, [(0, 1)])


literal = st.integers(1, 4).flatmap(lambda v: st.sampled_from([v, -v]))


@given(st.lists(st.tuples(literal, literal), max_size=10))
def test_two_sat_matches_brute_force(clauses):
    n = 4

    def holds(assign):
        value = lambda lit: assign[abs(lit) - 1] == (lit > 0)
        return all(value(a) or value(b) for a, b in clauses)

    result = two_sat(n, clauses)
    exists = any(holds(a) for a in itertools.product([False, True], repeat=n))
    if result is None:
        assert not exists
    else:
        assert holds(result)