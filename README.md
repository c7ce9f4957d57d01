# algokit

Classic algorithms and data structures from competitive programming,
written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### Data structures

- `algokit.fenwick`: `FenwickTree` (point add, prefix and range sums) and
  `RangeFenwickTree` (range add, range sum); both use 1-based indices.
- `algokit.dsu`: `DisjointSet` with `find`, `union` and `size_of`, using
  union by size and path compression.
- `algokit.segment_tree`: `LazySegmentTree` (range add, range assign, range
  sum over 0-based inclusive ranges), `MinSegmentTree` (point update, range
  minimum over half-open ranges) and `MaxPrefixSegmentTree` (largest prefix
  sum of a half-open range, counting the empty prefix).
- `algokit.sparse_table`: `SparseTable` for static range-minimum queries.
- `algokit.li_chao`: `Line` and `LiChaoTree`, the maximum of inserted lines at
  integer points of `[0, size)`.
- `algokit.line_container`: `LineContainer`, the upper envelope of integer
  lines with maximum queries at integer points.
- `algokit.heaps`: meldable min-heaps `LeftistHeap` and `SkewHeap` with
  `push`, `pop`, `peek`, `meld` and `len()`.
- `algokit.treap`: `TreapNode` with `merge`, `split_by_size`,
  `split_by_value`, `inorder`, `from_values` and `size`.
- `algokit.persistent_treap`: `PersistentNode` over characters; `merge` and
  `split` copy the nodes they touch and leave their inputs unchanged.
  `from_string` and `to_string` convert to and from text.
- `algokit.dynamic_connectivity`: `RollbackDSU` (union with undo) and
  `count_components`, which answers, offline, the number of connected
  components at time 0 and after each edge addition `(1, a, b)` or removal
  `(2, a, b)`.
- `algokit.hld`: heavy-light decomposition. `PathAssignMax` assigns a value
  along a tree path and reports path maxima; `PathSumMax` updates single nodes
  and reports path maxima and path sums.

### Graphs and flows

Graphs have nodes `0..n-1` and are given as lists of edge tuples.

- `algokit.maxflow.Dinic`: maximum flow.
- `algokit.mincost_flow.MinCostFlow`: minimum-cost maximum flow, either
  pushing blocking flows (`flow`) or one shortest path at a time
  (`flow_by_paths`); both return `(flow, cost)`.
- `algokit.assignment.kuhn_munkres`: maximum-weight perfect matching of a
  square weight matrix, returning the total and each row's column.
- `algokit.biconnected`: `articulation_points`, `biconnected_components`,
  `bridges` and `two_edge_components`.
- `algokit.shortest_paths`: `dijkstra` over directed edges and
  `floyd_warshall` over undirected edges; unreachable nodes get `math.inf`.
- `algokit.euler`: `directed_euler_path` and `undirected_euler_path` from
  node 0 to node `n-1`, or `None` when no such path exists.
- `algokit.hamilton.count_hamiltonian_paths`: directed Hamiltonian paths from
  0 to `n-1`, modulo `10**9 + 7` by default.
- `algokit.lca.LowestCommonAncestor`: depths and lowest common ancestors by
  binary lifting.
- `algokit.mst`: `kruskal` (weight of a minimum spanning forest) and `prim`
  (weight of a minimum spanning tree; raises `ValueError` if disconnected).
- `algokit.scc`: `tarjan_scc`, `kosaraju_scc` and `two_sat`, whose clauses
  are pairs of literals `+i` / `-i` over variables `1..n`.

### Mathematics

- `algokit.modular`: `power_mod`, `ext_gcd`, `bezout`, `mod_inverse`,
  `mat_mul` and `mat_pow`.
- `algokit.gauss.gauss_mod`: reduced row echelon form of an `n x (n+1)`
  augmented matrix modulo a prime.
- `algokit.fft`: `fft` and integer polynomial `multiply`.
- `algokit.ntt`: `ntt` and `convolve` modulo 998244353, plus power series
  `poly_inverse`, `poly_sqrt`, `poly_derivative`, `poly_integral`, `poly_ln`
  and `poly_exp`.
- `algokit.factorization`: `is_prime` (deterministic Miller-Rabin),
  `pollard_rho`, `factorize`, and `LinearSieve` with least prime factors and
  `(prime, exponent)` factorisations.
- `algokit.aliens.max_profit`: best profit from at most `k` buy-then-sell
  trades, by Lagrangian relaxation.
- `algokit.half_plane`: `Point`, `HalfPlane`, `intersect` and
  `half_plane_intersection`, which returns the vertices of the intersection
  counter-clockwise, clipped to a large bounding box.

### Strings

- `algokit.aho_corasick.AhoCorasick`: reports `(end_index, length)` of the
  longest pattern ending at each matching position.
- `algokit.kmp`: `prefix_function` and `count_occurrences`.
- `algokit.z_function`: `z_function` and `count_occurrences`.
- `algokit.rolling_hash.RollingHash`: substring hashes of lowercase text.
- `algokit.suffix_array`: `SuffixArray` (suffixes, ranks and LCP lengths) and
  `suffix_array_doubling`.
- `algokit.trie.Trie`: counts how many times each word was inserted.

## Example

```python
from algokit.fenwick import FenwickTree
from algokit.kmp import count_occurrences
from algokit.maxflow import Dinic

tree = FenwickTree([1, 2, 3, 4])
tree.add(2, 10)
print(tree.range_sum(1, 3))  # 16

network = Dinic(4)
network.add_edge(0, 1, 3)
network.add_edge(1, 3, 2)
network.add_edge(0, 2, 2)
network.add_edge(2, 3, 3)
print(network.max_flow(0, 3))  # 4

print(count_occurrences("abababa", "aba"))  # 3
```

Each module states its index conventions (0- or 1-based, inclusive or
half-open ranges) in its docstrings.

## What it does not do

algokit is a library only. It has no command-line program and does not read
problem input from standard input or write answers to standard output;
callers pass data in as Python values and get Python values back.