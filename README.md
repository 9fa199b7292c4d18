# algokit

Classic algorithms and data structures of the kind used in programming
contests, written as ordinary Python functions and classes. There are no
runtime dependencies.

## Installation

```
pip install algokit
```

## Contents

| Module | Contents |
| --- | --- |
| `algokit.adjacency` | `AdjacencyList`: a weighted graph with one edge list per vertex; `edges(u)` lists the newest edge first, `render()` describes vertices `1..max_vertex` |
| `algokit.union_find` | `DisjointSet` over `1..n` with `find`, `union` and `size` |
| `algokit.mst` | `kruskal(n, edges)`: total weight of a minimum spanning forest |
| `algokit.shortest_paths` | `dijkstra`, `path_to`, `second_shortest_distance`, `floyd_warshall`, `has_negative_cycle` |
| `algokit.trees` | `LowestCommonAncestor`, `tree_centroid`, `tree_diameter` |
| `algokit.contests` | `imprison_criminals` (split into two prisons minimising the worst conflict), `station_levels` (fewest station levels consistent with train stops) |
| `algokit.number_theory` | `convert_base`, `extended_gcd`, `chinese_remainder`, `binomial_table`, `gcd`, `lcm` |
| `algokit.linear_algebra` | `solve_linear_system`, `identity`, `matrix_multiply`, `matrix_power`, and the errors `InconsistentSystemError`, `UnderdeterminedSystemError` |
| `algokit.range_structures` | `FenwickTree`, `RangeAddFenwickTree`, `SegmentTree`, `SparseTable`, `CoordinateCompressor` |
| `algokit.sorting` | `insertion_sort`, `merge_sort`, `quick_sort`, each returning a new list |
| `algokit.intervals` | `merge_intervals` |
| `algokit.knapsack` | `count_halving_subsets`, `count_equal_partitions`, `bounded_knapsack`, `mixed_knapsack` |

Vertices and array positions are numbered from 1. Edges are given as
`(u, v, weight)` triples, or `(u, v)` pairs for unweighted trees.

## Examples

Shortest paths from a source vertex:

```python
from algokit.shortest_paths import dijkstra, path_to

edges = [(1, 2, 4), (1, 3, 1), (3, 2, 2)]
distances, predecessors = dijkstra(3, edges, 1)
print(distances[2])               # 3
print(path_to(predecessors, 2))   # [1, 3, 2]
```

Unreachable vertices have distance `math.inf`; `floyd_warshall` and
`second_shortest_distance` use `math.inf` the same way.

Range updates and sums modulo a number:

```python
from algokit.range_structures import SegmentTree

tree = SegmentTree([1, 2, 3, 4, 5], mod=1_000_000_007)
tree.add(2, 4, 10)
tree.multiply(1, 3, 2)
print(tree.query(1, 5))   # 71
```

Union–find with component sizes:

```python
from algokit.union_find import DisjointSet

sets = DisjointSet(5)
sets.union(1, 2)
sets.union(2, 3)
print(sets.size(3))   # 3
```

Matrix powers modulo a number:

```python
from algokit.linear_algebra import matrix_power

fib = matrix_power([[1, 1], [1, 0]], 10, 1000)
print(fib[0][1])   # 55
```

Merging overlapping intervals (intervals that share an endpoint are merged):

```python
from algokit.intervals import merge_intervals

print(merge_intervals([(1, 3), (2, 6), (8, 10)]))   # [(1, 6), (8, 10)]
```

## Behaviour worth knowing

- `convert_base` uses upper-case letters for digits above 9 and returns an
  empty string for the value zero.
- `lcm(0, 0)` raises `ZeroDivisionError`.
- `chinese_remainder` takes `(modulus, residue)` pairs and raises `ValueError`
  when the moduli are not positive or not pairwise coprime.
- `has_negative_cycle` treats every edge as directed `u -> v`, and a
  non-negative edge also as `v -> u`; it looks only at cycles reachable from
  vertex 1.
- `mixed_knapsack` items are `(volume, value, count)`: a negative count allows
  one copy, zero allows any number, a positive count allows that many.
- `CoordinateCompressor.compress` raises `RuntimeError` until `build()` has
  been called.
- Vertices or positions outside their range raise `ValueError` (graphs and
  trees) or `IndexError` (disjoint sets and range structures).

## What the package does not do

It is a library only. There is no command-line program: the functions take
Python values and return results rather than reading problem input from
standard input and printing answers.

## Running the tests

```
pip install "algokit[test]"
pytest
```