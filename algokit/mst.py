"""Minimum spanning tree weight by Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Iterable

from algokit.union_find import DisjointSet


def kruskal(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the total weight of a minimum spanning forest over vertices ``1..n``.

    ``edges`` holds ``(u, v, length)`` triples.
    """
    forest = DisjointSet(n)
    total = 0
    for u, v, length in sorted(edges, key=lambda edge: edge[2]):
        if forest.union(u, v):
            total += length
    return total