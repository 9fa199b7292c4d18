"""Disjoint-set forest with path compression and component sizes."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the elements ``1..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("the number of elements cannot be negative")
        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def _check(self, x: int) -> None:
        if not 1 <= x <= self._n:
            raise IndexError(f"element {x} outside 1..{self._n}")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the set of ``y`` into the set of ``x``; return whether they were apart."""
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        self._parent[ry] = rx
        self._size[rx] += self._size[ry]
        return True

    def size(self, x: int) -> int:
        """Return how many elements share a set with ``x``."""
        return self._size[self.find(x)]