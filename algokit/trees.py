"""Tree queries: lowest common ancestor, centroid and diameter."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} outside 1..{n}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _bfs(adjacency: list[list[int]], root: int) -> tuple[list[int], list[int], list[int]]:
    """Return visiting order, parents (0 for the root) and edge depths from ``root``."""
    parent = [0] * len(adjacency)
    depth = [0] * len(adjacency)
    seen = [False] * len(adjacency)
    seen[root] = True
    order = []
    queue = deque([root])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adjacency[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                depth[v] = depth[u] + 1
                queue.append(v)
    return order, parent, depth


class LowestCommonAncestor:
    """Binary-lifting lowest common ancestor queries on a tree over ``1..n``."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 1) -> None:
        adjacency = _adjacency(n, edges)
        if not 1 <= root <= n:
            raise ValueError(f"root {root} outside 1..{n}")
        self._n = n
        order, parent, depth = _bfs(adjacency, root)
        # Depth counts vertices, so the sentinel 0 above the root sits at depth 0.
        self._depth = [0] * (n + 1)
        for vertex in order:
            self._depth[vertex] = depth[vertex] + 1
        self._up = [parent]
        while (1 << len(self._up)) <= n:
            previous = self._up[-1]
            self._up.append([previous[previous[i]] for i in range(n + 1)])

    def query(self, x: int, y: int) -> int:
        """Return the deepest vertex that is an ancestor of both ``x`` and ``y``."""
        for vertex in (x, y):
            if not 1 <= vertex <= self._n:
                raise ValueError(f"vertex {vertex} outside 1..{self._n}")
        depth, up = self._depth, self._up
        if depth[x] < depth[y]:
            x, y = y, x
        top = 0
        while (1 << (top + 1)) <= depth[x]:
            top += 1
        levels = range(min(top, len(up) - 1), -1, -1)
        for j in levels:
            if depth[up[j][x]] >= depth[y]:
                x = up[j][x]
        if x == y:
            return x
        for j in levels:
            if up[j][x] != up[j][y]:
                x, y = up[j][x], up[j][y]
        return up[0][x]


def tree_centroid(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the centroid of the tree, choosing the smallest label on a tie."""
    adjacency = _adjacency(n, edges)
    order, parent, _ = _bfs(adjacency, 1)
    size = [1] * (n + 1)
    heaviest_child = [0] * (n + 1)
    best_node, best_balance = -1, n + 1
    for u in reversed(order):
        balance = max(heaviest_child[u], n - size[u])
        if balance < best_balance or (balance == best_balance and u < best_node):
            best_node, best_balance = u, balance
        p = parent[u]
        if p:
            size[p] += size[u]
            heaviest_child[p] = max(heaviest_child[p], size[u])
    return best_node


def tree_diameter(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of edges on the longest path of the tree."""
    adjacency = _adjacency(n, edges)
    order, _, depth = _bfs(adjacency, 1)
    farthest = max(order, key=lambda v: depth[v])
    order, _, depth = _bfs(adjacency, farthest)
    return max(depth[v] for v in order)