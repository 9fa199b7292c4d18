"""Weighted adjacency lists that report a vertex's edges newest first."""

from __future__ import annotations

from collections import defaultdict


class AdjacencyList:
    """A weighted graph kept as one edge list per vertex.

    Edges leaving a vertex are reported in reverse order of insertion,
    so the edge added last comes first.
    """

    def __init__(self) -> None:
        self._outgoing: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
        self.max_vertex = 0

    def add(self, u: int, v: int, w: int) -> None:
        """Add a directed edge ``u -> v`` of weight ``w``."""
        self._outgoing[u].append((v, w))
        self.max_vertex = max(self.max_vertex, u, v)

    def add_undirected(self, u: int, v: int, w: int) -> None:
        """Add the edge in both directions."""
        self.add(u, v, w)
        self.add(v, u, w)

    def edges(self, u: int) -> list[tuple[int, int]]:
        """Return ``(target, weight)`` pairs leaving ``u``, newest first."""
        return list(reversed(self._outgoing.get(u, [])))

    def render(self) -> str:
        """Describe every vertex from 1 to the largest one seen, with its edges."""
        lines: list[str] = []
        for vertex in range(1, self.max_vertex + 1):
            lines.append(f"Node {vertex}:")
            lines.extend(f" -> {to} (weight: {w})" for to, w in self.edges(vertex))
        return "".join(line + "\n" for line in lines)