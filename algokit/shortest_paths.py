"""Single-source, second-best and all-pairs shortest paths, and negative cycles."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Mapping

INF = math.inf

Edge = tuple[int, int, int]


def _check_vertex(n: int, v: int) -> None:
    if not 1 <= v <= n:
        raise ValueError(f"vertex {v} outside 1..{n}")


def _graph(n: int, edges: Iterable[Edge], *, both_ways) -> dict[int, list[tuple[int, int]]]:
    graph: dict[int, list[tuple[int, int]]] = {v: [] for v in range(1, n + 1)}
    for u, v, w in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        graph[u].append((v, w))
        if both_ways(w):
            graph[v].append((u, w))
    return graph


def dijkstra(
    n: int, edges: Iterable[Edge], source: int
) -> tuple[dict[int, float], dict[int, int | None]]:
    """Shortest distances from ``source`` over directed, non-negative edges.

    Returns ``(distances, predecessors)`` keyed by vertex ``1..n``; unreachable
    vertices have distance ``math.inf`` and the source and unreachable vertices
    have no predecessor.
    """
    _check_vertex(n, source)
    graph = _graph(n, edges, both_ways=lambda w: False)
    distances: dict[int, float] = {v: INF for v in graph}
    predecessors: dict[int, int | None] = {v: None for v in graph}
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != distances[u]:
            continue
        for v, w in graph[u]:
            if distances[v] > d + w:
                distances[v] = d + w
                predecessors[v] = u
                heapq.heappush(heap, (distances[v], v))
    return distances, predecessors


def path_to(predecessors: Mapping[int, int | None], target: int) -> list[int]:
    """Follow predecessors back from ``target`` and return the path from its start."""
    path = [target]
    while (previous := predecessors[path[-1]]) is not None:
        path.append(previous)
    path.reverse()
    return path


def second_shortest_distance(n: int, edges: Iterable[Edge]) -> float:
    """Length of the strictly second shortest walk from 1 to ``n`` over undirected edges.

    Returns ``math.inf`` when there is none.
    """
    _check_vertex(n, 1)
    graph = _graph(n, edges, both_ways=lambda w: True)
    best: dict[int, float] = {v: INF for v in graph}
    second: dict[int, float] = {v: INF for v in graph}
    best[1] = 0
    heap = [(0, 1)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > second[u]:
            continue
        for v, w in graph[u]:
            candidate = d + w
            if best[v] > candidate:
                second[v] = best[v]
                best[v] = candidate
                heapq.heappush(heap, (candidate, v))
            if second[v] > candidate and best[v] < candidate:
                second[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return second[n]


def floyd_warshall(n: int, edges: Iterable[Edge]) -> dict[int, dict[int, float]]:
    """All-pairs shortest distances over directed edges.

    A later edge between the same ordered pair replaces an earlier one.
    The result maps ``i`` to a map of ``j`` to distance; ``math.inf`` marks no path.
    """
    dist = {i: {j: (0 if i == j else INF) for j in range(1, n + 1)} for i in range(1, n + 1)}
    for u, v, w in edges:
        _check_vertex(n, u)
        _check_vertex(n, v)
        dist[u][v] = w
    for k in dist:
        through = dist[k]
        for row in dist.values():
            to_k = row[k]
            for j, via in through.items():
                if to_k + via < row[j]:
                    row[j] = to_k + via
    return dist


def has_negative_cycle(n: int, edges: Iterable[Edge]) -> bool:
    """Whether a negative cycle is reachable from vertex 1.

    Each ``(u, v, w)`` gives an edge ``u -> v``; a non-negative one also gives ``v -> u``.
    """
    _check_vertex(n, 1)
    graph = _graph(n, edges, both_ways=lambda w: w >= 0)
    dist: dict[int, float] = {v: INF for v in graph}
    hops = {v: 0 for v in graph}
    queued = {v: False for v in graph}
    dist[1] = 0
    queued[1] = True
    queue = deque([1])
    while queue:
        x = queue.popleft()
        queued[x] = False
        for v, w in graph[x]:
            if dist[v] > dist[x] + w:
                dist[v] = dist[x] + w
                hops[v] = hops[x] + 1
                if hops[v] >= n:
                    return True
                if not queued[v]:
                    queue.append(v)
                    queued[v] = True
    return False