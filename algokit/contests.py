"""Solutions to two classic contest problems on prisons and train stations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from algokit.union_find import DisjointSet


def imprison_criminals(n: int, conflicts: Iterable[tuple[int, int, int]]) -> int:
    """Split criminals ``1..n`` between two prisons to minimise the worst conflict.

    ``conflicts`` holds ``(a, b, anger)`` triples. Returns the largest anger
    that cannot be avoided, or 0 when every pair can be kept apart.
    """
    prisons = DisjointSet(n)
    enemy = [0] * (n + 1)
    for a, b, anger in sorted(conflicts, key=lambda c: c[2], reverse=True):
        if prisons.find(a) == prisons.find(b):
            return anger
        if enemy[a]:
            prisons.union(enemy[a], b)
        else:
            enemy[a] = b
        if enemy[b]:
            prisons.union(enemy[b], a)
        else:
            enemy[b] = a
    return 0


def station_levels(n: int, trains: Iterable[Sequence[int]]) -> int:
    """Least number of station levels consistent with the given trains.

    Each train is the ascending list of stations it stops at; every station it
    passes without stopping ranks strictly below every station it stops at.
    """
    below: list[list[int]] = [[] for _ in range(n + 1)]
    linked: set[tuple[int, int]] = set()
    pending = [0] * (n + 1)
    for stops in trains:
        if not stops:
            raise ValueError("a train must stop somewhere")
        for station in stops:
            if not 1 <= station <= n:
                raise ValueError(f"station {station} outside 1..{n}")
        stopped = set(stops)
        for skipped in range(stops[0], stops[-1] + 1):
            if skipped in stopped:
                continue
            for station in stops:
                if (skipped, station) not in linked:
                    linked.add((skipped, station))
                    below[skipped].append(station)
                    pending[station] += 1

    level = [0] * (n + 1)
    queue = deque(v for v in range(1, n + 1) if pending[v] == 0)
    for v in queue:
        level[v] = 1
    while queue:
        k = queue.popleft()
        for higher in below[k]:
            pending[higher] -= 1
            level[higher] = max(level[higher], level[k] + 1)
            if pending[higher] == 0:
                queue.append(higher)
    return max(level, default=0)