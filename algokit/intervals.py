"""Merging overlapping closed intervals."""

from __future__ import annotations

from collections.abc import Iterable


def merge_intervals(intervals: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge every group of intersecting closed intervals.

    Intervals that share only an endpoint intersect and are merged. The result
    is sorted by start.
    """
    pairs = sorted(intervals)
    for left, right in pairs:
        if left > right:
            raise ValueError(f"interval ({left}, {right}) ends before it starts")
    merged: list[tuple[int, int]] = []
    for left, right in pairs:
        if merged and left <= merged[-1][1]:
            start, end = merged[-1]
            merged[-1] = (start, max(end, right))
        else:
            merged.append((left, right))
    return merged