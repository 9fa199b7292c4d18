"""Comparison sorts: insertion, merge and quick sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Return a new list holding ``items`` in ascending order, by insertion."""
    result: list[T] = []
    for item in items:
        result.append(item)
        j = len(result) - 2
        while j >= 0 and result[j] > item:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = item
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a new list holding ``items`` in ascending order; equal items keep their order."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) + 1) // 2
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def quick_sort(items: Iterable[T]) -> list[T]:
    """Return a new list holding ``items`` in ascending order.

    Partitions around the middle element in the Hoare style.
    """
    values = list(items)
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = values[(low + high) // 2]
        i, j = low - 1, high + 1
        while True:
            i += 1
            while values[i] < pivot:
                i += 1
            j -= 1
            while values[j] > pivot:
                j -= 1
            if i >= j:
                break
            values[i], values[j] = values[j], values[i]
        pending.append((low, j))
        pending.append((j + 1, high))
    return values