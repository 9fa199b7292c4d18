"""Subset-sum counting and 0/1, bounded, unbounded and mixed knapsacks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def count_equal_partitions(numbers: Iterable[int]) -> int:
    """Count the subsets of ``numbers`` whose sum is half of the total.

    Returns 0 when the total is odd.
    """
    values = list(numbers)
    if any(value < 0 for value in values):
        raise ValueError("numbers cannot be negative")
    total = sum(values)
    if total % 2:
        return 0
    target = total // 2
    ways = [1] + [0] * target
    for value in values:
        for j in range(target, value - 1, -1):
            ways[j] += ways[j - value]
    return ways[target]


def count_halving_subsets(n: int) -> int:
    """Count the subsets of ``1..n`` whose sum is half of ``1 + 2 + ... + n``."""
    if n < 0:
        raise ValueError("n cannot be negative")
    return count_equal_partitions(range(1, n + 1))


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("the capacity cannot be negative")


def _check_item(volume: int, value: int) -> None:
    if volume < 0:
        raise ValueError("an item's volume cannot be negative")


def _binary_pieces(volume: int, value: int, count: int) -> Iterator[tuple[int, int]]:
    """Split ``count`` copies into bundles of 1, 2, 4, ... copies and a remainder."""
    k = 1
    while k <= count:
        count -= k
        yield volume * k, value * k
        k <<= 1
    if count:
        yield volume * count, value * count


def _take_once(best: list[int], volume: int, value: int) -> None:
    for j in range(len(best) - 1, volume - 1, -1):
        best[j] = max(best[j], best[j - volume] + value)


def _take_freely(best: list[int], volume: int, value: int) -> None:
    for j in range(volume, len(best)):
        best[j] = max(best[j], best[j - volume] + value)


def bounded_knapsack(capacity: int, items: Iterable[tuple[int, int, int]]) -> int:
    """Best total value within ``capacity``.

    Each item is ``(volume, value, count)``: at most ``count`` copies may be taken.
    """
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for volume, value, count in items:
        _check_item(volume, value)
        for piece_volume, piece_value in _binary_pieces(volume, value, count):
            _take_once(best, piece_volume, piece_value)
    return best[capacity]


def mixed_knapsack(capacity: int, items: Iterable[tuple[int, int, int]]) -> int:
    """Best total value within ``capacity`` over items of three kinds.

    Each item is ``(volume, value, count)``: a negative count allows one copy,
    zero allows any number of copies, a positive count allows that many.
    """
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for volume, value, count in items:
        _check_item(volume, value)
        if count < 0:
            _take_once(best, volume, value)
        elif count == 0:
            if volume == 0:
                raise ValueError("an item taken without limit needs a positive volume")
            _take_freely(best, volume, value)
        else:
            for piece_volume, piece_value in _binary_pieces(volume, value, count):
                _take_once(best, piece_volume, piece_value)
    return best[capacity]