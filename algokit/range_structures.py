"""Range query structures over 1-based positions, and coordinate compression."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class FenwickTree:
    """Point updates and prefix sums over positions ``1..n``."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        values = list(values)
        self._n = len(values)
        self._tree = [0] + values
        for i in range(1, self._n + 1):
            parent = i + (i & -i)
            if parent <= self._n:
                self._tree[parent] += self._tree[i]

    def __len__(self) -> int:
        return self._n

    def _check(self, index: int, low: int = 1) -> None:
        if not low <= index <= self._n:
            raise IndexError(f"position {index} outside {low}..{self._n}")

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        self._check(index)
        while index <= self._n:
            self._tree[index] += delta
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of the values at positions ``1..index``; zero for ``index`` 0."""
        self._check(index, low=0)
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Sum of the values at positions ``left..right``."""
        if not 1 <= left <= right <= self._n:
            raise IndexError(f"range {left}..{right} outside 1..{self._n}")
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class RangeAddFenwickTree:
    """Range additions and point reads, kept as a tree of differences."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        values = list(values)
        differences = [v - p for v, p in zip(values, [0] + values)]
        self._differences = FenwickTree(differences)

    def __len__(self) -> int:
        return len(self._differences)

    def add_range(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every value at positions ``left..right``."""
        n = len(self)
        if not 1 <= left <= right <= n:
            raise IndexError(f"range {left}..{right} outside 1..{n}")
        self._differences.add(left, delta)
        if right < n:
            self._differences.add(right + 1, -delta)

    def get(self, index: int) -> int:
        """Current value at ``index``."""
        if not 1 <= index <= len(self):
            raise IndexError(f"position {index} outside 1..{len(self)}")
        return self._differences.prefix_sum(index)


class SegmentTree:
    """Range multiply, range add and range sum, all modulo ``mod``."""

    def __init__(self, values: Iterable[int], mod: int) -> None:
        if mod <= 0:
            raise ValueError("the modulus must be positive")
        values = list(values)
        if not values:
            raise ValueError("a segment tree needs at least one value")
        self._n = len(values)
        self._mod = mod
        size = 4 * self._n
        self._sum = [0] * size
        self._mul = [1] * size
        self._add = [0] * size
        self._build(values, 1, 1, self._n)

    def __len__(self) -> int:
        return self._n

    def _build(self, values: list[int], p: int, l: int, r: int) -> None:
        if l == r:
            self._sum[p] = values[l - 1] % self._mod
            return
        mid = (l + r) // 2
        self._build(values, 2 * p, l, mid)
        self._build(values, 2 * p + 1, mid + 1, r)
        self._sum[p] = (self._sum[2 * p] + self._sum[2 * p + 1]) % self._mod

    def _apply(self, p: int, l: int, r: int, mul: int, add: int) -> None:
        mod = self._mod
        self._mul[p] = self._mul[p] * mul % mod
        self._add[p] = (self._add[p] * mul + add) % mod
        self._sum[p] = (self._sum[p] * mul + add * (r - l + 1)) % mod

    def _push_down(self, p: int, l: int, r: int) -> None:
        mid = (l + r) // 2
        self._apply(2 * p, l, mid, self._mul[p], self._add[p])
        self._apply(2 * p + 1, mid + 1, r, self._mul[p], self._add[p])
        self._mul[p] = 1
        self._add[p] = 0

    def _update(self, ul: int, ur: int, l: int, r: int, p: int, mul: int, add: int) -> None:
        if ul <= l and r <= ur:
            self._apply(p, l, r, mul, add)
            return
        self._push_down(p, l, r)
        mid = (l + r) // 2
        if ul <= mid:
            self._update(ul, ur, l, mid, 2 * p, mul, add)
        if ur > mid:
            self._update(ul, ur, mid + 1, r, 2 * p + 1, mul, add)
        self._sum[p] = (self._sum[2 * p] + self._sum[2 * p + 1]) % self._mod

    def _query(self, ql: int, qr: int, l: int, r: int, p: int) -> int:
        if ql <= l and r <= qr:
            return self._sum[p]
        self._push_down(p, l, r)
        mid = (l + r) // 2
        total = 0
        if ql <= mid:
            total += self._query(ql, qr, l, mid, 2 * p)
        if qr > mid:
            total += self._query(ql, qr, mid + 1, r, 2 * p + 1)
        return total % self._mod

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self._n:
            raise IndexError(f"range {left}..{right} outside 1..{self._n}")

    def multiply(self, left: int, right: int, factor: int) -> None:
        """Multiply every value at positions ``left..right`` by ``factor``."""
        self._check(left, right)
        self._update(left, right, 1, self._n, 1, factor % self._mod, 0)

    def add(self, left: int, right: int, delta: int) -> None:
        """Add ``delta`` to every value at positions ``left..right``."""
        self._check(left, right)
        self._update(left, right, 1, self._n, 1, 1, delta % self._mod)

    def query(self, left: int, right: int) -> int:
        """Sum of the values at positions ``left..right`` modulo ``mod``."""
        self._check(left, right)
        return self._query(left, right, 1, self._n, 1)


class SparseTable:
    """Range maximum queries over fixed values at positions ``1..n``."""

    def __init__(self, values: Iterable[int]) -> None:
        level = list(values)
        self._n = len(level)
        self._levels = [level]
        width = 1
        while 2 * width <= self._n:
            previous = self._levels[-1]
            self._levels.append(
                [max(previous[i], previous[i + width]) for i in range(self._n - 2 * width + 1)]
            )
            width *= 2

    def __len__(self) -> int:
        return self._n

    def query(self, left: int, right: int) -> int:
        """Largest value at positions ``left..right``."""
        if not 1 <= left <= right <= self._n:
            raise IndexError(f"range {left}..{right} outside 1..{self._n}")
        k = (right - left + 1).bit_length() - 1
        level = self._levels[k]
        return max(level[left - 1], level[right - (1 << k)])


class CoordinateCompressor(Generic[T]):
    """Maps values to their rank among the distinct values added."""

    def __init__(self) -> None:
        self._values: list[T] = []
        self._built = False

    def add(self, x: T) -> None:
        """Record a value; duplicates are removed by ``build``."""
        self._values.append(x)
        self._built = False

    def build(self) -> None:
        """Sort and deduplicate the recorded values."""
        self._values = sorted(set(self._values))
        self._built = True

    def compress(self, x: T) -> int:
        """Zero-based rank of ``x``: the number of distinct values below it."""
        if not self._built:
            raise RuntimeError("call build() before compress()")
        return bisect_left(self._values, x)

    def values(self) -> list[T]:
        """The recorded values, sorted and distinct once built."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)