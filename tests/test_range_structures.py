from itertools import accumulate

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.range_structures import (
    CoordinateCompressor,
    FenwickTree,
    RangeAddFenwickTree,
    SegmentTree,
    SparseTable,
)

value_lists = st.lists(st.integers(-100, 100), min_size=1, max_size=30)


@given(value_lists, st.data())
def test_fenwick_matches_list(values, data):
    tree = FenwickTree(values)
    model = list(values)
    n = len(values)
    for _ in range(10):
        i = data.draw(st.integers(1, n))
        delta = data.draw(st.integers(-50, 50))
        tree.add(i, delta)
        model[i - 1] += delta
        left = data.draw(st.integers(1, n))
        right = data.draw(st.integers(left, n))
        assert tree.range_sum(left, right) == sum(model[left - 1 : right])
    assert [tree.prefix_sum(i) for i in range(n + 1)] == list(accumulate(model, initial=0))


def test_fenwick_bounds():
    tree = FenwickTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.add(4, 1)
    with pytest.raises(IndexError):
        tree.range_sum(0, 2)


@given(value_lists, st.data())
def test_range_add_matches_list(values, data):
    tree = RangeAddFenwickTree(values)
    model = list(values)
    n = len(values)
    for _ in range(10):
        left = data.draw(st.integers(1, n))
        right = data.draw(st.integers(left, n))
        delta = data.draw(st.integers(-50, 50))
        tree.add_range(left, right, delta)
        for i in range(left - 1, right):
            model[i] += delta
    assert [tree.get(i) for i in range(1, n + 1)] == model


def test_range_add_bounds():
    tree = RangeAddFenwickTree([5])
    with pytest.raises(IndexError):
        tree.get(2)
    with pytest.raises(IndexError):
        tree.add_range(1, 2, 3)


@given(
    st.lists(st.integers(0, 1000), min_size=1, max_size=25),
    st.integers(1, 10**9 + 7),
    st.data(),
)
def test_segment_tree_matches_list(values, mod, data):
    tree = SegmentTree(values, mod)
    model = list(values)
    n = len(values)
    for _ in range(15):
        kind = data.draw(st.sampled_from(["mul", "add", "query"]))
        left = data.draw(st.integers(1, n))
        right = data.draw(st.integers(left, n))
        if kind == "query":
            assert tree.query(left, right) == sum(model[left - 1 : right]) % mod
            continue
        k = data.draw(st.integers(0, 1000))
        for i in range(left - 1, right):
            model[i] = model[i] * k if kind == "mul" else model[i] + k
        if kind == "mul":
            tree.multiply(left, right, k)
        else:
            tree.add(left, right, k)
    assert tree.query(1, n) == sum(model) % mod


def test_segment_tree_rejects_empty_and_bad_range():
    with pytest.raises(ValueError):
        SegmentTree([], 7)
    tree = SegmentTree([1, 2], 7)
    with pytest.raises(IndexError):
        tree.query(2, 3)


@given(value_lists, st.data())
def test_sparse_table_matches_max(values, data):
    table = SparseTable(values)
    n = len(values)
    for _ in range(10):
        left = data.draw(st.integers(1, n))
        right = data.draw(st.integers(left, n))
        assert table.query(left, right) == max(values[left - 1 : right])


def test_sparse_table_bounds():
    with pytest.raises(IndexError):
        SparseTable([3, 1]).query(1, 3)


def test_compressor_source_example():
    data = [100, 300, 200, 100, 500]
    compressor = CoordinateCompressor()
    for x in data:
        compressor.add(x)
    compressor.build()
    assert [compressor.compress(x) for x in data] == [0, 2, 1, 0, 3]
    assert compressor.values() == sorted(set(data))
    assert len(compressor) == len(set(data))


@given(st.lists(st.integers(-1000, 1000), min_size=1))
def test_compressor_preserves_order(data):
    compressor = CoordinateCompressor()
    for x in data:
        compressor.add(x)
    compressor.build()
    ranks = {x: compressor.compress(x) for x in data}
    assert sorted(ranks.values()) == list(range(len(compressor)))
    for a in data:
        for b in data[:5]:
            assert (ranks[a] < ranks[b]) == (a < b)


def test_compressor_requires_build():
    compressor = CoordinateCompressor()
    compressor.add(1)
    with pytest.raises(RuntimeError):
        compressor.compress(1)