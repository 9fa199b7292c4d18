import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.union_find import DisjointSet


def _cases():
    return st.integers(1, 12).flatmap(
        lambda n: st.tuples(
            st.just(n),
            st.lists(st.tuples(st.integers(1, n), st.integers(1, n)), max_size=20),
        )
    )


def test_fresh_elements_are_their_own_roots():
    ds = DisjointSet(5)
    assert [ds.find(x) for x in range(1, 6)] == [1, 2, 3, 4, 5]


def test_union_reports_whether_merged():
    ds = DisjointSet(3)
    assert ds.union(1, 2) is True
    assert ds.union(2, 1) is False


def test_chain_of_unions_collects_everything():
    n = 6
    ds = DisjointSet(n)
    for x in range(1, n):
        ds.union(x, x + 1)
    assert ds.size(4) == n
    assert len({ds.find(x) for x in range(1, n + 1)}) == 1


def test_union_keeps_first_root():
    ds = DisjointSet(4)
    ds.union(3, 4)
    assert ds.find(4) == 3


@pytest.mark.parametrize("bad", [0, 5, -1])
def test_out_of_range_element(bad):
    ds = DisjointSet(4)
    with pytest.raises(IndexError):
        ds.find(bad)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)


@given(_cases())
def test_sizes_match_membership(case):
    n, pairs = case
    ds = DisjointSet(n)
    for x, y in pairs:
        ds.union(x, y)
    roots = {x: ds.find(x) for x in range(1, n + 1)}
    for x, root in roots.items():
        assert ds.size(x) == sum(1 for r in roots.values() if r == root)


@given(_cases())
def test_united_elements_share_root(case):
    n, pairs = case
    ds = DisjointSet(n)
    for x, y in pairs:
        ds.union(x, y)
    for x, y in pairs:
        assert ds.find(x) == ds.find(y)