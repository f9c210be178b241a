"""Tests for union_find module."""

import pytest

from percolation_threshold.percolation.union_find import WeightedQuickUnionUF


class TestWeightedQuickUnionUF:
    """Tests for WeightedQuickUnionUF."""

    def test_starts_as_singletons(self):
        """Every element starts in its own set."""
        uf = WeightedQuickUnionUF(5)

        assert uf.count == 5
        assert len(uf) == 5
        for i in range(5):
            assert uf.find(i) == i
            assert uf.component_size(i) == 1
        assert not uf.connected(0, 1)

    def test_union_merges_sets(self):
        """Union connects elements transitively."""
        uf = WeightedQuickUnionUF(6)

        assert uf.union(0, 1) is True
        assert uf.union(1, 2) is True
        assert uf.union(4, 5) is True

        assert uf.connected(0, 2)
        assert uf.connected(5, 4)
        assert not uf.connected(2, 4)
        assert uf.count == 3
        assert uf.component_size(1) == 3

    def test_union_same_set_is_noop(self):
        """Union of already connected elements reports False and keeps count."""
        uf = WeightedQuickUnionUF(3)
        uf.union(0, 1)

        assert uf.union(1, 0) is False
        assert uf.union(2, 2) is False
        assert uf.count == 2

    def test_smaller_tree_goes_under_larger(self):
        """Root of the larger set survives a union."""
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.union(0, 2)
        root = uf.find(0)

        uf.union(3, 0)

        assert uf.find(3) == root
        assert uf.component_size(3) == 4

    def test_long_chain_stays_connected(self):
        """A long chain of unions ends in a single set."""
        n = 1000
        uf = WeightedQuickUnionUF(n)
        for i in range(n - 1):
            uf.union(i, i + 1)

        assert uf.count == 1
        assert uf.connected(0, n - 1)
        assert uf.component_size(500) == n

    def test_out_of_range(self):
        """Elements outside [0, size) raise IndexError."""
        uf = WeightedQuickUnionUF(3)

        with pytest.raises(IndexError):
            uf.find(3)
        with pytest.raises(IndexError):
            uf.union(-1, 0)
        with pytest.raises(IndexError):
            uf.connected(0, 10)

    def test_negative_size(self):
        """A negative universe size is rejected."""
        with pytest.raises(ValueError):
            WeightedQuickUnionUF(-1)

    def test_instances_are_independent(self):
        """Two structures never share state."""
        a = WeightedQuickUnionUF(4)
        b = WeightedQuickUnionUF(4)
        a.union(0, 3)

        assert a.connected(0, 3)
        assert not b.connected(0, 3)
        assert b.count == 4
