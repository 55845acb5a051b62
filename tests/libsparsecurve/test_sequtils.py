"""
Tests for sequtils — mapping and sequence helpers.
"""
from sparsecurve.libsparsecurve.sequtils import (
    filter_values,
    group_by,
    map_values,
    max_by,
    min_by,
)


class TestMappingHelpers:
    def test_map_values(self):
        src = {1: 2, 3: 4}
        assert map_values(lambda v: v * 10, src) == {1: 20, 3: 40}
        assert src == {1: 2, 3: 4}

    def test_filter_values(self):
        assert filter_values(lambda v: v > 2, {1: 2, 3: 4, 5: 6}) == {3: 4, 5: 6}

    def test_filter_values_empty(self):
        assert filter_values(lambda v: True, {}) == {}


class TestGroupBy:
    def test_groups_keep_order(self):
        groups = group_by(lambda n: n % 2, [3, 1, 2, 5, 4])
        assert groups == {1: [3, 1, 5], 0: [2, 4]}
        assert list(groups) == [1, 0]


class TestExtremalBy:
    def test_min_by_first_wins_ties(self):
        assert min_by(abs, [3, -1, 1, 4]) == -1

    def test_max_by_first_wins_ties(self):
        assert max_by(abs, [3, -4, 4, 1]) == -4

    def test_empty(self):
        assert min_by(abs, []) is None
        assert max_by(abs, []) is None
