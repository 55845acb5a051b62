"""
Tests for the top-level sparsecurve namespace.
"""
import numpy as np
import pytest

import sparsecurve


def test_public_names():
    for name in sparsecurve.__all__:
        assert hasattr(sparsecurve, name)


def test_round_trip_through_package():
    samples = {0: 0, 10: 10, 20: 20}
    assert np.isclose(sparsecurve.interpolate_y(samples, 5), 5.0)
    assert sparsecurve.interpolate_x(samples, 15) == pytest.approx(15.0)
    assert sparsecurve.nearest_sequence([], [1, 2, 3]) == [1, 2, 3]
    assert sparsecurve.nearest([1, 5], 3) == 5


def test_parallel_lines_fail():
    with pytest.raises(sparsecurve.DomainError):
        sparsecurve.intersect_lines(((0, 0), (10, 10)), ((0, 1), (10, 11)))
