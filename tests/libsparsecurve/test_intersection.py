"""
Tests for intersection — crossing point of two segments.

Covers: intersect_lines on linear and log-x axes, degenerate inputs.
"""
import numpy as np
import pytest

from sparsecurve.libsparsecurve.axes import DomainError
from sparsecurve.libsparsecurve.intersection import intersect_lines

RTOL = 1e-12
LOG_X = {"x": "log", "y": "linear"}


class TestIntersectLines:
    def test_crossed_diagonals(self):
        x, y = intersect_lines(((0, 0), (10, 10)), ((0, 10), (10, 0)))
        assert np.isclose(x, 5.0, rtol=RTOL)
        assert np.isclose(y, 5.0, rtol=RTOL)

    def test_endpoint_order_irrelevant(self):
        x, y = intersect_lines(((10, 10), (0, 0)), ((10, 0), (0, 10)))
        assert np.isclose(x, 5.0, rtol=RTOL)
        assert np.isclose(y, 5.0, rtol=RTOL)

    def test_outside_segments(self):
        # lines extend beyond the sampled ends
        x, y = intersect_lines(((0, 0), (1, 1)), ((0, 4), (1, 3)))
        assert np.isclose(x, 2.0, rtol=RTOL)
        assert np.isclose(y, 2.0, rtol=RTOL)

    def test_horizontal_line(self):
        x, y = intersect_lines(((0, 3), (10, 3)), ((0, 0), (10, 10)))
        assert np.isclose(x, 3.0, rtol=RTOL)
        assert np.isclose(y, 3.0, rtol=RTOL)

    def test_parallel_raises(self):
        with pytest.raises(DomainError):
            intersect_lines(((0, 0), (10, 10)), ((0, 1), (10, 11)))

    def test_vertical_segment_raises(self):
        with pytest.raises(DomainError):
            intersect_lines(((5, 0), (5, 10)), ((0, 10), (10, 0)))

    def test_log_x(self):
        # straight lines in ln x: y = ln(x)/ln(10) and y = 2 - ln(x)/ln(10) meet at x = 10
        x, y = intersect_lines(((1, 0), (100, 2)), ((1, 2), (100, 0)), LOG_X)
        assert np.isclose(x, 10.0, rtol=1e-10)
        assert np.isclose(y, 1.0, rtol=1e-10)

    def test_log_x_parallel_raises(self):
        with pytest.raises(DomainError):
            intersect_lines(((1, 0), (10, 1)), ((1, 1), (10, 2)), LOG_X)

    def test_log_x_non_positive_raises(self):
        with pytest.raises(DomainError):
            intersect_lines(((0, 0), (10, 1)), ((1, 1), (10, 0)), LOG_X)

    def test_bad_segment_shape(self):
        with pytest.raises(ValueError):
            intersect_lines(((0, 0), (1, 1), (2, 2)), ((0, 1), (1, 0)))
