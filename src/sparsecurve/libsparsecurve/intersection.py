"""
Intersection of two straight segments on a linear or log-x chart.

Author: sparsecurve developers
"""

from typing import Sequence, Tuple

from .axes import equations_for
from .logger import get_logger

log = get_logger(__name__)

Point = Tuple[float, float]
Segment = Sequence[Point]


def intersect_lines(segment_a: Segment, segment_b: Segment, axes=None) -> Point:
    """
    Crossing point of the lines through two segments.

    Each segment is fitted to ``y = a * f(x) + b`` in the coordinates of the
    axis model (``f`` is ``ln`` for a logarithmic x-axis), the two equations
    are solved together, and the log transform is undone on the result.

    Parameters
    ----------
    segment_a, segment_b : ((x1, y1), (x2, y2))
        Two endpoints each, with distinct x.
    axes : axis model, optional
        Linear/linear by default.

    Returns
    -------
    (x, y) : tuple of float
        The lines are extended beyond the segment ends as needed.

    Raises
    ------
    DomainError
        If a segment is vertical or the two lines are parallel.
    ValueError
        If a segment does not have exactly two endpoints.
    """
    equations = equations_for(axes)
    a1, b1 = equations.line_equation(*_endpoints(segment_a))
    a2, b2 = equations.line_equation(*_endpoints(segment_b))
    log.debug("intersect_lines: y = %s u + %s vs y = %s u + %s", a1, b1, a2, b2)
    return equations.intersection(a1, b1, a2, b2)


def _endpoints(segment: Segment) -> Tuple[float, float, float, float]:
    if len(segment) != 2:
        raise ValueError(f"A segment needs exactly two endpoints, got {len(segment)}")
    (x1, y1), (x2, y2) = segment
    return x1, y1, x2, y2
