"""
sparsecurve: interpolation and line intersection over sparse sample sets.

Given sampled ``{x: y}`` pairs, answer "what is y at this x", "where does
the curve reach this y" and "where do two sampled lines cross", on linear
or logarithmic x-axes.
"""

from . import libsparsecurve
from .libsparsecurve.axes import (
    AxisModel,
    DomainError,
    Equations,
    Scale,
    as_axis_model,
    equations_for,
)
from .libsparsecurve.intersection import intersect_lines
from .libsparsecurve.interpolation import (
    always,
    crossings,
    interpolate_x,
    interpolate_y,
)
from .libsparsecurve.locator import nearest, nearest_sequence, ordered_set
from .libsparsecurve.sequtils import filter_values, group_by, map_values, max_by, min_by

__version__ = "0.1.0"

__all__ = [
    "libsparsecurve",
    "AxisModel",
    "DomainError",
    "Equations",
    "Scale",
    "always",
    "as_axis_model",
    "crossings",
    "equations_for",
    "filter_values",
    "group_by",
    "intersect_lines",
    "interpolate_x",
    "interpolate_y",
    "map_values",
    "max_by",
    "min_by",
    "nearest",
    "nearest_sequence",
    "ordered_set",
]
