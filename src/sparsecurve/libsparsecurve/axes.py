"""
Axis model and equation families.

An axis model declares whether each chart axis is linear or logarithmic.
The pair selects one of the equation families below, and every downstream
computation (point interpolation, inverse interpolation, line fitting and
line intersection) goes through the selected family.

Only a linear y-axis is supported.  Any combination without its own entry in
the lookup table, including an unrecognized scale tag, silently uses the
linear/linear family.

Lines are written ``y = a * f(x) + b`` where ``f`` is the identity for a
linear x-axis and the natural log for a logarithmic one.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, NamedTuple, Tuple

import numpy as np

from .logger import get_logger

log = get_logger(__name__)


class DomainError(ArithmeticError):
    """Degenerate input: vertical segment, parallel lines, or log of x <= 0."""


# ---------------------------------------------------------------------------
# Scales and the axis model
# ---------------------------------------------------------------------------

class Scale(str, Enum):
    LINEAR = "linear"
    LOG = "log"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            canonical = _SCALE_ALIASES.get(value.strip().lower())
            if canonical is not None:
                return cls(canonical)
        return None


_SCALE_ALIASES = {
    "lin": "linear",
    "linear": "linear",
    "log": "log",
    "logarithmic": "log",
}


def _scale_tag(value: Any) -> Any:
    """Return the matching :class:`Scale`, or *value* itself when unknown."""
    try:
        return Scale(value)
    except ValueError:
        return value


class AxisModel(NamedTuple):
    x: Any = Scale.LINEAR
    y: Any = Scale.LINEAR


LINEAR_AXES = AxisModel(Scale.LINEAR, Scale.LINEAR)


def as_axis_model(axes: Any = None) -> AxisModel:
    """
    Coerce *axes* into an :class:`AxisModel`.

    Parameters
    ----------
    axes : None, AxisModel, (x, y) pair, or mapping with ``"x"`` and ``"y"``
        Scale tags may be :class:`Scale` members or strings such as
        ``"linear"``, ``"log"`` or ``"logarithmic"``.  ``None`` means
        linear/linear.  A missing key in a mapping defaults to linear.

    Returns
    -------
    AxisModel
        Recognized tags become :class:`Scale` members; unknown tags are kept
        as given.

    Raises
    ------
    ValueError
        If *axes* is a sequence that is not a pair.
    """
    if axes is None:
        return LINEAR_AXES
    if isinstance(axes, AxisModel):
        return AxisModel(_scale_tag(axes.x), _scale_tag(axes.y))
    if isinstance(axes, Mapping):
        return AxisModel(
            _scale_tag(axes.get("x", Scale.LINEAR)),
            _scale_tag(axes.get("y", Scale.LINEAR)),
        )
    if isinstance(axes, (tuple, list)):
        if len(axes) != 2:
            raise ValueError(f"Axis model needs exactly two scales, got {len(axes)}")
        return AxisModel(_scale_tag(axes[0]), _scale_tag(axes[1]))
    raise ValueError(f"Cannot interpret {axes!r} as an axis model")


# ---------------------------------------------------------------------------
# Straight-line algebra in the transformed coordinate u = f(x)
# ---------------------------------------------------------------------------

def _interp(u, u1, y1, u2, y2):
    if u1 == u2:
        raise DomainError(f"Cannot interpolate between two points at the same x ({u1})")
    return y1 + (y2 - y1) * (u - u1) / (u2 - u1)


def _inverse(y, u1, y1, u2, y2):
    if y1 == y2:
        raise DomainError(f"Cannot invert a flat segment (y = {y1})")
    return u1 + (u2 - u1) * (y - y1) / (y2 - y1)


def _line(u1, y1, u2, y2) -> Tuple[float, float]:
    if u1 == u2:
        raise DomainError(f"Vertical segment at x = {u1} has no line equation")
    a = (y2 - y1) / (u2 - u1)
    return a, y1 - a * u1


def _solve(a1, b1, a2, b2) -> Tuple[float, float]:
    if a1 == a2:
        raise DomainError(f"Parallel lines (slope {a1}) do not intersect")
    u = (b2 - b1) / (a1 - a2)
    return u, a1 * u + b1


def _ln(x) -> float:
    if x <= 0:
        raise DomainError(f"x must be positive on a logarithmic axis, got {x}")
    return float(np.log(x))


# ---------------------------------------------------------------------------
# Linear x / linear y
# ---------------------------------------------------------------------------

def linear_point_interpolate(x, x1, y1, x2, y2) -> float:
    return float(_interp(x, x1, y1, x2, y2))


def linear_x_at_y(y, x1, y1, x2, y2) -> float:
    return float(_inverse(y, x1, y1, x2, y2))


def linear_line_equation(x1, y1, x2, y2) -> Tuple[float, float]:
    a, b = _line(x1, y1, x2, y2)
    return float(a), float(b)


def linear_intersection(a1, b1, a2, b2) -> Tuple[float, float]:
    x, y = _solve(a1, b1, a2, b2)
    return float(x), float(y)


# ---------------------------------------------------------------------------
# Logarithmic x / linear y
# ---------------------------------------------------------------------------

def logx_point_interpolate(x, x1, y1, x2, y2) -> float:
    return float(_interp(_ln(x), _ln(x1), y1, _ln(x2), y2))


def logx_x_at_y(y, x1, y1, x2, y2) -> float:
    return float(np.exp(_inverse(y, _ln(x1), y1, _ln(x2), y2)))


def logx_line_equation(x1, y1, x2, y2) -> Tuple[float, float]:
    a, b = _line(_ln(x1), y1, _ln(x2), y2)
    return float(a), float(b)


def logx_intersection(a1, b1, a2, b2) -> Tuple[float, float]:
    u, y = _solve(a1, b1, a2, b2)
    return float(np.exp(u)), float(y)


# ---------------------------------------------------------------------------
# Lookup table
# ---------------------------------------------------------------------------

class Equations(NamedTuple):
    """The operations one axis combination provides."""

    point_interpolate: Callable[..., float]
    x_at_y: Callable[..., float]
    line_equation: Callable[..., Tuple[float, float]]
    intersection: Callable[..., Tuple[float, float]]


LINEAR_EQUATIONS = Equations(
    linear_point_interpolate,
    linear_x_at_y,
    linear_line_equation,
    linear_intersection,
)

LOGX_EQUATIONS = Equations(
    logx_point_interpolate,
    logx_x_at_y,
    logx_line_equation,
    logx_intersection,
)

EQUATION_TABLE = {
    (Scale.LINEAR, Scale.LINEAR): LINEAR_EQUATIONS,
    (Scale.LOG, Scale.LINEAR): LOGX_EQUATIONS,
}


def equations_for(axes: Any = None) -> Equations:
    """
    Select the equation family for an axis model.

    Parameters
    ----------
    axes : anything accepted by :func:`as_axis_model`

    Returns
    -------
    Equations
        The family registered for ``(axes.x, axes.y)``; linear/linear when
        the combination has no entry.
    """
    model = as_axis_model(axes)
    key = (model.x, model.y)
    try:
        return EQUATION_TABLE[key]
    except (KeyError, TypeError):
        log.debug("No equations for x=%s, y=%s; using linear/linear", model.x, model.y)
        return LINEAR_EQUATIONS
