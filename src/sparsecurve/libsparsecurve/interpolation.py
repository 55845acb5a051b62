"""
Interpolation over sparse, irregularly spaced sample sets.

A sample set is a mapping ``{x: y}`` with unique x.  It is never modified;
each call sorts a private copy by x.

* ``interpolate_y`` — y at a given x, from the two samples that bracket it.
* ``interpolate_x`` — x at a given y.  A horizontal line can cross the
  sampled curve more than once, so every crossing is found and a selector
  (``min`` by default) picks the answer.
* ``crossings``     — the full, ascending list of those candidate x values.

"No value" (query outside the sampled range, predicate refusal, no
crossing) is returned as ``None``.  Degenerate geometry raises
:class:`~sparsecurve.libsparsecurve.axes.DomainError`.

Author: sparsecurve developers
"""

from typing import Callable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
from numba import njit

from .axes import equations_for
from .locator import bracket
from .logger import get_logger
from .sequtils import filter_values

log = get_logger(__name__)

Predicate = Callable[[float, float], bool]
Selector = Callable[[Sequence[float]], float]


def always(_a, _b) -> bool:
    """Default interpolation predicate: every gap may be interpolated."""
    return True


def sorted_samples(samples: Mapping) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split a sample set into x and y arrays ordered by x.

    Parameters
    ----------
    samples : mapping of float to float

    Returns
    -------
    xs, ys : ndarray
        float64 arrays of equal length, xs strictly increasing.
    """
    xs = np.array(list(samples.keys()), dtype=np.float64)
    ys = np.array(list(samples.values()), dtype=np.float64)
    order = np.argsort(xs, kind="stable")
    return xs[order], ys[order]


# ===================================================================
#  Y from X
# ===================================================================

def interpolate_y(samples: Mapping, x, axes=None, predicate: Predicate = always):
    """
    Value of the sampled curve at *x*.

    Parameters
    ----------
    samples : mapping of float to float
        The sample set.
    x : float
        Query position.
    axes : axis model, optional
        Anything accepted by ``as_axis_model``; linear/linear by default.
    predicate : callable, optional
        ``predicate(x_below, x_above)`` decides whether the gap between
        the bracketing samples may be interpolated.

    Returns
    -------
    float or None
        The stored value when *x* is a sample, otherwise the interpolated
        value.  None when *x* lies outside the sampled range or the
        predicate rejects the gap.
    """
    if x in samples:
        return samples[x]

    xs, ys = sorted_samples(samples)
    below, above = bracket(xs, x)
    if below is None or above is None:
        log.debug("interpolate_y: x=%s outside sampled range", x)
        return None

    x1, y1 = float(xs[below]), float(ys[below])
    x2, y2 = float(xs[above]), float(ys[above])
    if not predicate(x1, x2):
        log.debug("interpolate_y: gap [%s, %s] rejected by predicate", x1, x2)
        return None

    return equations_for(axes).point_interpolate(x, x1, y1, x2, y2)


# ===================================================================
#  X from Y
# ===================================================================

@njit(cache=True)
def _straddling_segments(ys, y):
    """
    Indices i for which *y* lies strictly between ys[i] and ys[i+1].

    Flat segments (ys[i] == ys[i+1]) never qualify.
    """
    n = ys.shape[0]
    out = np.empty(max(n - 1, 0), dtype=np.int64)
    count = 0
    for i in range(n - 1):
        y1 = ys[i]
        y2 = ys[i + 1]
        if (y1 < y < y2) or (y1 > y > y2):
            out[count] = i
            count += 1
    return out[:count]


def crossings(samples: Mapping, y, axes=None, predicate: Predicate = always) -> List:
    """
    Every x at which the sampled curve takes the value *y*.

    Parameters
    ----------
    samples : mapping of float to float
        The sample set.
    y : float
        Query value.
    axes : axis model, optional
        Selects the inverse-interpolation form; linear/linear by default.
    predicate : callable, optional
        ``predicate(y1, y2)`` decides whether a straddling segment with end
        values y1, y2 may be interpolated.

    Returns
    -------
    list
        Ascending.  Contains the keys whose value equals *y* exactly and
        one interpolated x per accepted segment that strictly straddles *y*.
        A local peak or trough equal to *y* is only reported as its own
        exact match.
    """
    exact = list(filter_values(lambda v: v == y, samples))

    xs, ys = sorted_samples(samples)
    if xs.size < 2:
        return sorted(exact)

    equations = equations_for(axes)
    found = []
    for i in _straddling_segments(ys, float(y)):
        x1, y1 = float(xs[i]), float(ys[i])
        x2, y2 = float(xs[i + 1]), float(ys[i + 1])
        if not predicate(y1, y2):
            log.debug2("crossings: segment [%s, %s] rejected by predicate", x1, x2)
            continue
        crossing = equations.x_at_y(y, x1, y1, x2, y2)
        log.debug2("crossings: segment [%s, %s] crosses y=%s at x=%s", x1, x2, y, crossing)
        found.append(crossing)

    return sorted(exact + found)


def interpolate_x(
    samples: Mapping,
    y,
    axes=None,
    predicate: Predicate = always,
    selector: Selector = min,
) -> Optional[float]:
    """
    Position at which the sampled curve takes the value *y*.

    Parameters
    ----------
    samples : mapping of float to float
        The sample set.
    y : float
        Query value.
    axes : axis model, optional
        Linear/linear by default.
    predicate : callable, optional
        Gap filter, see :func:`crossings`.
    selector : callable, optional
        Reduces the ascending candidate list to one answer; ``min`` by
        default.

    Returns
    -------
    float or None
        None when the curve never takes the value *y*.
    """
    candidates = crossings(samples, y, axes=axes, predicate=predicate)
    if not candidates:
        log.debug("interpolate_x: no crossing for y=%s", y)
        return None
    return selector(candidates)
