"""
Ordered-set search: bracketing and nearest-neighbour lookup.

``nearest`` snaps one value to the closest element of a set of numbers, and
``nearest_sequence`` snaps a whole sequence at once through a compiled
kernel.  Both use the same rule: the candidates are the smallest element
>= x ("above") and the largest element <= x ("below"); the closer one wins,
and "above" wins a tie.

Author: sparsecurve developers
"""

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from numba import njit

from .logger import get_logger
from .sequtils import min_by

log = get_logger(__name__)


def ordered_set(values: Iterable) -> np.ndarray:
    """
    Sorted, deduplicated array built from *values*.

    Parameters
    ----------
    values : iterable of real numbers

    Returns
    -------
    ndarray
        1D array, strictly increasing.
    """
    return np.unique(np.asarray(list(values)))


def bracket(sorted_values: np.ndarray, x: float) -> Tuple[Optional[int], Optional[int]]:
    """
    Indices of the elements that bracket *x*.

    Parameters
    ----------
    sorted_values : ndarray
        Strictly increasing 1D array.
    x : float
        Query value.

    Returns
    -------
    below : int or None
        Index of the largest element <= x, None if every element is > x.
    above : int or None
        Index of the smallest element >= x, None if every element is < x.

    Notes
    -----
    When *x* is itself an element both indices point at it.
    """
    n = len(sorted_values)
    lo = int(np.searchsorted(sorted_values, x, side="right")) - 1
    hi = int(np.searchsorted(sorted_values, x, side="left"))
    below = lo if lo >= 0 else None
    above = hi if hi < n else None
    return below, above


def nearest(values, x):
    """
    Element of *values* closest to *x*.

    Parameters
    ----------
    values : iterable of real numbers
        Non-empty.  Need not be sorted or unique.
    x : float
        Query value.

    Returns
    -------
    number
        The nearest element.  On a tie between the element above and the
        element below, the one above is returned.

    Raises
    ------
    ValueError
        If *values* is empty.
    """
    ordered = ordered_set(values)
    if ordered.size == 0:
        raise ValueError("nearest() needs a non-empty set of values")
    below, above = bracket(ordered, x)
    candidates = [ordered[i] for i in (above, below) if i is not None]
    return min_by(lambda v: abs(v - x), candidates).item()


@njit(cache=True)
def _nearest_indices(ordered, queries):
    """Compiled core of ``nearest_sequence``: index into *ordered* per query."""
    n = ordered.shape[0]
    out = np.empty(queries.shape[0], dtype=np.int64)
    for k in range(queries.shape[0]):
        q = queries[k]
        hi = np.searchsorted(ordered, q, side="left")
        lo = np.searchsorted(ordered, q, side="right") - 1
        if hi >= n:
            out[k] = lo
        elif lo < 0:
            out[k] = hi
        elif abs(ordered[hi] - q) <= abs(ordered[lo] - q):
            out[k] = hi
        else:
            out[k] = lo
    return out


def nearest_sequence(a: Sequence, b: Sequence) -> List:
    """
    Snap every element of *b* to its nearest element of *a*.

    Parameters
    ----------
    a : sequence of real numbers
        Reference values.  Need not be sorted or unique.
    b : sequence of real numbers
        Values to snap.

    Returns
    -------
    list
        Same length and order as *b*.  If *a* is empty, *b* is returned
        unchanged (as a list).
    """
    ordered = ordered_set(a)
    if ordered.size == 0:
        log.debug("nearest_sequence: empty reference set, returning input unchanged")
        return list(b)
    queries = np.asarray(list(b), dtype=np.float64)
    if queries.size == 0:
        return []
    idx = _nearest_indices(ordered.astype(np.float64), queries)
    return ordered[idx].tolist()
