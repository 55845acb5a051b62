"""libsparsecurve sub-package: axis models, ordered-set search, interpolation."""

# Import modules themselves (allows: from sparsecurve.libsparsecurve import axes)
from . import axes
from . import intersection
from . import interpolation
from . import locator
from . import logger
from . import sequtils

__all__ = [
    "axes",
    "intersection",
    "interpolation",
    "locator",
    "logger",
    "sequtils",
]
