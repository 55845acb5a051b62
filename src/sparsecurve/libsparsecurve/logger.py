"""
Thin wrapper around Python's ``logging`` module for sparsecurve.

Every module logs through a logger under the ``sparsecurve`` hierarchy, so a
single ``set_level()`` call controls the whole library.  One extra level sits
below DEBUG for per-segment tracing inside the interpolators.

Usage
-----
>>> from sparsecurve.libsparsecurve.logger import get_logger
>>> log = get_logger(__name__)
>>> log.debug("bracket found")
>>> log.debug2("segment 3 straddles y")     # custom level
"""

import logging
import sys

ROOT_NAME = "sparsecurve"

# ── Custom level (below DEBUG=10) ───────────────────────────────────────
DEBUG2 = 9

logging.addLevelName(DEBUG2, "DEBUG2")


class _CurveLogger(logging.Logger):
    """Logger subclass that adds a ``debug2`` convenience method."""

    def debug2(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG2):
            self._log(DEBUG2, msg, args, **kwargs)


logging.setLoggerClass(_CurveLogger)

# ── Level names accepted by set_level() in addition to logging's own ────
LEVEL_NAMES = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "debug2": DEBUG2,
}


def get_logger(name: str | None = None) -> _CurveLogger:
    """Return a logger under the ``sparsecurve`` hierarchy.

    Module names such as ``sparsecurve.libsparsecurve.axes`` inherit from
    the ``sparsecurve`` root logger.
    """
    return logging.getLogger(name or ROOT_NAME)


def set_level(level: int | str = logging.INFO) -> None:
    """Set the log level for *all* sparsecurve loggers at once.

    Accepts Python level ints or names (case-insensitive, ``"debug2"``
    included).
    """
    if isinstance(level, str):
        try:
            level = LEVEL_NAMES[level.lower()]
        except KeyError:
            raise ValueError(f"Unknown log level name: {level!r}") from None
    logging.getLogger(ROOT_NAME).setLevel(level)


def setup(level: int | str = logging.INFO, stream=None) -> None:
    """One-time setup: attach a stderr handler with the sparsecurve format.

    Extra calls are no-ops.
    """
    root = logging.getLogger(ROOT_NAME)
    if root.handlers:
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-7s: %(message)s"))
    root.addHandler(handler)
    set_level(level)
