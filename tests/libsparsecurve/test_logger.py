"""
Tests for logger — hierarchy, custom level and one-time setup.
"""
import io
import logging

import pytest

from sparsecurve.libsparsecurve import logger
from sparsecurve.libsparsecurve.interpolation import crossings


@pytest.fixture
def root():
    """Detach and restore handlers/level on the sparsecurve root logger."""
    log = logging.getLogger(logger.ROOT_NAME)
    saved_handlers, saved_level = log.handlers[:], log.level
    log.handlers = []
    yield log
    log.handlers = saved_handlers
    log.setLevel(saved_level)


def test_module_loggers_share_root():
    log = logger.get_logger("sparsecurve.libsparsecurve.axes")
    assert log.name.startswith(logger.ROOT_NAME)
    assert logger.get_logger().name == logger.ROOT_NAME


def test_set_level_names(root):
    logger.set_level("debug2")
    assert root.level == logger.DEBUG2
    logger.set_level("WARNING")
    assert root.level == logging.WARNING
    logger.set_level(logging.ERROR)
    assert root.level == logging.ERROR


def test_set_level_unknown_name(root):
    with pytest.raises(ValueError):
        logger.set_level("chatty")


def test_setup_is_idempotent(root):
    buf = io.StringIO()
    logger.setup(logging.INFO, stream=buf)
    logger.setup(logging.DEBUG, stream=io.StringIO())
    assert len(root.handlers) == 1
    assert root.level == logging.INFO


def test_debug2_traces_segments(root):
    buf = io.StringIO()
    logger.setup("debug2", stream=buf)
    crossings({0: 0, 5: 10, 10: 0}, 5)
    out = buf.getvalue()
    assert "DEBUG2" in out
    assert "crosses y=5" in out


def test_debug2_silent_at_info(root):
    buf = io.StringIO()
    logger.setup(logging.INFO, stream=buf)
    crossings({0: 0, 5: 10, 10: 0}, 5)
    assert buf.getvalue() == ""
