"""Tests for logging utilities."""

import logging
from io import StringIO

import numpy as np

from fmin.logging import configure_logging, get_logger, set_log_level
from fmin.optimize import conjugate_gradient


def test_get_logger_returns_namespaced_logger():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "fmin.test_module"


def test_get_logger_keeps_package_names():
    assert get_logger("fmin.optimize.gradient").name == "fmin.optimize.gradient"
    assert get_logger().name == "fmin"


def test_get_logger_caching():
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_set_log_level_string():
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_redirects_stream():
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        get_logger("test_module").debug("Debug message")
        output = stream.getvalue()
        assert "Debug message" in output
        assert "[DEBUG] fmin.test_module" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_optimizer_reports_exit_at_debug_level():
    def sphere(x, fxprime):
        fxprime[:] = 2 * x
        return float(x @ x)

    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        conjugate_gradient(sphere, np.array([1.0, -1.0]))
        assert "conjugate_gradient: Gradient tolerance satisfied." in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_optimizer_is_silent_at_default_level():
    def sphere(x, fxprime):
        fxprime[:] = 2 * x
        return float(x @ x)

    stream = StringIO()
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        conjugate_gradient(sphere, np.array([1.0, -1.0]))
        assert stream.getvalue() == ""
    finally:
        configure_logging(level=logging.WARNING)
