"""Tests for logging utilities."""

import logging
from io import StringIO

import numpy as np

from gradkit.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)
from gradkit.optimize import GDConfig, batch_gradient_descent


def test_get_logger_returns_logger():
    """Test that get_logger returns a namespaced logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "gradkit.test_module"


def test_get_logger_keeps_full_module_path():
    logger = get_logger("gradkit.optimize.gradient")
    assert logger.name == "gradkit.optimize.gradient"


def test_get_logger_default_name():
    assert get_logger().name == "gradkit"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2
    # pytest may attach its own capture handlers; count only ours
    assert sum(type(h) is logging.StreamHandler for h in logger1.handlers) == 1


def test_get_logger_different_modules():
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_configure_logging_redirects_output():
    """Test configure_logging routes messages to the given stream."""
    logger = get_logger("test_module")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger.debug("Debug message")
        output = stream.getvalue()
        assert "Debug message" in output
        assert "[DEBUG] gradkit.test_module" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_configure_logging_applies_to_later_loggers():
    """Loggers created after configure_logging inherit its stream and format."""
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, format_string="%(name)s|%(message)s", stream=stream)
        logger = get_logger("created_after_configure")
        logger.info("late message")
    finally:
        configure_logging(level=logging.WARNING)
    assert "gradkit.created_after_configure|late message" in stream.getvalue()


def test_set_log_level():
    logger = get_logger("test_module")
    set_log_level(logging.INFO)
    assert logger.level == logging.INFO
    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_logger_does_not_propagate():
    logger = get_logger("test_module")
    assert logger.propagate is False


def test_solver_warns_once_on_divergence():
    """A runaway learning rate is reported once, not once per iteration."""
    stream = StringIO()
    X = np.array([[1.0, 50.0], [1.0, 80.0], [1.0, 100.0]])
    y = np.array([100.0, 160.0, 200.0])
    try:
        configure_logging(level=logging.WARNING, stream=stream)
        res = batch_gradient_descent(X, y, GDConfig(learning_rate=1.0, iterations=300))
    finally:
        configure_logging(level=logging.WARNING)
    assert not np.all(np.isfinite(res.costs))
    assert stream.getvalue().count("non-finite") == 1


def test_solver_reports_convergence_at_info():
    stream = StringIO()
    X = np.array([[1.0, 1.0], [1.0, 2.0], [1.0, 3.0]])
    y = np.array([3.0, 5.0, 7.0])
    try:
        configure_logging(level=logging.INFO, stream=stream)
        batch_gradient_descent(X, y, GDConfig(learning_rate=0.1, iterations=10_000))
    finally:
        configure_logging(level=logging.WARNING)
    assert "batch_gradient_descent: converged" in stream.getvalue()
