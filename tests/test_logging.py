"""Tests for logging utilities."""

import logging
from io import StringIO

import numpy as np

from boxopt import ClassicGradientDescent, GradNormStopCriterion
from boxopt.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "boxopt.test_module"


def test_get_logger_keeps_package_prefix():
    assert get_logger("boxopt.region").name == "boxopt.region"
    assert get_logger().name == "boxopt"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging():
    """Test configure_logging function."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    try:
        get_logger("test_module").debug("Debug message")
        get_logger("created_after_configure").debug("Late message")
    finally:
        configure_logging(level=logging.WARNING)
    output = stream.getvalue()
    assert "Debug message" in output
    assert "Late message" in output
    assert "[DEBUG] boxopt.test_module:" in output


def test_optimise_logs_run_summary(valley, box):
    stream = StringIO()
    configure_logging(level=logging.INFO, stream=stream)
    try:
        ClassicGradientDescent().optimise(
            np.array([2.0, 1.9]), box, valley, GradNormStopCriterion(0.0, 2)
        )
    finally:
        configure_logging(level=logging.WARNING)
    assert "ClassicGradientDescent finished after 2 iterations" in stream.getvalue()


def test_start_outside_region_warns(valley, box):
    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    try:
        ClassicGradientDescent().optimise(
            [6.0, 0.0], box, valley, GradNormStopCriterion(0.0, 1)
        )
    finally:
        configure_logging(level=logging.WARNING)
    assert "lies outside" in stream.getvalue()


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    assert get_logger("test_module").propagate is False


def test_configure_logging_format_applies_to_later_loggers():
    stream = StringIO()
    configure_logging(level=logging.INFO, format_string="%(levelname)s|%(message)s", stream=stream)
    try:
        get_logger("test_module").info("Existing logger")
        get_logger("created_after_format").info("New logger")
    finally:
        configure_logging(level=logging.WARNING)
    lines = stream.getvalue().splitlines()
    assert "INFO|Existing logger" in lines
    assert "INFO|New logger" in lines
