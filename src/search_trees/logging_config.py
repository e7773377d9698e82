"""Centralized logging configuration for the search-trees project."""

import logging
import sys
from typing import Optional


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler_type: str = "stream"
) -> logging.Logger:
    """
    Set up centralized logging configuration for the project.

    Args:
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
        handler_type: Type of handler - only "stream" is supported

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    logger = logging.getLogger("search_trees")

    # Only the package logger's own handlers count; handlers on the root
    # logger (e.g. a test runner's capture handler) must not skip setup
    if logger.handlers:
        return logger

    formatter = logging.Formatter(format_string)

    if handler_type == "stream":
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    # Keep package records out of the root logger
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if not logging.getLogger("search_trees").handlers:
        setup_logging()

    if name == "search_trees" or name.startswith("search_trees."):
        return logging.getLogger(name)
    return logging.getLogger(f"search_trees.{name}")


def get_test_logger(name: str) -> logging.Logger:
    """
    Get a logger for tests with appropriate configuration.

    Args:
        name: Test module name

    Returns:
        Logger instance for tests
    """
    logger = logging.getLogger(f"Tests.{name}")

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger
