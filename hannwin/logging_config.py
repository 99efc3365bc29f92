"""
Logging configuration.

The package only emits records; applications decide where they go.

Usage:
    from hannwin.logging_config import setup_logging, get_logger

    # Call once at startup to see table build messages on stdout
    setup_logging(logging.DEBUG)

    # Get logger in any module
    logger = get_logger(__name__)
"""
from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "hannwin"

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str) -> logging.Logger:
    """Return a logger, normally called with __name__."""
    return logging.getLogger(name)


def create_console_handler(level=logging.INFO, stream=None) -> logging.Handler:
    """
    Create a console handler.

    Args:
        level: Logging level for the handler
        stream: Output stream (stdout when None)

    Returns:
        StreamHandler configured with the console formatter
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    handler.set_name(f"{PACKAGE_LOGGER}-console")
    return handler


def setup_logging(level=logging.INFO, stream=None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling it again replaces the handler installed by an earlier call.

    Args:
        level: Level for both the logger and the console handler
        stream: Output stream (stdout when None)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == f"{PACKAGE_LOGGER}-console":
            logger.removeHandler(existing)
    logger.addHandler(create_console_handler(level, stream))
    logger.setLevel(level)
    return logger
