"""Minimal logging utilities for Simian.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from simian.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing statement")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "simian." prefix.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'simian.mymodule'
    """
    if not (name == "simian" or name.startswith("simian.")):
        name = f"simian.{name}"
    return logging.getLogger(name)
