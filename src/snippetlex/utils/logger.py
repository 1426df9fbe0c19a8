"""Minimal logging utilities for snippetlex.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from snippetlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning snippet")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "snippetlex." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'snippetlex.mymodule'
    """
    if not (name == "snippetlex" or name.startswith("snippetlex.")):
        name = f"snippetlex.{name}"
    return logging.getLogger(name)
