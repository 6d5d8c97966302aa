"""Minimal logging utilities for exprcheck.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from exprcheck.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning expression")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "exprcheck." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'exprcheck.mymodule'
    """
    if not (name == "exprcheck" or name.startswith("exprcheck.")):
        name = f"exprcheck.{name}"
    return logging.getLogger(name)
