"""Minimal logging utilities for loxscan.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from loxscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name, namespaced under "loxscan.".

    Example:
        >>> get_logger("mymodule").name
        'loxscan.mymodule'
    """
    if not (name == "loxscan" or name.startswith("loxscan.")):
        name = f"loxscan.{name}"
    return logging.getLogger(name)
