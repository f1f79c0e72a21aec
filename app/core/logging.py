"""
Logging configuration.

One stdout handler on the root logger; modules get named loggers
via :func:`get_logger`.
"""

import logging
import sys

_FORMAT = "%(asctime)s - consistency-os - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name (usually ``__name__``)."""
    return logging.getLogger(name)
