# src/hl7_definitions/logging_utils.py
"""
Logging utilities for hl7_definitions.

The schema compiler reports build warnings (disabled tables, skipped
versions) through the "hl7_definitions" logger; this module gives the CLI a
single entry point to route them.
"""

import logging
import sys
from typing import IO, Optional

LOGGER_NAME = "hl7_definitions"

_VERBOSITY_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,  # any value >= 2 maps to DEBUG
}


def configure_logging(
    verbosity: int = 0, stream: Optional[IO[str]] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Parameters
    ----------
    verbosity : int, default=0
        Verbosity level:
        - 0 -> WARNING (build warnings only)
        - 1 -> INFO
        - 2 or higher -> DEBUG
        Must be a non-negative integer.
    stream : IO[str] or None, default=None
        Target stream for the StreamHandler. Defaults to sys.stderr if None.

    Returns
    -------
    logging.Logger
        The configured "hl7_definitions" logger.

    Raises
    ------
    TypeError
        If verbosity is not an int, or if a stream is provided that does not
        have a write method.
    ValueError
        If verbosity is negative.
    """
    # bool is an int subclass but never a meaningful verbosity
    if not isinstance(verbosity, int) or isinstance(verbosity, bool):
        raise TypeError(f"verbosity must be int, got {type(verbosity).__name__}")
    if verbosity < 0:
        raise ValueError(f"verbosity must be non-negative, got {verbosity}")

    level = _VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)

    if stream is None:
        stream = sys.stderr
    elif not hasattr(stream, "write"):
        raise TypeError("stream must be file-like (support .write(...))")

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    # Replace only our StreamHandlers; leave others (e.g. FileHandler) intact
    logger.handlers = [
        h
        for h in logger.handlers
        if not isinstance(h, logging.StreamHandler)
        or isinstance(h, logging.FileHandler)
    ]
    logger.addHandler(handler)
    logger.setLevel(level)

    return logger
