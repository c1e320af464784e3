"""
Logging helpers for neko.

Diagnostics go through the standard logging module on stderr. The
user-facing "neko: name: message" reports are printed by the CLI and do
not depend on the configured level.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "neko"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def level_for_verbosity(verbosity: int) -> int:
    """
    Map a --verbose count to a logging level.

    verbosity == 0 -> WARNING
    verbosity == 1 -> INFO
    verbosity >= 2 -> DEBUG
    """

    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the package logger based on a verbosity count.

    Calling this again swaps out the handler installed by the previous
    call, so repeated in-process runs never duplicate output.
    """

    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level_for_verbosity(verbosity))
    return logger
