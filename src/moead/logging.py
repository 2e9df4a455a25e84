"""
Opt-in console logging for the optimizer.

Every module logs through ``logging.getLogger(__name__)`` under the
``moead`` namespace and never configures handlers itself. Applications
either set up ``logging`` on their own or call ``configure_moead_logging``;
the ``moead-run`` CLI does the latter.
"""

from __future__ import annotations

import logging
from typing import IO, Optional

LOGGER_NAME = "moead"
_PLAIN_FORMAT = "%(message)s"
_DEBUG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_moead_logging(*, level: int = logging.INFO, stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Route ``moead`` log records to the console.

    Parameters
    ----------
    level : int
        Threshold for the ``moead`` logger. At DEBUG the records also carry
        their level and module name, which makes per-generation traces
        readable.
    stream : file-like, optional
        Target of the handler; ``sys.stderr`` when omitted.

    Returns
    -------
    logging.Logger
        The package logger.

    Notes
    -----
    If the root or the ``moead`` logger already has handlers only the level
    is adjusted, so calling this twice never duplicates output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logging.getLogger().handlers or logger.handlers:
        return logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_DEBUG_FORMAT if level <= logging.DEBUG else _PLAIN_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = ["LOGGER_NAME", "configure_moead_logging"]
