"""Opt-in logging setup for scripts and notebooks.

Every module logs through ``logging.getLogger(__name__)`` and the package
root only carries a :class:`logging.NullHandler`, so nothing is printed
unless an application asks for it.  :func:`setup_logging` attaches
visible handlers to the ``pygeocalc`` logger; at DEBUG level they show
rejected inputs and the branch each piecewise formula took.
"""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "pygeocalc"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _remove_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: int = logging.INFO,
    log_file: str | os.PathLike[str] | None = None,
) -> logging.Logger:
    """Send ``pygeocalc`` records to stdout and, optionally, a file.

    A second call replaces (and closes) the handlers of the first one.

    Args:
        level: Threshold of the package logger and of its handlers.
        log_file: Log file path.  The file is truncated on open.

    Returns:
        The ``pygeocalc`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    _remove_handlers(logger)
    logger.setLevel(level)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(logging.FileHandler(os.fspath(log_file), mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("%d handler(s) at %s", len(handlers), logging.getLevelName(level))
    return logger
