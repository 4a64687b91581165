"""Logging setup for command-line use.

Library modules only create module-level loggers; handlers are installed here
so that importing pydopa never changes the caller's logging configuration.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``pydopa`` logger."""
    logger = logging.getLogger("pydopa")
    logger.setLevel(level.upper())
    logger.handlers.clear()

    stream = logging.StreamHandler()
    stream.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stream)
    return logger
