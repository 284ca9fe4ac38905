"""Logging setup for the ``letterpuzzle`` logger tree."""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "letterpuzzle"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach one stderr handler to the ``letterpuzzle`` logger and set its level.

    Only the package logger is touched; handlers an application put on the root
    logger are left alone and do not receive duplicate records. Calling this
    again replaces the handler instead of stacking another one.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under ``letterpuzzle``; the package logger is set up on first use."""

    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    name = name or PACKAGE_LOGGER
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
