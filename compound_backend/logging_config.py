"""Logging setup shared by the API and scripts."""

from __future__ import annotations

import logging
from typing import Optional

__all__ = ["configure_logging", "get_logger", "LOG_FORMAT"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_ROOT_LOGGER = "compound_backend"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Safe to call more than once (e.g. one app per test): the same handler
    is reused and the level is always updated. Records do not propagate
    to the root logger, so a host that configures logging itself does not
    see every line twice.
    """
    global _handler
    logger = logging.getLogger(_ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    logger.propagate = False

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger under the package namespace, so ``configure_logging`` reaches it."""
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
