"""Logging for the ``recycling_machine`` package.

Modules log through ``get_logger("recycling_machine.<module>")`` and never add
handlers. The ``rcm`` CLI calls ``configure_logging`` once, with the level from
``--log-level`` or ``RECYCLING_MACHINE_LOG_LEVEL`` (default ``INFO``).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

PACKAGE_LOGGER = "recycling_machine"
LOG_LEVEL_ENV = "RECYCLING_MACHINE_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def resolve_level(level: int | str | None) -> int:
    """Map a level name (``"debug"``, ``"WARNING"``...) or int to a logging level."""

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV) or "INFO"
    if isinstance(level, int):
        return level
    value = logging.getLevelNamesMapping().get(level.strip().upper())
    if value is None:
        raise ValueError(f"unknown log level: {level!r}")
    return value


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str = DEFAULT_FORMAT,
    stream: IO[str] | None = None,
) -> None:
    """Send package logs to ``stream`` (default ``sys.stderr``); later calls are no-ops."""

    global _handler
    if _handler is not None:
        return

    resolved = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(_handler)
    logger.setLevel(resolved)
    logger.propagate = False


def reset_logging() -> None:
    """Undo ``configure_logging`` so the next call starts fresh."""

    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _handler = None


def get_logger(name: str) -> logging.Logger:
    # Stay silent in library use until an application configures output.
    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "reset_logging", "resolve_level", "LOG_LEVEL_ENV"]
