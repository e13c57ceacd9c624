"""Centralized logging configuration for the ``ledgerview`` package.

``configure_logging`` is called once by entry points (the CLI). Library
modules only call ``get_logger(__name__)`` and never attach handlers.
"""

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "ledgerview"
_CONFIGURED = False


def parse_level(level: Union[int, str, None]) -> int:
    """Resolve a level name, numeric string or int to a logging level."""
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Unknown log level '{level}'")
    env_val = os.getenv("LEDGERVIEW_LOG_LEVEL")
    if env_val:
        return parse_level(env_val)
    return logging.WARNING


def configure_logging(
    level: Union[int, str, None] = None,
    *,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Attach a single stream handler to the package logger, once.

    Args:
        level: Level as int or name. Falls back to ``LEDGERVIEW_LOG_LEVEL``,
            then WARNING.
        fmt: Optional format string
        stream: Output stream for the handler
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    resolved = parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package quiet until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
