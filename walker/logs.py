"""Logging setup for the interactive session.

The TUI owns the terminal, so records only go to a file when one is
requested via ``--log-file`` or ``WALKER_LOG``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PACKAGE_LOGGER = "walker"


def configure_logging(log_file: Path | str | None = None) -> logging.Logger:
    """Attach a file handler (or a null handler) to the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    target = log_file or os.environ.get("WALKER_LOG")
    level = logging.DEBUG if os.environ.get("WALKER_DEBUG") else logging.INFO
    if target:
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
