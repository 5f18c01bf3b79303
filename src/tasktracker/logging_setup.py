"""Logging configuration for tasktracker."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "tasktracker"


def setup_logging(level: str | int = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Configure the ``tasktracker`` logger.

    Logs go to stderr and, when ``log_file`` is given, also to that file.
    Calling this again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(fmt)
    logger.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger
