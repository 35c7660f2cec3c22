"""Logging setup for deskparse — optional file handler, module loggers and log path."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "deskparse"
LOG_MAX_BYTES = 512 * 1024  # 512 KB
LOG_BACKUP_COUNT = 2
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

_log_file: Path | None = None


def setup_logging(level: int | str = logging.INFO, log_file: str | Path | None = None) -> logging.Logger:
    """Attach a handler to the package logger.

    With ``log_file`` a rotating file handler is used; if the file cannot be
    opened, or no file is given, records go to stderr instead. Calling this
    twice does not add a second handler.
    """
    global _log_file

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)

    if any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        return root

    handler: logging.Handler
    if log_file is not None:
        path = Path(log_file)
        try:
            from logging.handlers import RotatingFileHandler

            path.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                path,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            _log_file = path
        except OSError:
            handler = logging.StreamHandler(sys.stderr)
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    root.addHandler(handler)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def get_log_path() -> Path | None:
    """Return the path of the active log file, if logging to a file."""
    return _log_file
