"""Logging helpers for codemedic.

All modules log under the ``codemedic`` hierarchy. Reports are written to
stdout, so log records always go to stderr (or a file) and stay out of the
rendered output.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "codemedic"
_CONSOLE_FORMAT = "[codemedic] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the codemedic hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach stderr and optional file handlers to the codemedic logger.

    The console shows warnings (per-file parse failures, unreadable
    directories) unless ``verbose`` is set, in which case scan progress is
    shown too. A log file always receives everything from INFO up.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING
    file_level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(min(console_level, file_level) if log_file else console_level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(console_level)
    stream_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
