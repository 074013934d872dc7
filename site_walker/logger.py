# === FILE: site_walker/logger.py ===
"""Logging setup for **SiteWalker**.

Modules log through the shared :data:`logger`::

    from site_walker.logger import logger
    logger.info("Crawling: %s", url)

Console lines carry only the message, so ``Crawling: <url>`` progress reads as
plain program output. An optional log file gets the timestamped form.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

CONSOLE_FORMAT: Final[str] = "%(message)s"
FILE_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "SiteWalker"

_MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 3


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _rotating_handler(path: Union[str, Path]) -> logging.Handler:
    handler = RotatingFileHandler(
        filename=str(path),
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def configure(
    *, level: Union[int, str] = "INFO", log_file: Optional[Union[str, Path]] = None
) -> logging.Logger:
    """Drop the project logger's handlers and attach fresh ones.

    ``sys.stdout`` is looked up on every call, so the CLI can rebind output
    to whatever stream is current (CliRunner swaps it during tests).
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)

    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    lg.addHandler(_console_handler())
    if log_file is not None:
        lg.addHandler(_rotating_handler(log_file))

    lg.propagate = False
    return lg


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "LOGGER_NAME"]
