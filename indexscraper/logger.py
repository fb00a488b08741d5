# === FILE: indexscraper/logger.py ===
"""Logging for **IndexScraper**.

Every module logs through one named logger::

    from indexscraper.logger import logger, progress

Per-page progress (fetches, stash hits and writes, recovered HTTP failures)
goes through :func:`progress`: INFO for a verbose scraper, DEBUG otherwise.
:func:`configure` attaches the console handler and, when the config names
one, a rotating log file.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

_DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_LOGGER_NAME: Final[str] = "IndexScraper"

_LevelT = Union[int, str]

logger: logging.Logger = logging.getLogger(_LOGGER_NAME)


def _file_handler(file: Path | str, fmt: str) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        filename=str(file),
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    log_format: str = _DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the project logger's handlers: stdout, plus *log_file* if given."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(log_format))
    logger.addHandler(console)
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, log_format))

    logger.propagate = False
    return logger


def configure_scraper(verbose: bool, log_file: str | Path | None = None) -> logging.Logger:
    """Show per-page progress only for a verbose scraper; warnings always."""
    return configure(level="INFO" if verbose else "WARNING", log_file=log_file)


def progress(verbose: bool, msg: str, *args: object) -> None:
    logger.log(logging.INFO if verbose else logging.DEBUG, msg, *args)


configure()

__all__ = ["logger", "configure", "configure_scraper", "progress"]
