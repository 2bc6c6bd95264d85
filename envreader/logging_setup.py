"""Logging setup for envreader.

The screen belongs to the TUI, so records only ever go to a log file.
Without a configured level the package logger stays silent.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"
_OWNED_MARKER = "_envreader_owned"


def _attach(package_logger: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _OWNED_MARKER, True)
    package_logger.addHandler(handler)


def setup_logging(level: int | None, log_file: Path | None = None) -> Path | None:
    """Attach a file handler to the package logger.

    Args:
        level: Logging level, or ``None`` to leave logging disabled.
        log_file: Override for the log path (defaults to the user log dir).

    Returns:
        The log file path in use, or ``None`` when logging is disabled.
    """
    package_logger = logging.getLogger(APP_NAME)
    package_logger.propagate = False
    for stale in [h for h in package_logger.handlers if getattr(h, _OWNED_MARKER, False)]:
        package_logger.removeHandler(stale)
        stale.close()
    if level is None:
        _attach(package_logger, logging.NullHandler())
        return None

    path = log_file if log_file is not None else LOG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    _attach(package_logger, handler)
    package_logger.setLevel(level)
    return path
