"""Logging setup for the ``SorinPrimo`` package logger.

Console lines read ``10-19 14:02:11 [INFO] message``. With file logging on,
each CLI action also writes a DEBUG-level log under ``<log_dir>/<action>/``,
so request URLs and response sizes of a failed search can be inspected later.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

LOGGER_NAME: Final = "SorinPrimo"
LINE_FORMAT: Final = "%(asctime)s [%(levelabbr)s] %(message)s"
DATE_FORMAT: Final = "%m-%d %H:%M:%S"

_LEVEL_TAGS: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "CRIT",
}

log = logging.getLogger(LOGGER_NAME)


class LevelTagFormatter(logging.Formatter):
    """Formatter that exposes a four-letter ``levelabbr`` on each record."""

    def __init__(self) -> None:
        super().__init__(fmt=LINE_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - stdlib name
        record.levelabbr = _LEVEL_TAGS.get(record.levelno, record.levelname[:4])
        return super().format(record)


def resolve_level(level: str | None) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    resolved = logging.getLevelName((level or "INFO").upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def action_log_path(log_dir: str, action: str, *, now: datetime | None = None) -> Path:
    """Return ``<log_dir>/<action>/<action>_<mmddHHMMSS>.log``."""
    stamp = (now or datetime.now()).strftime("%m%d%H%M%S")
    return Path(log_dir or "log") / action / f"{action}_{stamp}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> Path | None:
    """(Re)configure the package logger.

    Handlers from an earlier call are closed and replaced, so the CLI can be
    invoked repeatedly in one process.

    Args:
        level: Console level name (e.g. INFO, DEBUG).
        action: CLI action name; required for file logging.
        log_to_file: Whether to mirror records, at DEBUG, to an action log file.
        log_dir: Base directory for action log files.

    Returns:
        Path of the action log file, or None when logging only to the console.
    """
    console_level = resolve_level(level)
    formatter = LevelTagFormatter()

    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.propagate = False

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    log.addHandler(console)

    if not (log_to_file and action):
        log.setLevel(console_level)
        return None

    path = action_log_path(log_dir, action)
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    log.addHandler(file_handler)
    log.setLevel(logging.DEBUG)
    return path
