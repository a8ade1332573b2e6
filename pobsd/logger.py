"""Loguru sinks for pobsd: console always, rotating log file on request."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

LOG_FILE_NAME = "pobsd.log"

_CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level:<7}</level> | {message}"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {name}:{line} | {message}"


def setup_logger(log_dir: Path | None = None, level: str = "INFO") -> Path | None:
    """Replace every loguru sink with the pobsd ones.

    The console shows *level* and above. With *log_dir*, every record down
    to DEBUG (skipped database lines included) also goes to ``pobsd.log``.

    Returns the log file path, or None when logging to the console only.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT, colorize=True)

    if log_dir is None:
        return None
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME
    logger.add(
        str(log_file),
        level="DEBUG",
        format=_FILE_FORMAT,
        rotation="5 MB",
        retention="7 days",
        encoding="utf-8",
    )
    logger.debug(f"Logging to {log_file}")
    return log_file
