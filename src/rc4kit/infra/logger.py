"""
Logging setup for the ``rc4kit`` logger hierarchy.
"""

from __future__ import annotations

__all__ = ["setup_logging", "LOGGER_NAME", "LOG_FILENAME"]

import logging
import logging.handlers
from pathlib import Path

LOGGER_NAME = "rc4kit"
LOG_FILENAME = "rc4kit.log"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"

_MAX_BYTES = 1024 * 1024
_BACKUP_COUNT = 3


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | Path | None = None,
    save_log: bool = False,
) -> logging.Logger:
    """Configure the ``rc4kit`` logger.

    Handlers installed by an earlier call are removed first, so this can be
    called again to change the level or destination.

    Args:
        log_level: Level name such as ``"DEBUG"`` or ``"INFO"``.
        log_dir: Directory for the rotating log file. Defaults to ``./logs``.
        save_log: Whether to also write records to ``<log_dir>/rc4kit.log``.

    Returns:
        The configured package logger.

    Raises:
        ValueError: If ``log_level`` is not a known level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)
    logger.propagate = False
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if save_log:
        directory = Path(log_dir or "./logs").expanduser().resolve()
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            directory / LOG_FILENAME,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
