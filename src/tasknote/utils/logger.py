"""Application-wide logger writing to platformdirs user_log_dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tasknote"
_LOG_FILE = "tasknote.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Module loggers (``logging.getLogger("tasknote.<module>")``) are children
    of this logger and reach its file handler once it is initialised.
    """
    global _logger
    if _logger is not None:
        return _logger

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG)
    if not logger.handlers:
        handler = logging.handlers.RotatingFileHandler(
            log_dir / _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
