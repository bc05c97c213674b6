"""Application-wide logging to a rotating file in the user log dir."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

from .settings import APP_NAME

_LOG_FILE = "timetracker.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 3


def configure_logging(level: int = logging.INFO, log_dir: Path | None = None) -> Path:
    """Attach a rotating file handler to the ``timetracker`` logger.

    Safe to call more than once; returns the log file path.
    """
    if log_dir is None:
        log_dir = Path(user_log_dir(APP_NAME, appauthor=False))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / _LOG_FILE

    logger = logging.getLogger("timetracker")
    logger.setLevel(level)
    if not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        handler = logging.handlers.RotatingFileHandler(
            log_path,
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
    return log_path
