"""Logging setup for gendesk.

Debug output goes to a rotating file in ~/.cache/gendesk; the level of that
file is taken from the "log_level" setting. When the cache directory is not
writable only warnings and errors are kept, on stderr. User-facing status
lines do not go through logging (see gendesk.ui.output).
"""

from __future__ import annotations

import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler

from gendesk.core import config

LOG_FILE = config.CACHE_DIR / "gendesk.log"
LOG_MAX_BYTES = 512 * 1024  # 512 KB
LOG_BACKUP_COUNT = 2
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def log_level(value: str | int | None) -> int:
    """Turn a "log_level" setting ("info", "WARNING", 10 ...) into a logging level."""
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value or "").upper())
    return level if isinstance(level, int) else logging.DEBUG


def _file_handler(level: int) -> logging.Handler:
    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setLevel(level)
    except OSError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(max(level, logging.WARNING))
    return handler


def setup_logging() -> logging.Logger:
    """Configure the gendesk logger and install the excepthook."""
    logger = logging.getLogger("gendesk")
    level = log_level(config.Config().get("log_level"))
    logger.setLevel(level)

    # setup_logging may run more than once in the same process (tests)
    if not logger.handlers:
        handler = _file_handler(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    sys.excepthook = _excepthook
    return logger


def _excepthook(exc_type: type, exc_value: BaseException, exc_tb) -> None:
    msg = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logging.getLogger("gendesk").critical("Uncaught exception:\n%s", msg)
    sys.__excepthook__(exc_type, exc_value, exc_tb)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(f"gendesk.{name}")
