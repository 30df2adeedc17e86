"""
Logging setup for ccfilter internal diagnostics.

Library modules log through ``logging.getLogger(__name__)`` under the
``ccfilter`` namespace. A host program that wants those messages calls
configure_logging() once, which attaches handlers for stderr and the
rotating log file as described by the [logging] settings table.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.settings import CcFilterSettings

LOGGER_NAME = "ccfilter"
LOG_FILE_PATH = Path.home() / ".ccfilter" / "ccfilter.log"
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 3

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def configure_logging(
    settings: CcFilterSettings | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """
    Attach the handlers named by the logging settings to the ccfilter logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        settings: Loaded settings; load_settings() is used when omitted
        log_file: Override for the rotating log file location

    Returns:
        The configured ``ccfilter`` logger
    """
    if settings is None:
        from ..core.settings import load_settings

        settings = load_settings()

    cfg = settings.logging
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level = LEVEL_MAP.get(cfg.level, logging.WARNING)
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if cfg.file:
        path = log_file or LOG_FILE_PATH
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(path, maxBytes=MAX_FILE_SIZE, backupCount=BACKUP_COUNT)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
