"""File logging for the postmore logger tree."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..api.config.get_home_dir import get_home_dir

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Send the "postmore" logger to <home>/postmore.log; later calls are no-ops."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    log_dir = home or get_home_dir()
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_dir / "postmore.log", maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("postmore")
    package_logger.setLevel(level)
    package_logger.addHandler(handler)
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return the postmore.<name> logger, configuring file logging on first use."""
    configure_logging()
    return logging.getLogger(f"postmore.{name}")
