"""offline_qa.logging_utils

Logging utilities:
- File logging for operational debugging of bank loads and match decisions
- Console output for the operator scripts
"""

from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_LOGGER_NAME = "offline_qa"


def get_logger() -> logging.Logger:
    """Shared package logger used when a component is built without one."""
    return logging.getLogger(DEFAULT_LOGGER_NAME)


def build_logger(log_dir: str, name: str = DEFAULT_LOGGER_NAME, level: str = "INFO") -> logging.Logger:
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    logger = logging.getLogger(name)
    level_value = logging.getLevelName(level.upper())
    logger.setLevel(level_value if isinstance(level_value, int) else logging.INFO)

    # Avoid duplicate handlers when engines are built repeatedly in one process
    if logger.handlers:
        return logger

    log_path = Path(log_dir) / "qa.log"
    handler = RotatingFileHandler(str(log_path), maxBytes=2_000_000, backupCount=5, encoding="utf-8")
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(fmt)
    logger.addHandler(handler)

    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)
    return logger
