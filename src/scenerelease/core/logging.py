"""Centralized logging configuration for SceneRelease.

This module sets up the root logger with console output and optional file
rotation based on project configuration.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path

from .config import APP_CONFIG, _find_project_root

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_file: str | None = None,
    log_level: str | None = None,
    log_max_bytes: int | None = None,
    log_backup_count: int | None = None,
) -> None:
    """Set up the root logger.

    Console output always goes to stderr so it never mixes with command
    output on stdout.

    Args:
        log_file: Path to the log file. If None, uses config default; no
            file handler is added when neither is set.
        log_level: Logging level. If None, uses config default.
        log_max_bytes: Maximum size of log file before rotation.
        log_backup_count: Number of backup files to keep.
    """
    log_file = log_file or APP_CONFIG.log_file
    log_level = log_level or APP_CONFIG.log_level
    log_max_bytes = log_max_bytes or APP_CONFIG.log_max_bytes
    log_backup_count = log_backup_count or APP_CONFIG.log_backup_count

    level = getattr(logging, log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if log_file:
        log_path = Path(log_file)
        if not log_path.is_absolute():
            log_path = _find_project_root() / log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=log_max_bytes,
            backupCount=log_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
