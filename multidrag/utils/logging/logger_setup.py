"""Module: logger_setup.py.

Date: 2026-10-19

ConfigureLogger sets up the root logger for a host application.
Console output gets INFO and above (dev-only records filtered out),
the rotating log file gets the configured file level, and an optional
debug file receives everything.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler

from multidrag.config import (
    LOG_CONSOLE_LEVEL,
    LOG_DEBUG_FILE_BACKUP_COUNT,
    LOG_DEBUG_FILE_ENABLED,
    LOG_DEBUG_FILE_MAX_BYTES,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
)
from multidrag.utils.logging.logger_helper import DevOnlyFilter

FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def add_file_handler(
    logger: logging.Logger,
    log_path: str,
    level: int = logging.INFO,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> RotatingFileHandler:
    """Attach a rotating file handler to a logger.

    Args:
        logger: The logger to attach the handler to
        log_path: Path to the log file
        level: Logging level for this handler
        max_bytes: Maximum file size before rotating
        backup_count: Number of backup files to keep

    Returns:
        The attached handler

    """
    os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    logger.addHandler(file_handler)
    return file_handler


class ConfigureLogger:
    """Configures application-wide logging on the root logger."""

    def __init__(
        self,
        log_name: str = "multidrag",
        log_dir: str = "logs",
        *,
        console_enabled: bool = LOG_TO_CONSOLE,
        file_enabled: bool = LOG_TO_FILE,
        debug_enabled: bool = LOG_DEBUG_FILE_ENABLED,
    ):
        """Initialize and configure the root logger.

        Handlers are only installed when the root logger has none yet, so
        calling this twice (or inside a test runner) is harmless.

        Args:
            log_name: Base name for the log files
            log_dir: Directory to store log files
            console_enabled: Attach a stdout handler
            file_enabled: Attach a rotating file handler
            debug_enabled: Attach a rotating DEBUG-level file handler

        """
        self.logger = logging.getLogger()
        self.logger.setLevel(logging.DEBUG)  # handlers filter levels

        if self.logger.hasHandlers():
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if console_enabled:
            self._setup_console_handler(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO))

        if file_enabled:
            add_file_handler(
                self.logger,
                os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                level=getattr(logging, LOG_FILE_LEVEL, logging.INFO),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )

        if debug_enabled:
            add_file_handler(
                self.logger,
                os.path.join(log_dir, f"{log_name}_debug_{timestamp}.log"),
                level=logging.DEBUG,
                max_bytes=LOG_DEBUG_FILE_MAX_BYTES,
                backup_count=LOG_DEBUG_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int):
        """Set up console handler with UTF-8-safe output and DevOnlyFilter."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(Exception):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.addFilter(DevOnlyFilter())
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)
