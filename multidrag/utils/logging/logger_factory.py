"""Module: logger_factory.py.

Date: 2026-10-19

Cached logger factory.
Keeps a single logger instance per module name so that hot paths
(selection gestures, drag events) do not pay for repeated lookups.
"""

from __future__ import annotations

import inspect
import logging
import threading

from multidrag.utils.logging.logger_helper import get_logger


def _caller_module_name(frame) -> str:
    """Module name of the function that called the frame's function."""
    caller = frame.f_back if frame is not None else None
    return caller.f_globals.get("__name__", "unknown") if caller else "unknown"


class LoggerFactory:
    """Thread-safe logger factory with caching.

    Loggers are created through get_logger() so every cached instance
    carries the Unicode-safe logging methods.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()
    _global_level: int | None = None

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """Get or create a cached logger for the given name.

        Args:
            name: Logger name, typically __name__ from calling module

        Returns:
            Cached logger instance

        """
        if name is None:
            name = _caller_module_name(inspect.currentframe())

        with cls._lock:
            if name not in cls._loggers:
                logger = get_logger(name)
                if cls._global_level is not None:
                    logger.setLevel(cls._global_level)
                cls._loggers[name] = logger

            return cls._loggers[name]

    @classmethod
    def set_global_level(cls, level: int) -> None:
        """Set logging level for all cached loggers."""
        with cls._lock:
            cls._global_level = level
            for logger in cls._loggers.values():
                logger.setLevel(level)

    @classmethod
    def get_logger_count(cls) -> int:
        """Return the number of cached loggers."""
        return len(cls._loggers)

    @classmethod
    def clear_cache(cls) -> None:
        """Drop all cached loggers (the underlying logging registry is untouched)."""
        with cls._lock:
            cls._loggers.clear()
            cls._global_level = None

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Return the names of all cached loggers."""
        return list(cls._loggers.keys())


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """Convenience function for getting a cached logger.

    Args:
        name: Logger name

    Returns:
        Cached logger instance

    """
    if name is None:
        name = _caller_module_name(inspect.currentframe())
    return LoggerFactory.get_logger(name)
