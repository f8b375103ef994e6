"""
Logging infrastructure for the ranking engine.

Loguru sinks are configured from LoggingSettings: a colored stderr sink for
interactive use and an optional rotating file sink for hosts that keep
ranking logs on disk.
"""

import sys
from typing import Any, Optional

from loguru import logger

from src.utils.config import LoggingSettings, get_settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(log_settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure application-wide logging.

    Replaces every existing loguru sink with the ones enabled in the
    settings.

    Args:
        log_settings: Sink configuration; read from the global settings when omitted
    """
    settings = get_settings()
    log_settings = log_settings or settings.logging

    # Security: diagnose=False outside development to keep candidate data out of tracebacks
    diagnose = settings.debug and settings.environment == "development"

    logger.remove()
    logger.configure(extra={"name": "ranking"})

    if log_settings.console_output:
        _add_console_sink(log_settings, diagnose)
    if log_settings.file_output:
        _add_file_sink(log_settings, diagnose)

    logger.debug(f"Logging initialized - Level: {log_settings.level}")


def _add_console_sink(log_settings: LoggingSettings, diagnose: bool) -> int:
    return logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=log_settings.level,
        colorize=True,
        backtrace=True,
        diagnose=diagnose,
    )


def _add_file_sink(log_settings: LoggingSettings, diagnose: bool) -> int:
    log_file = log_settings.file_path
    log_file.parent.mkdir(parents=True, exist_ok=True)

    return logger.add(
        log_file,
        format=log_settings.format,
        level=log_settings.level,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        backtrace=True,
        diagnose=diagnose,
        enqueue=True,  # Thread-safe logging
    )


def get_logger(name: str) -> Any:
    """
    Get a logger bound to a component name.

    Args:
        name: The name for the logger (typically __name__)

    Returns:
        A loguru logger whose records carry ``extra["name"]``
    """
    return logger.bind(name=name)


class LoggerMixin:
    """
    Mixin giving a class a logger named after it.

    Usage:
        class RankingCache(LoggerMixin):
            def rank(self, ...):
                self.logger.debug("Cache miss")
    """

    @property
    def logger(self) -> Any:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(self.__class__.__name__)
        return self._logger


# Module-level logger for quick access
log = logger


# Auto-setup on import if settings are available
try:
    setup_logging()
except Exception:
    # If setup fails (e.g., read-only log directory), keep loguru's default sink
    pass
