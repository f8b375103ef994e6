"""
Utility modules for the ranking engine.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
- clock: Injectable time source
- rounding: Half-up rounding helpers
"""

from src.utils.clock import Clock, FixedClock, SystemClock, as_utc
from src.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
)
from src.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    MatchType,
    RecommendationType,
    ScoreBand,
    ScoringFactor,
    SortBy,
)
from src.utils.logger import (
    setup_logging,
    get_logger,
    LoggerMixin,
    log,
)
from src.utils.rounding import round_half_up, round_int

__all__ = [
    # Clock
    "Clock",
    "FixedClock",
    "SystemClock",
    "as_utc",
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "MatchType",
    "RecommendationType",
    "ScoreBand",
    "ScoringFactor",
    "SortBy",
    # Logger
    "setup_logging",
    "get_logger",
    "LoggerMixin",
    "log",
    # Rounding
    "round_half_up",
    "round_int",
]
