"""
Configuration management for the ranking engine.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.utils.constants import DEFAULT_SCORING_WEIGHTS, SortBy


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent


class RankingSettings(BaseSettings):
    """Defaults applied by host wiring when building a ranking engine."""

    model_config = SettingsConfigDict(env_prefix="RANKING_")

    weight_skill: float = Field(default=DEFAULT_SCORING_WEIGHTS["skill"], ge=0)
    weight_experience: float = Field(default=DEFAULT_SCORING_WEIGHTS["experience"], ge=0)
    weight_education: float = Field(default=DEFAULT_SCORING_WEIGHTS["education"], ge=0)
    weight_availability: float = Field(default=DEFAULT_SCORING_WEIGHTS["availability"], ge=0)
    weight_recency: float = Field(default=DEFAULT_SCORING_WEIGHTS["recency"], ge=0)

    sort_by: SortBy = SortBy.PRIORITY_SCORE
    include_analysis: bool = True

    # External result cache
    cache_max_entries: int = Field(default=128, ge=1)

    @property
    def weights(self) -> dict[str, float]:
        """Weights keyed by scoring factor name."""
        return {
            "skill": self.weight_skill,
            "experience": self.weight_experience,
            "education": self.weight_education,
            "availability": self.weight_availability,
            "recency": self.weight_recency,
        }


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "ranking.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    # Hosts opt in to the rotating file sink
    file_output: bool = False


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "ats-ranking-engine"
    version: str = "0.1.0"
    description: str = "Candidate ranking engine for recruitment job postings"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    ranking: RankingSettings = Field(default_factory=RankingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
