"""
Configuration management for the Shortlist engine.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Base paths
ROOT_DIR = Path(__file__).parent.parent.parent


class MatchingSettings(BaseSettings):
    """Matching engine behaviour."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    # One audit record per terminal verdict (excluded, eliminated, ranked)
    audit_decisions: bool = True

    # Debug-log every non-zero category breakdown
    log_breakdowns: bool = False


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    file_path: Path = ROOT_DIR / "logs" / "shortlist.log"
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True
    file_output: bool = True


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "Shortlist"
    version: str = "0.1.0"
    description: str = "Candidate matching, elimination and scoring engine"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Nested settings
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
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
