"""
Utility modules for the Shortlist engine.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from src.utils.config import (
    AppSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
)
from src.utils.constants import (
    APP_NAME,
    VERSION,
    AVAILABILITY_TIERS,
    DEFAULT_CATEGORY_POINTS,
    AuditAction,
    MatchOutcome,
    MatchScoreLevel,
)
from src.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    decision_log_path,
)

__all__ = [
    # Config
    "AppSettings",
    "MatchingSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    # Constants
    "APP_NAME",
    "VERSION",
    "AVAILABILITY_TIERS",
    "DEFAULT_CATEGORY_POINTS",
    "AuditAction",
    "MatchOutcome",
    "MatchScoreLevel",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "decision_log_path",
]
