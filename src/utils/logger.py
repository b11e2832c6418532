"""
Logging infrastructure for the Shortlist engine.

Loguru writes the application log to the console and a rotating file.
Matching decisions go to their own ``decisions.log`` through ``audit_log``,
keyed by candidate id with personal details redacted.
"""

import sys
from pathlib import Path
from typing import Any

from loguru import logger

from src.utils.config import AppSettings, get_settings

DECISION_LOG_NAME = "decisions.log"

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
_DECISION_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[audit_type]} | {message}"

# Substrings of record keys whose values never reach the decision log
_REDACTED_KEYS = frozenset({
    "email", "phone", "first_name", "last_name", "date_of_birth",
    "password", "secret", "token", "api_key",
})


def decision_log_path(settings: AppSettings | None = None) -> Path:
    """Decision log location, next to the application log file."""
    settings = settings or get_settings()
    return settings.logging.file_path.parent / DECISION_LOG_NAME


def _is_decision(record: dict) -> bool:
    return "audit_type" in record["extra"]


def setup_logging() -> None:
    """
    Configure application-wide logging from ``LoggingSettings``.

    The console sink is optional. With ``file_output`` enabled the
    application log rotates by size and the decision log rotates weekly and
    is retained for a year.
    """
    settings = get_settings()
    log_settings = settings.logging
    diagnose = settings.debug and settings.environment == "development"

    logger.remove()

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=_CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            diagnose=diagnose,
        )

    if not log_settings.file_output:
        return

    log_settings.file_path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_settings.file_path,
        format=log_settings.format,
        level=log_settings.level,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        diagnose=diagnose,
        enqueue=True,
    )
    logger.add(
        decision_log_path(settings),
        format=_DECISION_FORMAT,
        level="INFO",
        filter=_is_decision,
        rotation="1 week",
        retention="1 year",
        compression="zip",
        enqueue=True,
    )

    logger.info(f"Logging initialized - Level: {log_settings.level}")


def get_logger(name: str) -> Any:
    """Logger bound to ``name`` (typically ``__name__``)."""
    return logger.bind(name=name)


def _sanitize_for_logging(data: Any) -> Any:
    """Recursively replace values under personal or credential keys."""
    if isinstance(data, dict):
        return {
            k: "***REDACTED***" if any(s in k.lower() for s in _REDACTED_KEYS) else _sanitize_for_logging(v)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_sanitize_for_logging(item) for item in data]
    return data


def audit_log(
    action: str,
    details: dict[str, Any],
    audit_type: str = "DECISION",
) -> None:
    """
    Write one matching decision to the decision log.

    Args:
        action: An ``AuditAction`` value, e.g. "candidate_eliminated"
        details: Job and candidate ids plus the verdict's reasons or score
        audit_type: Tag written in the record's second column
    """
    logger.bind(audit_type=audit_type).info(f"{action} | {_sanitize_for_logging(details)}")


# Configure on import; an unwritable log directory leaves only the console sink
try:
    setup_logging()
except OSError as exc:
    logger.warning(f"File logging disabled: {exc}")
