"""
Base model classes for Shortlist data models.

Provides common configuration and the defensive parsers shared by the
candidate, employer and exclusion records.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from src.utils.constants import ANY_VALUE


class EmbeddedModel(BaseModel):
    """
    Base model for every record the engine consumes or produces.

    Records are immutable once built; unknown keys from upstream payloads
    are ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        frozen=True,
        extra="ignore",
    )


def split_tokens(value: Optional[str]) -> list[str]:
    """Split a comma-separated string into trimmed, lower-cased, non-empty tokens."""
    if not value:
        return []
    return [token.strip().lower() for token in value.split(",") if token.strip()]


def coerce_token_list(value: Any) -> list[str]:
    """
    Accept a list or a comma-separated string and return trimmed entries.

    ``None`` and empty strings become an empty list. Case is preserved so
    reasons can quote the stored value.
    """
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = [str(item) for item in value if item is not None]
    return [item.strip() for item in items if item.strip()]


def coerce_token_string(value: Any) -> Optional[str]:
    """Accept a comma-separated string or a list of tokens and return a string."""
    if value is None or isinstance(value, str):
        return value
    return ", ".join(str(item) for item in value if item is not None)


def constraint_value(value: Any) -> Optional[str]:
    """
    Normalise an employer-side requirement.

    ``None``, blank strings and the "Any" sentinel all mean no constraint
    and come back as ``None``; anything else is returned trimmed.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text or text.lower() == ANY_VALUE:
        return None
    return text
