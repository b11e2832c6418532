"""
Candidate exclusion models for Shortlist.

A candidate may block employers by name or by any of the descriptive
attributes held on an employer profile.
"""

from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator

from .base import EmbeddedModel, coerce_token_list


class CandidateExclusion(EmbeddedModel):
    """Employer block-lists authored by one candidate."""

    id: Optional[str] = None
    candidate_id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    excluded_employer_name: list[str] = Field(default_factory=list)
    excluded_employer_race: list[str] = Field(default_factory=list)
    excluded_employer_religion: list[str] = Field(default_factory=list)
    excluded_employer_gender: list[str] = Field(default_factory=list)
    excluded_employer_country: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("excluded_employer_country", "excluded_emplyer_country"),
    )
    excluded_employer_city: list[str] = Field(default_factory=list)
    excluded_employer_incorporation_date: list[str] = Field(default_factory=list)

    # Exclude employers at or above this headcount; None means no threshold
    excluded_employer_size: Optional[int] = None

    @field_validator(
        "excluded_employer_name",
        "excluded_employer_race",
        "excluded_employer_religion",
        "excluded_employer_gender",
        "excluded_employer_country",
        "excluded_employer_city",
        "excluded_employer_incorporation_date",
        mode="before",
    )
    @classmethod
    def split_lists(cls, v: Any) -> list[str]:
        return coerce_token_list(v)

    @field_validator("excluded_employer_size", mode="before")
    @classmethod
    def normalize_size(cls, v: Any) -> Optional[int]:
        """Stored rows use 0 for "no threshold"."""
        if v is None or v == "":
            return None
        v = int(v)
        return v if v > 0 else None
