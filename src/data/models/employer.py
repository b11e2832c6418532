"""
Employer data models for Shortlist.

Defines the job posting seen by the engine (elimination criteria and
required matching criteria) and the descriptive employer profile that
candidates' exclusion lists are evaluated against.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from src.utils.constants import MAX_REQUIREMENTS_PER_CATEGORY

from .base import EmbeddedModel, coerce_token_list, constraint_value


class AgeRange(EmbeddedModel):
    """Inclusive age bounds."""

    min: int
    max: int

    def contains(self, age: int) -> bool:
        return self.min <= age <= self.max

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"


def parse_age_range(value: Optional[str]) -> Optional[AgeRange]:
    """
    Parse a "min-max" range string.

    Returns None for anything that is not exactly two hyphen-separated
    integers; a malformed range is treated as no constraint.
    """
    if not value:
        return None
    parts = [part.strip() for part in value.split("-")]
    if len(parts) != 2:
        return None
    try:
        low, high = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return AgeRange(min=low, max=high)


class EliminationCriteria(EmbeddedModel):
    """
    Employer hard requirements.

    Every string field is ``None`` when unconstrained: absent, blank and
    "Any" values are normalised on load.
    """

    age: Optional[str] = None  # "25-35"
    ethnicity: Optional[str] = None
    race: Optional[str] = None
    religion: Optional[str] = None
    nationality: Optional[str] = None
    country_of_birth: Optional[str] = None
    current_country: Optional[str] = None
    salary_monthly: Optional[float] = None
    availability: Optional[str] = None
    visa_status: Optional[str] = None
    job_arrangement: Optional[str] = None

    @field_validator(
        "age",
        "ethnicity",
        "race",
        "religion",
        "nationality",
        "country_of_birth",
        "current_country",
        "availability",
        "visa_status",
        "job_arrangement",
        mode="before",
    )
    @classmethod
    def normalize_constraint(cls, v: Any) -> Optional[str]:
        return constraint_value(v)

    @field_validator("salary_monthly", mode="before")
    @classmethod
    def normalize_salary(cls, v: Any) -> Optional[float]:
        """A zero, blank or "Any" ceiling means no salary constraint."""
        if isinstance(v, str):
            v = constraint_value(v)
        if v is None:
            return None
        v = float(v)
        return v if v > 0 else None

    @property
    def age_range(self) -> Optional[AgeRange]:
        return parse_age_range(self.age)


class CategoryRequirement(EmbeddedModel):
    """Up to three required tokens for one matching category."""

    field1: Optional[str] = None
    field2: Optional[str] = None
    field3: Optional[str] = None

    @field_validator("field1", "field2", "field3", mode="before")
    @classmethod
    def normalize_token(cls, v: Any) -> Optional[str]:
        return constraint_value(v)

    @property
    def tokens(self) -> list[str]:
        """Required tokens in field order, unconstrained slots dropped."""
        values = [self.field1, self.field2, self.field3]
        return [v for v in values if v is not None][:MAX_REQUIREMENTS_PER_CATEGORY]


class Employer(EmbeddedModel):
    """A job posting with its requirement blocks."""

    job_id: int
    job_title: str = ""
    employer_name: str = ""
    logo_url: Optional[str] = None

    elimination_criteria: EliminationCriteria = Field(default_factory=EliminationCriteria)
    required_matching_criteria: dict[str, Optional[CategoryRequirement]] = Field(
        default_factory=dict
    )

    @field_validator("elimination_criteria", mode="before")
    @classmethod
    def default_criteria(cls, v: Any) -> Any:
        return EliminationCriteria() if v is None else v

    @field_validator("required_matching_criteria", mode="before")
    @classmethod
    def default_matching_criteria(cls, v: Any) -> Any:
        return {} if v is None else v


class EmployerProfile(EmbeddedModel):
    """
    Descriptive employer attributes.

    Used only to evaluate candidate exclusions; never to eliminate or score.
    """

    id: Optional[str] = None
    employer_name: str
    employer_race: list[str] = Field(default_factory=list)
    employer_religion: list[str] = Field(default_factory=list)
    employer_gender: list[str] = Field(default_factory=list)
    employer_country: list[str] = Field(default_factory=list)
    employer_city: list[str] = Field(default_factory=list)
    incorporation_date: Optional[str] = None
    employer_size: Optional[int] = Field(None, ge=0)

    @field_validator(
        "employer_race",
        "employer_religion",
        "employer_gender",
        "employer_country",
        "employer_city",
        mode="before",
    )
    @classmethod
    def split_lists(cls, v: Any) -> list[str]:
        return coerce_token_list(v)

    @field_validator("incorporation_date", mode="before")
    @classmethod
    def strip_date(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        return str(v).strip() or None
