"""
Candidate data models for Shortlist.

Defines the candidate profile record: identity, the scalar attributes used
by elimination, and the comma-separated category lists used by scoring.
"""

from typing import Optional

from pydantic import Field, field_validator

from .base import EmbeddedModel, coerce_token_string


class Questionnaire(EmbeddedModel):
    """Screening questionnaire answers. Carried through, not scored."""

    q1_overtime_or_weekends: Optional[str] = None
    q2_driving_license: Optional[str] = None
    q3_own_car: Optional[str] = None
    q4_willing_to_travel: Optional[str] = None
    q5_disability_support: Optional[str] = None
    q6_willing_to_relocate: Optional[str] = None
    q7_comfortable_with_background_checks: Optional[str] = None


class Candidate(EmbeddedModel):
    """
    A job candidate profile.

    Category attributes come in pairs: ``past_current_<category>`` lists what
    the candidate has and ``preferred_<category>`` what they would like.
    Both are comma-separated strings.
    """

    id: Optional[str] = None
    candidate_id: int

    # Identity
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[str] = None
    age: Optional[int] = None

    # Background
    race: str = ""
    ethnicity: str = ""
    dialect: Optional[str] = None
    religion: Optional[str] = None
    country_of_birth: str = ""
    nationality: str = ""
    current_country: str = ""
    current_city: Optional[str] = None
    visa_status: str = ""
    month_and_year_moved_to_current_country: Optional[str] = None
    months_in_current_country: Optional[int] = None

    # Job preferences
    availability: str = ""
    minimum_expected_salary_monthly: float = Field(0, ge=0)
    desired_type_of_job_arrangement: str = ""
    desired_job_hierarchy_in_title: Optional[str] = None
    desired_employer: Optional[str] = None
    desired_role: Optional[str] = None
    desired_domain: Optional[str] = None
    desired_function: Optional[str] = None
    desired_structural_skills: Optional[str] = None
    desired_system: Optional[str] = None

    # Physical
    profile_picture_url: Optional[str] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    fitness_level: Optional[str] = None

    # Past & current (comma separated)
    past_current_title: Optional[str] = None
    past_current_motivation: Optional[str] = None
    past_current_values: Optional[str] = None
    past_current_hobbies: Optional[str] = None
    past_current_talents: Optional[str] = None
    past_current_education_subject: Optional[str] = None
    past_current_university_major: Optional[str] = None
    past_current_university_ranking: Optional[str] = None
    past_current_role: Optional[str] = None
    past_current_domain: Optional[str] = None
    past_current_function: Optional[str] = None
    past_current_structural_skills: Optional[str] = None
    past_current_system: Optional[str] = None
    past_current_hierarchy: Optional[str] = None
    past_current_work_arrangement: Optional[str] = None

    # Preferred (comma separated)
    preferred_title: Optional[str] = None
    preferred_motivation: Optional[str] = None
    preferred_values: Optional[str] = None
    preferred_hobbies: Optional[str] = None
    preferred_talents: Optional[str] = None
    preferred_role: Optional[str] = None
    preferred_domain: Optional[str] = None
    preferred_function: Optional[str] = None
    preferred_structural_skills: Optional[str] = None
    preferred_system: Optional[str] = None
    preferred_hierarchy: Optional[str] = None
    preferred_work_arrangement: Optional[str] = None

    questionnaire: Optional[Questionnaire] = None

    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator(
        "first_name",
        "last_name",
        "race",
        "ethnicity",
        "country_of_birth",
        "nationality",
        "current_country",
        "visa_status",
        "availability",
        "desired_type_of_job_arrangement",
        mode="before",
    )
    @classmethod
    def null_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("minimum_expected_salary_monthly", mode="before")
    @classmethod
    def null_salary(cls, v):
        return 0 if v is None else v

    @field_validator(
        "past_current_title",
        "past_current_motivation",
        "past_current_values",
        "past_current_hobbies",
        "past_current_talents",
        "past_current_education_subject",
        "past_current_university_major",
        "past_current_university_ranking",
        "past_current_role",
        "past_current_domain",
        "past_current_function",
        "past_current_structural_skills",
        "past_current_system",
        "past_current_hierarchy",
        "past_current_work_arrangement",
        "preferred_title",
        "preferred_motivation",
        "preferred_values",
        "preferred_hobbies",
        "preferred_talents",
        "preferred_role",
        "preferred_domain",
        "preferred_function",
        "preferred_structural_skills",
        "preferred_system",
        "preferred_hierarchy",
        "preferred_work_arrangement",
        mode="before",
    )
    @classmethod
    def join_token_lists(cls, v):
        """Some exports store category lists as JSON arrays."""
        return coerce_token_string(v)

    @property
    def full_name(self) -> str:
        """Get candidate's full name."""
        return f"{self.first_name} {self.last_name}".strip()
