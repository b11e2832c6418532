"""
Employer elimination filter.

Applies the employer's hard requirements to a candidate. Every check runs
and contributes its own reason; a candidate is eliminated when any reason
was recorded.
"""

from typing import Optional

from src.data.models import Candidate, Employer, EliminationVerdict
from src.utils.constants import AVAILABILITY_TIERS


def availability_tier(value: Optional[str]) -> Optional[int]:
    """
    Map an availability string to its ordinal tier.

    Returns None for values outside the tier table ("gig work", "Other").
    """
    if not value:
        return None
    return AVAILABILITY_TIERS.get(value.strip().lower())


def _exact_match_fields(candidate: Candidate, employer: Employer) -> list[tuple[str, str, Optional[str]]]:
    """(label, candidate value, required value) for case-insensitive equality checks."""
    criteria = employer.elimination_criteria
    return [
        ("Ethnicity", candidate.ethnicity, criteria.ethnicity),
        ("Race", candidate.race, criteria.race),
        ("Religion", candidate.religion or "", criteria.religion),
        ("Nationality", candidate.nationality, criteria.nationality),
        ("Birth Country", candidate.country_of_birth, criteria.country_of_birth),
        ("Current Country", candidate.current_country, criteria.current_country),
        ("Visa Status", candidate.visa_status, criteria.visa_status),
        ("Job Arrangement", candidate.desired_type_of_job_arrangement, criteria.job_arrangement),
    ]


def check_elimination(candidate: Candidate, employer: Employer) -> EliminationVerdict:
    """
    Check a candidate against the employer's elimination criteria.

    Args:
        candidate: Candidate being matched
        employer: Job posting holding the criteria

    Returns:
        EliminationVerdict listing every failed requirement
    """
    criteria = employer.elimination_criteria
    reasons: list[str] = []

    # Age, inclusive on both bounds
    age_range = criteria.age_range
    if age_range is not None and candidate.age is not None:
        if not age_range.contains(candidate.age):
            reasons.append(f"Age {candidate.age} outside range {age_range}")

    for label, candidate_value, required in _exact_match_fields(candidate, employer):
        if required is not None and candidate_value.strip().lower() != required.lower():
            reasons.append(f"{label} mismatch (requires {required})")

    if criteria.salary_monthly is not None:
        if candidate.minimum_expected_salary_monthly > criteria.salary_monthly:
            reasons.append(
                f"Salary expectation {candidate.minimum_expected_salary_monthly:g} "
                f"above maximum {criteria.salary_monthly:g}"
            )

    # Unknown tiers on either side never eliminate
    if criteria.availability is not None:
        candidate_tier = availability_tier(candidate.availability)
        required_tier = availability_tier(criteria.availability)
        if candidate_tier is not None and required_tier is not None and candidate_tier > required_tier:
            reasons.append(
                f"Availability {candidate.availability} later than required {criteria.availability}"
            )

    return EliminationVerdict(eliminated=bool(reasons), reasons=reasons)
