"""
Candidate exclusion filter.

Evaluates a candidate's employer block-lists against the employer's
profile. Exclusion is opt-in: without both an exclusion record and an
employer profile nothing is excluded.
"""

from typing import Callable, Optional

from src.data.models import (
    Candidate,
    CandidateExclusion,
    Employer,
    EmployerProfile,
    ExclusionVerdict,
)

# (label, employer values, candidate's excluded values) for the set-intersection rules
_ATTRIBUTE_RULES: tuple[
    tuple[str, Callable[[EmployerProfile], list[str]], Callable[[CandidateExclusion], list[str]]],
    ...,
] = (
    ("race", lambda p: p.employer_race, lambda e: e.excluded_employer_race),
    ("religion", lambda p: p.employer_religion, lambda e: e.excluded_employer_religion),
    ("gender", lambda p: p.employer_gender, lambda e: e.excluded_employer_gender),
    ("country", lambda p: p.employer_country, lambda e: e.excluded_employer_country),
    ("city", lambda p: p.employer_city, lambda e: e.excluded_employer_city),
)


def _intersection(employer_values: list[str], excluded_values: list[str]) -> list[str]:
    """Employer values present in the excluded set, case-insensitively, in employer order."""
    excluded = {value.strip().lower() for value in excluded_values}
    return [value for value in employer_values if value.strip().lower() in excluded]


def _name_reason(
    employer: Employer,
    profile: EmployerProfile,
    exclusion: CandidateExclusion,
) -> Optional[str]:
    name = (employer.employer_name or profile.employer_name).strip()
    if not name:
        return None
    excluded = {value.lower() for value in exclusion.excluded_employer_name}
    if name.lower() in excluded:
        return f"Employer {name} is on the candidate's exclusion list"
    return None


def _incorporation_reason(
    profile: EmployerProfile,
    exclusion: CandidateExclusion,
) -> Optional[str]:
    date = profile.incorporation_date
    if date and date in exclusion.excluded_employer_incorporation_date:
        return f"Employer incorporation date {date} excluded"
    return None


def _size_reason(
    profile: EmployerProfile,
    exclusion: CandidateExclusion,
) -> Optional[str]:
    threshold = exclusion.excluded_employer_size
    if threshold is None or profile.employer_size is None:
        return None
    if profile.employer_size >= threshold:
        return f"Employer size {profile.employer_size} at or above excluded size {threshold}"
    return None


def check_exclusion(
    candidate: Candidate,
    employer: Employer,
    exclusion: Optional[CandidateExclusion],
    profile: Optional[EmployerProfile],
) -> ExclusionVerdict:
    """
    Check whether a candidate has excluded this employer.

    Every rule runs; all firing rules are reported.

    Args:
        candidate: Candidate being matched
        employer: Job posting being matched against
        exclusion: The candidate's exclusion record, if any
        profile: The employer's descriptive profile, if any

    Returns:
        ExclusionVerdict with one reason per firing rule
    """
    if exclusion is None or profile is None:
        return ExclusionVerdict()

    reasons: list[str] = []

    name_reason = _name_reason(employer, profile, exclusion)
    if name_reason:
        reasons.append(name_reason)

    for label, employer_values, excluded_values in _ATTRIBUTE_RULES:
        hits = _intersection(employer_values(profile), excluded_values(exclusion))
        if hits:
            reasons.append(f"Employer {label} excluded: {', '.join(hits)}")

    for reason in (_incorporation_reason(profile, exclusion), _size_reason(profile, exclusion)):
        if reason:
            reasons.append(reason)

    return ExclusionVerdict(excluded=bool(reasons), reasons=reasons)
