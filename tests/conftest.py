"""
Shared test fixtures for the Shortlist test suite.

Sets environment variables before any src imports so no log files are
written, then provides factory fixtures for the engine's input records.
"""

import os

# === Set environment BEFORE any src imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("MATCH_AUDIT_DECISIONS", "false")

from typing import Any, Optional

import pytest

from src.core.matching.matching_engine import MatchingEngine
from src.data.models import (
    Candidate,
    CandidateExclusion,
    Employer,
    EmployerProfile,
)


# ---------------------------------------------------------------------------
# Factory fixtures for input records
# ---------------------------------------------------------------------------


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build Candidate models."""

    def _factory(candidate_id: int = 1, **overrides: Any) -> Candidate:
        data: dict[str, Any] = {
            "candidate_id": candidate_id,
            "first_name": "Mei Ling",
            "last_name": "Tan",
            "email": "meiling.tan@example.com",
            "gender": "Female",
            "age": 30,
            "race": "Chinese",
            "ethnicity": "Hokkien",
            "religion": "Buddhism",
            "country_of_birth": "Malaysia",
            "nationality": "Malaysian",
            "current_country": "Singapore",
            "current_city": "Singapore",
            "visa_status": "Employment Pass",
            "availability": "1 month",
            "minimum_expected_salary_monthly": 6000,
            "desired_type_of_job_arrangement": "Hybrid",
            "past_current_domain": "Finance, Banking",
            "preferred_domain": "Retail",
            "past_current_function": "Operations",
            "preferred_function": "Strategy",
        }
        data.update(overrides)
        return Candidate(**data)

    return _factory


@pytest.fixture
def make_employer():
    """Factory that returns a callable to build Employer models."""

    def _factory(
        elimination_criteria: Optional[dict[str, Any]] = None,
        required_matching_criteria: Optional[dict[str, Any]] = None,
        **overrides: Any,
    ) -> Employer:
        if required_matching_criteria is None:
            required_matching_criteria = {
                "domain": {"field1": "finance", "field2": "retail", "field3": "Any"},
            }
        data: dict[str, Any] = {
            "job_id": 101,
            "job_title": "Operations Analyst",
            "employer_name": "Acme Holdings",
            "elimination_criteria": elimination_criteria or {},
            "required_matching_criteria": required_matching_criteria,
        }
        data.update(overrides)
        return Employer(**data)

    return _factory


@pytest.fixture
def make_exclusion():
    """Factory that returns a callable to build CandidateExclusion models."""

    def _factory(candidate_id: int = 1, **overrides: Any) -> CandidateExclusion:
        return CandidateExclusion(candidate_id=candidate_id, **overrides)

    return _factory


@pytest.fixture
def make_profile():
    """Factory that returns a callable to build EmployerProfile models."""

    def _factory(**overrides: Any) -> EmployerProfile:
        data: dict[str, Any] = {
            "employer_name": "Acme Holdings",
            "employer_race": ["Malay", "Chinese"],
            "employer_religion": ["Islam"],
            "employer_gender": ["Male"],
            "employer_country": ["Malaysia"],
            "employer_city": ["Kuala Lumpur"],
            "incorporation_date": "2010-05-01",
            "employer_size": 250,
        }
        data.update(overrides)
        return EmployerProfile(**data)

    return _factory


# ---------------------------------------------------------------------------
# Matching engine fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def matching_engine():
    """MatchingEngine with decision auditing disabled."""
    return MatchingEngine(audit_decisions=False)
