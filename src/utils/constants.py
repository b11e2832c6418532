"""
Application-wide constants for Shortlist.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "shortlist"
VERSION: Final[str] = "0.1.0"

SUPPORTED_INPUT_FORMATS: Final[tuple[str, ...]] = (".json",)


# =============================================================================
# Matching Constants
# =============================================================================

# Employer value meaning "no constraint" (compared case-insensitively)
ANY_VALUE: Final[str] = "any"

# Required tokens per category ("field1".."field3")
MAX_REQUIREMENTS_PER_CATEGORY: Final[int] = 3

# Points awarded per matched requirement token
DEFAULT_CATEGORY_POINTS: Final[dict[str, int]] = {
    "past_current": 3,
    "preferred": 1,
}

# Availability ordinal tiers; lower is sooner
AVAILABILITY_TIERS: Final[dict[str, int]] = {
    "immediate": 0,
    "1 week": 1,
    "2 weeks": 2,
    "1 month": 3,
    "2 months": 4,
    "3 months": 5,
}

# Categories that carry both a past/current and a preferred list
PAIRED_CATEGORIES: Final[tuple[str, ...]] = (
    "title",
    "motivation",
    "values",
    "hobbies",
    "talents",
    "role",
    "domain",
    "function",
    "structural_skills",
    "system",
    "hierarchy",
    "work_arrangement",
)

# Categories with a past/current list only
PAST_ONLY_CATEGORIES: Final[tuple[str, ...]] = (
    "education_subject",
    "university_major",
    "university_ranking",
)

# Percentage thresholds for display levels
SCORE_THRESHOLDS: Final[dict[str, int]] = {
    "excellent": 85,
    "good": 70,
    "fair": 50,
}


# =============================================================================
# Enums
# =============================================================================


class MatchOutcome(str, Enum):
    """Terminal state of a candidate in a matching run."""

    EXCLUDED = "excluded"
    ELIMINATED = "eliminated"
    SCORED = "scored"


class MatchScoreLevel(Enum):
    """Categorical levels for match percentages."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_percentage(cls, percentage: int) -> "MatchScoreLevel":
        """Convert a 0-100 percentage to a level."""
        if percentage >= SCORE_THRESHOLDS["excellent"]:
            return cls.EXCELLENT
        elif percentage >= SCORE_THRESHOLDS["good"]:
            return cls.GOOD
        elif percentage >= SCORE_THRESHOLDS["fair"]:
            return cls.FAIR
        return cls.POOR


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    CANDIDATE_EXCLUDED = "candidate_excluded"
    CANDIDATE_ELIMINATED = "candidate_eliminated"
    CANDIDATE_RANKED = "candidate_ranked"
