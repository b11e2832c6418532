"""
Pydantic data models for Shortlist.

This module provides every record the matching engine consumes or
produces, and the row shapes used to hand results to a storage layer.
"""

# Base models
from .base import EmbeddedModel, coerce_token_list, constraint_value, split_tokens

# Candidate models
from .candidate import Candidate, Questionnaire

# Employer models
from .employer import (
    AgeRange,
    CategoryRequirement,
    EliminationCriteria,
    Employer,
    EmployerProfile,
    parse_age_range,
)

# Exclusion models
from .exclusion import CandidateExclusion

# Match models
from .match import (
    CategoryBreakdown,
    EliminationVerdict,
    ExclusionVerdict,
    MatchDetailRow,
    MatchDetails,
    MatchResult,
    MatchResultRow,
    rehydrate_details,
    to_result_rows,
)

__all__ = [
    # Base
    "EmbeddedModel",
    "coerce_token_list",
    "constraint_value",
    "split_tokens",
    # Candidate
    "Candidate",
    "Questionnaire",
    # Employer
    "AgeRange",
    "CategoryRequirement",
    "EliminationCriteria",
    "Employer",
    "EmployerProfile",
    "parse_age_range",
    # Exclusion
    "CandidateExclusion",
    # Match
    "CategoryBreakdown",
    "EliminationVerdict",
    "ExclusionVerdict",
    "MatchDetailRow",
    "MatchDetails",
    "MatchResult",
    "MatchResultRow",
    "rehydrate_details",
    "to_result_rows",
]
