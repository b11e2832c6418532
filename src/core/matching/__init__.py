"""Candidate matching engine module."""

from .elimination import availability_tier, check_elimination
from .exclusion import check_exclusion
from .matching_engine import (
    MatchingEngine,
    get_matching_engine,
    index_exclusions,
    rank_candidates,
)
from .scoring import CATEGORY_FIELDS, candidate_tokens, match_percentage, score_candidate

__all__ = [
    "CATEGORY_FIELDS",
    "MatchingEngine",
    "availability_tier",
    "candidate_tokens",
    "check_elimination",
    "check_exclusion",
    "get_matching_engine",
    "index_exclusions",
    "match_percentage",
    "rank_candidates",
    "score_candidate",
]
