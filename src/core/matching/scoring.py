"""
Category scorer.

Scores a candidate against the employer's required matching criteria.
Each required token found in the candidate's past/current list earns
``past_current`` points; found in the preferred list it earns
``preferred`` points, independently.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Optional

from src.data.models import (
    Candidate,
    CategoryBreakdown,
    Employer,
    MatchDetails,
    split_tokens,
)
from src.utils.config import get_settings
from src.utils.constants import DEFAULT_CATEGORY_POINTS
from src.utils.logger import get_logger

logger = get_logger(__name__)

TokenAccessor = Callable[[Candidate], Optional[str]]


def _no_preferred(candidate: Candidate) -> Optional[str]:
    return None


# Category name -> (past/current accessor, preferred accessor)
CATEGORY_FIELDS: dict[str, tuple[TokenAccessor, TokenAccessor]] = {
    "title": (lambda c: c.past_current_title, lambda c: c.preferred_title),
    "motivation": (lambda c: c.past_current_motivation, lambda c: c.preferred_motivation),
    "values": (lambda c: c.past_current_values, lambda c: c.preferred_values),
    "hobbies": (lambda c: c.past_current_hobbies, lambda c: c.preferred_hobbies),
    "talents": (lambda c: c.past_current_talents, lambda c: c.preferred_talents),
    "role": (lambda c: c.past_current_role, lambda c: c.preferred_role),
    "domain": (lambda c: c.past_current_domain, lambda c: c.preferred_domain),
    "function": (lambda c: c.past_current_function, lambda c: c.preferred_function),
    "structural_skills": (
        lambda c: c.past_current_structural_skills,
        lambda c: c.preferred_structural_skills,
    ),
    "system": (lambda c: c.past_current_system, lambda c: c.preferred_system),
    "hierarchy": (lambda c: c.past_current_hierarchy, lambda c: c.preferred_hierarchy),
    "work_arrangement": (
        lambda c: c.past_current_work_arrangement,
        lambda c: c.preferred_work_arrangement,
    ),
    "education_subject": (lambda c: c.past_current_education_subject, _no_preferred),
    "university_major": (lambda c: c.past_current_university_major, _no_preferred),
    "university_ranking": (lambda c: c.past_current_university_ranking, _no_preferred),
}


@dataclass(frozen=True)
class CategoryScore:
    """Score and ceiling for one category."""

    category: str
    score: int
    ceiling: int
    past_current_matches: tuple[str, ...] = field(default_factory=tuple)
    preferred_matches: tuple[str, ...] = field(default_factory=tuple)

    def to_breakdown(self) -> CategoryBreakdown:
        return CategoryBreakdown(
            category=self.category.replace("_", " "),
            score=self.score,
            past_current_matches=list(self.past_current_matches),
            preferred_matches=list(self.preferred_matches),
        )


def candidate_tokens(candidate: Candidate, category: str) -> tuple[list[str], list[str]]:
    """
    Resolve a candidate's past/current and preferred tokens for a category.

    Categories without an entry in CATEGORY_FIELDS resolve to two empty lists.
    """
    accessors = CATEGORY_FIELDS.get(category)
    if accessors is None:
        logger.warning(f"No candidate fields for category '{category}'")
        return [], []
    past_accessor, preferred_accessor = accessors
    return split_tokens(past_accessor(candidate)), split_tokens(preferred_accessor(candidate))


def score_category(
    category: str,
    requirements: list[str],
    past_values: list[str],
    preferred_values: list[str],
    points: dict[str, int],
) -> CategoryScore:
    """Score one category's required tokens against the candidate's lists."""
    past_set = set(past_values)
    preferred_set = set(preferred_values)

    past_matches = tuple(req for req in requirements if req.lower() in past_set)
    preferred_matches = tuple(req for req in requirements if req.lower() in preferred_set)

    score = (
        len(past_matches) * points["past_current"]
        + len(preferred_matches) * points["preferred"]
    )
    ceiling = len(requirements) * (points["past_current"] + points["preferred"])

    return CategoryScore(
        category=category,
        score=score,
        ceiling=ceiling,
        past_current_matches=past_matches,
        preferred_matches=preferred_matches,
    )


def match_percentage(score: int, ceiling: int) -> int:
    """Round score/ceiling to a whole percentage, halves up; 0 when there is no ceiling."""
    if ceiling <= 0:
        return 0
    return max(0, min(100, math.floor(score * 100 / ceiling + 0.5)))


def score_candidate(
    candidate: Candidate,
    employer: Employer,
    points: Optional[dict[str, int]] = None,
) -> MatchDetails:
    """
    Score a candidate against the employer's required matching criteria.

    Only call this for candidates that passed exclusion and elimination.

    Args:
        candidate: Candidate being scored
        employer: Job posting holding the required matching criteria
        points: Point overrides, merged onto DEFAULT_CATEGORY_POINTS

    Returns:
        MatchDetails with total, ceiling, percentage and non-zero breakdown
    """
    points = {**DEFAULT_CATEGORY_POINTS, **(points or {})}

    category_scores: list[CategoryScore] = []
    for category, requirement in employer.required_matching_criteria.items():
        if requirement is None:
            continue
        tokens = requirement.tokens
        if not tokens:
            continue
        past_values, preferred_values = candidate_tokens(candidate, category)
        category_scores.append(
            score_category(category, tokens, past_values, preferred_values, points)
        )

    total_score = sum(item.score for item in category_scores)
    max_possible_score = sum(item.ceiling for item in category_scores)
    breakdown = [item.to_breakdown() for item in category_scores if item.score > 0]

    if get_settings().matching.log_breakdowns:
        for item in breakdown:
            logger.debug(
                f"Candidate {candidate.candidate_id} {item.category}: {item.score} "
                f"(past/current {item.past_current_matches}, preferred {item.preferred_matches})"
            )

    return MatchDetails(
        total_score=total_score,
        max_possible_score=max_possible_score,
        percentage=match_percentage(total_score, max_possible_score),
        breakdown=breakdown,
    )
