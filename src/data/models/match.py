"""
Match and scoring data models for Shortlist.

Defines per-category breakdowns, match details, filter verdicts and the
ranked match result, plus the flat row shapes a storage layer persists
them as.
"""

from typing import Iterable, Optional

from pydantic import Field, model_validator

from src.utils.constants import MatchOutcome, MatchScoreLevel

from .base import EmbeddedModel
from .candidate import Candidate


class CategoryBreakdown(EmbeddedModel):
    """Score contributed by one matching category."""

    category: str  # display name, underscores replaced by spaces
    score: int = Field(0, ge=0)
    past_current_matches: list[str] = Field(default_factory=list)
    preferred_matches: list[str] = Field(default_factory=list)

    @classmethod
    def from_row(cls, row: "MatchDetailRow") -> "CategoryBreakdown":
        return cls(
            category=row.category,
            score=row.score,
            past_current_matches=list(row.past_current_matches),
            preferred_matches=list(row.preferred_matches),
        )


class MatchDetails(EmbeddedModel):
    """Scoring output for one candidate."""

    total_score: int = Field(0, ge=0)
    # None when rebuilt from stored rows, which do not keep the ceiling
    max_possible_score: Optional[int] = Field(0, ge=0)
    percentage: int = Field(0, ge=0, le=100)
    breakdown: list[CategoryBreakdown] = Field(default_factory=list)

    def to_detail_rows(self, match_result_id: Optional[str] = None) -> list["MatchDetailRow"]:
        """One row per breakdown category."""
        return [
            MatchDetailRow(
                match_result_id=match_result_id,
                category=item.category,
                score=item.score,
                past_current_matches=list(item.past_current_matches),
                preferred_matches=list(item.preferred_matches),
            )
            for item in self.breakdown
        ]


class ExclusionVerdict(EmbeddedModel):
    """Result of checking a candidate's exclusion list against an employer."""

    excluded: bool = False
    reasons: list[str] = Field(default_factory=list)


class EliminationVerdict(EmbeddedModel):
    """Result of checking a candidate against employer hard requirements."""

    eliminated: bool = False
    reasons: list[str] = Field(default_factory=list)


class MatchResult(EmbeddedModel):
    """
    Outcome of matching one candidate to one employer.

    Excluded and eliminated candidates carry rank 0, score 0 and at least
    one reason. Scored candidates get their rank once every candidate in
    the run has been scored.
    """

    candidate: Candidate
    rank: int = Field(0, ge=0)
    score: int = Field(0, ge=0)
    percentage: int = Field(0, ge=0, le=100)
    is_eliminated: bool = False
    elimination_reasons: list[str] = Field(default_factory=list)
    details: MatchDetails = Field(default_factory=MatchDetails)
    outcome: MatchOutcome = MatchOutcome.SCORED

    @model_validator(mode="after")
    def check_elimination_invariants(self) -> "MatchResult":
        if self.is_eliminated:
            if not self.elimination_reasons:
                raise ValueError("eliminated result requires at least one reason")
            if self.score != 0 or self.rank != 0:
                raise ValueError("eliminated result must have score 0 and rank 0")
            if self.outcome == MatchOutcome.SCORED:
                raise ValueError("eliminated result cannot have a scored outcome")
        elif self.outcome != MatchOutcome.SCORED:
            raise ValueError(f"{self.outcome} result must be marked eliminated")
        return self

    @classmethod
    def rejected(
        cls,
        candidate: Candidate,
        outcome: MatchOutcome,
        reasons: list[str],
    ) -> "MatchResult":
        """Build the terminal result for an excluded or eliminated candidate."""
        return cls(
            candidate=candidate,
            is_eliminated=True,
            elimination_reasons=list(reasons),
            outcome=outcome,
        )

    @classmethod
    def scored(cls, candidate: Candidate, details: MatchDetails) -> "MatchResult":
        """Build an unranked result for a candidate that passed both filters."""
        return cls(
            candidate=candidate,
            score=details.total_score,
            percentage=details.percentage,
            details=details,
        )

    @property
    def score_level(self) -> MatchScoreLevel:
        return MatchScoreLevel.from_percentage(self.percentage)

    def to_row(self, job_id: int, result_id: Optional[str] = None) -> "MatchResultRow":
        """Flatten into the ``match_results`` row shape."""
        return MatchResultRow(
            id=result_id,
            job_id=job_id,
            candidate_id=self.candidate.candidate_id,
            rank=self.rank,
            score=self.score,
            percentage=self.percentage,
            is_eliminated=self.is_eliminated,
            elimination_reasons=list(self.elimination_reasons),
        )


class MatchResultRow(EmbeddedModel):
    """Stored form of a match result, keyed by (job_id, candidate_id)."""

    id: Optional[str] = None
    job_id: int
    candidate_id: int
    rank: int = 0
    score: int = 0
    percentage: int = 0
    is_eliminated: bool = False
    elimination_reasons: list[str] = Field(default_factory=list)
    created_at: Optional[str] = None


class MatchDetailRow(EmbeddedModel):
    """Stored form of one category breakdown."""

    match_result_id: Optional[str] = None
    category: str
    score: int = 0
    past_current_matches: list[str] = Field(default_factory=list)
    preferred_matches: list[str] = Field(default_factory=list)


def to_result_rows(
    job_id: int,
    results: Iterable[MatchResult],
) -> list[tuple[MatchResultRow, list[MatchDetailRow]]]:
    """
    Flatten match results into row pairs for a storage layer.

    Detail rows carry no ``match_result_id``; the caller fills it in once
    the parent row has been written and has an id.
    """
    return [(result.to_row(job_id), result.details.to_detail_rows()) for result in results]


def rehydrate_details(
    row: MatchResultRow,
    detail_rows: Iterable[MatchDetailRow],
) -> MatchDetails:
    """
    Rebuild match details from stored rows without re-running the scorer.

    The stored rows do not keep the scoring ceiling, so
    ``max_possible_score`` is left as None.
    """
    return MatchDetails(
        total_score=row.score,
        max_possible_score=None,
        percentage=row.percentage,
        breakdown=[CategoryBreakdown.from_row(detail) for detail in detail_rows],
    )
