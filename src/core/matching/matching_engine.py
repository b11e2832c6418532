"""
Candidate ranking engine.

Runs every candidate through exclusion, elimination and scoring, then
ranks the survivors by descending score. Candidates are processed in
input order and only reordered by the final stable sort.
"""

from collections.abc import Mapping
from typing import Iterable, Optional, Union

from src.data.models import (
    Candidate,
    CandidateExclusion,
    Employer,
    EmployerProfile,
    MatchResult,
)
from src.utils.config import get_settings
from src.utils.constants import DEFAULT_CATEGORY_POINTS, AuditAction, MatchOutcome
from src.utils.logger import audit_log, get_logger

from .elimination import check_elimination
from .exclusion import check_exclusion
from .scoring import score_candidate

logger = get_logger(__name__)

ExclusionLookup = Union[Mapping[int, CandidateExclusion], Iterable[CandidateExclusion]]


def index_exclusions(exclusions: Optional[ExclusionLookup]) -> dict[int, CandidateExclusion]:
    """
    Index exclusion records by candidate id.

    Accepts a ready mapping or any iterable of records; for repeated ids in
    an iterable the last record wins.
    """
    if exclusions is None:
        return {}
    if isinstance(exclusions, Mapping):
        return dict(exclusions)
    return {record.candidate_id: record for record in exclusions}


class MatchingEngine:
    """
    Engine for ranking candidates against one employer.

    Precedence per candidate is exclusion, then elimination, then scoring;
    the first filter that rejects a candidate ends its evaluation.
    """

    def __init__(
        self,
        points: Optional[dict[str, int]] = None,
        audit_decisions: Optional[bool] = None,
    ):
        """
        Initialize the matching engine.

        Args:
            points: Point overrides, merged onto DEFAULT_CATEGORY_POINTS
            audit_decisions: Override the configured audit setting
        """
        self.points = {**DEFAULT_CATEGORY_POINTS, **(points or {})}
        if audit_decisions is None:
            audit_decisions = get_settings().matching.audit_decisions
        self.audit_decisions = audit_decisions

    def evaluate_candidate(
        self,
        candidate: Candidate,
        employer: Employer,
        exclusion: Optional[CandidateExclusion] = None,
        profile: Optional[EmployerProfile] = None,
    ) -> MatchResult:
        """
        Take one candidate to its terminal state.

        Returns:
            An excluded or eliminated result, or an unranked scored result
        """
        exclusion_verdict = check_exclusion(candidate, employer, exclusion, profile)
        if exclusion_verdict.excluded:
            return MatchResult.rejected(candidate, MatchOutcome.EXCLUDED, exclusion_verdict.reasons)

        elimination_verdict = check_elimination(candidate, employer)
        if elimination_verdict.eliminated:
            return MatchResult.rejected(
                candidate, MatchOutcome.ELIMINATED, elimination_verdict.reasons
            )

        details = score_candidate(candidate, employer, self.points)
        return MatchResult.scored(candidate, details)

    def evaluate(
        self,
        candidates: Iterable[Candidate],
        employer: Employer,
        exclusions: Optional[ExclusionLookup] = None,
        profile: Optional[EmployerProfile] = None,
    ) -> list[MatchResult]:
        """
        Evaluate every candidate and rank the survivors.

        Results stay in input order and include excluded and eliminated
        candidates (rank 0) with their reasons.

        Args:
            candidates: Candidates to evaluate
            employer: Job posting to match against
            exclusions: Candidate exclusion records, by id or as a list
            profile: The employer's profile, needed for exclusions

        Returns:
            One MatchResult per candidate, in input order
        """
        exclusion_index = index_exclusions(exclusions)

        results = [
            self.evaluate_candidate(
                candidate,
                employer,
                exclusion_index.get(candidate.candidate_id),
                profile,
            )
            for candidate in candidates
        ]

        # sorted() is stable with reverse=True, so ties keep input order
        survivors = sorted(
            (i for i, result in enumerate(results) if not result.is_eliminated),
            key=lambda i: results[i].score,
            reverse=True,
        )
        for rank, index in enumerate(survivors, start=1):
            results[index] = results[index].model_copy(update={"rank": rank})

        excluded = sum(1 for r in results if r.outcome == MatchOutcome.EXCLUDED)
        logger.info(
            f"Job {employer.job_id}: {len(results)} candidates, {len(survivors)} ranked, "
            f"{excluded} excluded, {len(results) - len(survivors) - excluded} eliminated"
        )

        for result in results:
            logger.debug(
                f"Candidate {result.candidate.candidate_id}: {MatchOutcome(result.outcome).value} "
                f"rank={result.rank} score={result.score} reasons={result.elimination_reasons}"
            )
            if self.audit_decisions:
                self._audit(employer, result)

        return results

    def rank_candidates(
        self,
        candidates: Iterable[Candidate],
        employer: Employer,
        exclusions: Optional[ExclusionLookup] = None,
        profile: Optional[EmployerProfile] = None,
    ) -> list[MatchResult]:
        """
        Rank candidates by match score.

        Excluded and eliminated candidates are dropped; use ``evaluate`` or
        the individual filters to see their reasons.

        Returns:
            Surviving candidates, highest score first, ranked 1..N
        """
        results = self.evaluate(candidates, employer, exclusions, profile)
        survivors = [result for result in results if not result.is_eliminated]
        return sorted(survivors, key=lambda result: result.rank)

    def _audit(self, employer: Employer, result: MatchResult) -> None:
        """Record one terminal verdict in the audit log."""
        details = {
            "job_id": employer.job_id,
            "candidate_id": result.candidate.candidate_id,
        }
        outcome = MatchOutcome(result.outcome)
        if outcome == MatchOutcome.EXCLUDED:
            action = AuditAction.CANDIDATE_EXCLUDED
            details["reasons"] = result.elimination_reasons
        elif outcome == MatchOutcome.ELIMINATED:
            action = AuditAction.CANDIDATE_ELIMINATED
            details["reasons"] = result.elimination_reasons
        else:
            action = AuditAction.CANDIDATE_RANKED
            details.update(rank=result.rank, score=result.score, percentage=result.percentage)
        audit_log(action.value, details)


# Singleton instance
_matching_engine: Optional[MatchingEngine] = None


def get_matching_engine() -> MatchingEngine:
    """Get the matching engine singleton instance."""
    global _matching_engine
    if _matching_engine is None:
        _matching_engine = MatchingEngine()
    return _matching_engine


def rank_candidates(
    candidates: Iterable[Candidate],
    employer: Employer,
    exclusions: Optional[ExclusionLookup] = None,
    profile: Optional[EmployerProfile] = None,
) -> list[MatchResult]:
    """Rank candidates with the shared engine. See MatchingEngine.rank_candidates."""
    return get_matching_engine().rank_candidates(candidates, employer, exclusions, profile)
