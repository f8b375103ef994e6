"""
Candidate ranking engine.

Scores every candidate in a pool against a job posting, orders the pool
by a chosen key and assigns contiguous ranks.
"""

from datetime import datetime
from typing import Any, Callable, Optional, Sequence, Union

from src.core.matching import SkillMatcher
from src.core.scoring import CompositeScorer
from src.core.scoring.composite_scorer import (
    WeightsInput,
    as_candidate,
    as_job,
    resolve_weights,
)
from src.data.models import (
    Candidate,
    JobPosting,
    RankedCandidate,
    RankingOptions,
    ScoreBreakdown,
    ScoringWeights,
)
from src.utils.clock import Clock, SystemClock, as_utc
from src.utils.constants import SortBy
from src.utils.logger import get_logger

logger = get_logger(__name__)

CandidateInput = Union[Candidate, dict[str, Any]]
OptionsInput = Union[RankingOptions, dict[str, Any], None]
ScoredCandidate = tuple[Candidate, ScoreBreakdown]


def _priority_key(item: ScoredCandidate) -> float:
    return item[1].total_score


def _skill_match_key(item: ScoredCandidate) -> float:
    return item[1].skill.score


def _experience_key(item: ScoredCandidate) -> float:
    return item[1].experience.score


def _application_date_key(item: ScoredCandidate) -> float:
    # Candidates without an application date sort as if they applied at the epoch
    applied_at = item[0].applied_at
    return as_utc(applied_at).timestamp() if applied_at else 0.0


SORT_KEYS: dict[str, Callable[[ScoredCandidate], float]] = {
    SortBy.PRIORITY_SCORE.value: _priority_key,
    SortBy.SKILL_MATCH.value: _skill_match_key,
    SortBy.EXPERIENCE.value: _experience_key,
    SortBy.APPLICATION_DATE.value: _application_date_key,
}


class RankingEngine:
    """
    Ranks a candidate pool for one job posting.

    The engine holds configuration only. Each call scores the pool afresh,
    never modifies the caller's records, and returns the whole pool with
    no filtering or pagination.
    """

    def __init__(
        self,
        clock: Clock,
        weights: WeightsInput = None,
        skill_matcher: Optional[SkillMatcher] = None,
    ):
        """
        Initialize the ranking engine.

        Args:
            clock: Source of "now" for recency scoring
            weights: Default scoring weights for calls that do not set their own
            skill_matcher: Matcher used for the skill factor
        """
        self.clock = clock
        self.scorer = CompositeScorer(clock, weights=weights, skill_matcher=skill_matcher)

    @property
    def weights(self) -> ScoringWeights:
        """Default scoring weights."""
        return self.scorer.weights

    @property
    def skill_matcher(self) -> SkillMatcher:
        return self.scorer.skill_matcher

    def rank(
        self,
        candidates: Sequence[CandidateInput],
        job: Union[JobPosting, dict[str, Any], None],
        options: OptionsInput = None,
        now: Optional[datetime] = None,
    ) -> list[RankedCandidate]:
        """
        Score, sort and rank a candidate pool.

        Ties keep the candidates' original relative order.

        Args:
            candidates: Candidate records in their original order
            job: Job posting to rank against
            options: Weights, sort key and whether to attach full analysis
            now: Reference instant; read once from the clock when omitted

        Returns:
            Every candidate, sorted non-increasing by the sort key, ranked 1..N
        """
        options = resolve_options(options)
        if not candidates:
            return []

        job = as_job(job)
        now = now or self.clock.now()
        weights = (
            resolve_weights(options.weights) if "weights" in options.model_fields_set else None
        )

        scored: list[ScoredCandidate] = []
        for raw in candidates:
            candidate = as_candidate(raw)
            scored.append((candidate, self.scorer.score(candidate, job, weights=weights, now=now)))

        sort_key = SORT_KEYS[SortBy(options.sort_by).value]
        # sorted() is stable, including with reverse=True
        ordered = sorted(scored, key=sort_key, reverse=True)

        ranked = [
            RankedCandidate(
                candidate=candidate,
                priority_score=breakdown.total_score,
                rank=position,
                skill_match_score=breakdown.skill.score,
                breakdown=breakdown if options.include_analysis else None,
                skill_match=breakdown.skill_match if options.include_analysis else None,
            )
            for position, (candidate, breakdown) in enumerate(ordered, start=1)
        ]

        logger.debug(
            f"Ranked {len(ranked)} candidates for job {job.id or job.title!r} "
            f"by {SortBy(options.sort_by).value}"
        )
        return ranked

    def update_candidate_scores(
        self,
        candidates: Sequence[CandidateInput],
        job: Union[JobPosting, dict[str, Any], None],
        now: Optional[datetime] = None,
    ) -> list[RankedCandidate]:
        """Re-rank a pool by priority score without attaching full analysis."""
        return self.rank(candidates, job, RankingOptions(include_analysis=False), now=now)


def resolve_options(options: OptionsInput) -> RankingOptions:
    """Coerce caller options into RankingOptions."""
    if options is None:
        return RankingOptions()
    if isinstance(options, RankingOptions):
        return options
    return RankingOptions.model_validate(options)


# Singleton instance
_ranking_engine: Optional[RankingEngine] = None


def get_ranking_engine() -> RankingEngine:
    """Get the ranking engine singleton, wired to the system clock and configured weights."""
    global _ranking_engine
    if _ranking_engine is None:
        from src.utils.config import get_settings

        settings = get_settings()
        _ranking_engine = RankingEngine(SystemClock(), weights=settings.ranking.weights)
    return _ranking_engine
