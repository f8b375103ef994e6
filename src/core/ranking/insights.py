"""
Population-level hiring insights.

Summarizes a ranked candidate pool for one job: score distribution, top
candidates, skill coverage gaps and recruiter recommendations.
"""

from datetime import datetime
from typing import Any, Optional, Sequence, Union

import numpy as np

from src.core.matching import SkillMatcher
from src.core.scoring.composite_scorer import as_job
from src.data.models import (
    InsightsReport,
    JobPosting,
    RankedCandidate,
    RankingOptions,
    Recommendation,
    ScoreDistribution,
    SkillGap,
)
from src.utils.constants import (
    LOW_AVERAGE_THRESHOLD,
    RECOMMENDATION_MESSAGES,
    SCORE_DISTRIBUTION_BOUNDS,
    SKILL_GAP_COVERAGE_THRESHOLD,
    TOP_CANDIDATE_THRESHOLD,
    TOP_CANDIDATES_LIMIT,
    RecommendationType,
)
from src.utils.logger import get_logger
from src.utils.rounding import round_int

from .ranking_engine import CandidateInput, RankingEngine, get_ranking_engine

logger = get_logger(__name__)


class InsightAggregator:
    """
    Derives an InsightsReport from a candidate pool.

    Ranks the pool with full analysis, then computes:
    - average and distribution of priority scores
    - up to five top candidates (score >= 80) in rank order
    - required tags covered by fewer than half of the pool
    - warnings and hints for the recruiter
    """

    def __init__(self, engine: RankingEngine, skill_matcher: Optional[SkillMatcher] = None):
        """
        Initialize the insight aggregator.

        Args:
            engine: Ranking engine used to score the pool
            skill_matcher: Matcher deciding skill coverage; defaults to the engine's
        """
        self.engine = engine
        self.skill_matcher = skill_matcher or engine.skill_matcher

    def aggregate(
        self,
        candidates: Sequence[CandidateInput],
        job: Union[JobPosting, dict[str, Any], None],
        now: Optional[datetime] = None,
    ) -> InsightsReport:
        """
        Rank a pool and summarize it.

        Args:
            candidates: Candidate records
            job: Job posting the pool applied to
            now: Reference instant for recency scoring

        Returns:
            InsightsReport; an empty pool yields zeros and empty lists
        """
        if not candidates:
            return InsightsReport()

        ranked = self.engine.rank(
            candidates, job, RankingOptions(include_analysis=True), now=now
        )
        return self.summarize(ranked, job)

    def summarize(
        self,
        ranked: Sequence[RankedCandidate],
        job: Union[JobPosting, dict[str, Any], None],
    ) -> InsightsReport:
        """
        Summarize an already-ranked pool.

        Args:
            ranked: Ranked candidates, in rank order
            job: Job posting the pool was ranked against

        Returns:
            InsightsReport for the pool
        """
        if not ranked:
            return InsightsReport()

        job = as_job(job)
        scores = np.array([r.priority_score for r in ranked], dtype=float)
        average = float(scores.mean())

        top_candidates = [r for r in ranked if r.priority_score >= TOP_CANDIDATE_THRESHOLD]
        skill_gaps = self._skill_gaps(ranked, job)

        report = InsightsReport(
            total_candidates=len(ranked),
            average_score=round_int(average),
            top_candidates=top_candidates[:TOP_CANDIDATES_LIMIT],
            skill_gaps=skill_gaps,
            recommendations=self._recommendations(top_candidates, skill_gaps, average),
            score_distribution=self._distribution(scores),
        )

        logger.debug(
            f"Insights for job {job.id or job.title!r}: {report.total_candidates} candidates, "
            f"average {report.average_score}, {len(skill_gaps)} skill gaps"
        )
        return report

    def _skill_gaps(self, ranked: Sequence[RankedCandidate], job: JobPosting) -> list[SkillGap]:
        """Required tags covered by less than half of the pool, least covered first."""
        total = len(ranked)
        gaps = []
        for tag in job.tags:
            with_skill = sum(
                1 for r in ranked if self.skill_matcher.covers(r.candidate.skills, tag)
            )
            coverage = with_skill / total * 100
            if coverage < SKILL_GAP_COVERAGE_THRESHOLD:
                gaps.append(
                    SkillGap(
                        skill=tag,
                        coverage=round_int(coverage),
                        candidates_with_skill=with_skill,
                        total_candidates=total,
                    )
                )
        return sorted(gaps, key=lambda gap: gap.coverage)

    @staticmethod
    def _recommendations(
        top_candidates: list[RankedCandidate],
        skill_gaps: list[SkillGap],
        average: float,
    ) -> list[Recommendation]:
        recommendations = []

        if not top_candidates:
            recommendations.append(
                Recommendation(
                    type=RecommendationType.WARNING,
                    message=RECOMMENDATION_MESSAGES["no_top_candidates"],
                )
            )

        if skill_gaps:
            recommendations.append(
                Recommendation(
                    type=RecommendationType.INFO,
                    message=RECOMMENDATION_MESSAGES["skill_gaps"].format(count=len(skill_gaps)),
                )
            )

        if average < LOW_AVERAGE_THRESHOLD:
            recommendations.append(
                Recommendation(
                    type=RecommendationType.WARNING,
                    message=RECOMMENDATION_MESSAGES["low_average"],
                )
            )

        return recommendations

    @staticmethod
    def _distribution(scores: np.ndarray) -> ScoreDistribution:
        excellent = SCORE_DISTRIBUTION_BOUNDS["excellent"]
        good = SCORE_DISTRIBUTION_BOUNDS["good"]
        average = SCORE_DISTRIBUTION_BOUNDS["average"]
        return ScoreDistribution(
            excellent=int(np.count_nonzero(scores >= excellent)),
            good=int(np.count_nonzero((scores >= good) & (scores < excellent))),
            average=int(np.count_nonzero((scores >= average) & (scores < good))),
            below=int(np.count_nonzero(scores < average)),
        )


# Singleton instance
_insight_aggregator: Optional[InsightAggregator] = None


def get_insight_aggregator() -> InsightAggregator:
    """Get the insight aggregator singleton built on the shared ranking engine."""
    global _insight_aggregator
    if _insight_aggregator is None:
        _insight_aggregator = InsightAggregator(get_ranking_engine())
    return _insight_aggregator
