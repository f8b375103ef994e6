"""
Composite priority scoring.

Combines the skill match with the experience, education, availability and
recency factors into a single 0-100 priority score with a traceable
per-factor breakdown.
"""

from datetime import datetime
from typing import Any, Optional, Union

from src.core.matching import SkillMatcher
from src.data.models import (
    Candidate,
    FactorScore,
    JobPosting,
    ScoreBreakdown,
    ScoringWeights,
    SkillMatchResult,
)
from src.utils.clock import Clock
from src.utils.constants import MAX_PRIORITY_SCORE, MIN_PRIORITY_SCORE
from src.utils.logger import get_logger
from src.utils.rounding import round_int

from .experience_scorer import score_experience
from .factor_scorers import score_availability, score_education, score_recency

logger = get_logger(__name__)

WeightsInput = Union[ScoringWeights, dict[str, float], None]


class CompositeScorer:
    """
    Scores one candidate against one job posting.

    Weights are applied exactly as configured. The weighted sum is rounded
    half-up and clamped to 0-100; each factor's contribution is rounded on
    its own and may not add up to the total exactly.
    """

    def __init__(
        self,
        clock: Clock,
        weights: WeightsInput = None,
        skill_matcher: Optional[SkillMatcher] = None,
    ):
        """
        Initialize the composite scorer.

        Args:
            clock: Source of "now" for recency scoring
            weights: Scoring weights; defaults to the standard weighting
            skill_matcher: Matcher used for the skill factor
        """
        self.clock = clock
        self.weights = resolve_weights(weights)
        self.skill_matcher = skill_matcher or SkillMatcher()

    def score(
        self,
        candidate: Union[Candidate, dict[str, Any]],
        job: Union[JobPosting, dict[str, Any], None],
        weights: WeightsInput = None,
        now: Optional[datetime] = None,
    ) -> ScoreBreakdown:
        """
        Compute a candidate's priority score breakdown.

        Args:
            candidate: Candidate record
            job: Job posting the candidate applied to
            weights: Per-call weights overriding the scorer's weights
            now: Reference instant; read from the clock when omitted

        Returns:
            ScoreBreakdown with one entry per factor and the total score
        """
        candidate = as_candidate(candidate)
        job = as_job(job)
        weights = self.weights if weights is None else coerce_weights(weights)
        now = now or self.clock.now()

        skill_match: Optional[SkillMatchResult] = None
        skill_score = 0.0
        if job.tags:
            skill_match = self.skill_matcher.match(candidate.skills, job.tags)
            skill_score = skill_match.percentage

        factor_scores = {
            "skill": skill_score,
            "experience": score_experience(candidate.experience, job.tags, job.category),
            "education": score_education(candidate.education),
            "availability": score_availability(candidate.availability),
            "recency": score_recency(candidate.applied_at, now),
        }
        factor_weights = weights.to_dict()

        weighted_sum = sum(
            factor_scores[factor] * factor_weights[factor] for factor in factor_scores
        )
        total_score = max(MIN_PRIORITY_SCORE, min(MAX_PRIORITY_SCORE, round_int(weighted_sum)))

        return ScoreBreakdown(
            **{
                factor: FactorScore(
                    score=factor_scores[factor],
                    weight=factor_weights[factor],
                    contribution=round_int(factor_scores[factor] * factor_weights[factor]),
                )
                for factor in factor_scores
            },
            total_score=total_score,
            skill_match=skill_match,
        )


def coerce_weights(weights: WeightsInput) -> ScoringWeights:
    """Coerce caller weights into ScoringWeights; missing factors take their default."""
    if weights is None:
        return ScoringWeights()
    if isinstance(weights, ScoringWeights):
        return weights
    return ScoringWeights.model_validate(weights)


def resolve_weights(weights: WeightsInput) -> ScoringWeights:
    """
    Coerce caller weights without renormalizing them.

    A configuration that does not sum to 1.0 is accepted as-is and logged.
    """
    weights = coerce_weights(weights)
    if not weights.is_normalized:
        logger.warning(
            f"Scoring weights sum to {weights.total_weight:.3f}, not 1.0; "
            "scores are not renormalized"
        )
    return weights


def as_candidate(candidate: Union[Candidate, dict[str, Any]]) -> Candidate:
    """Validate a raw candidate mapping; pass Candidate records through."""
    if isinstance(candidate, Candidate):
        return candidate
    return Candidate.model_validate(candidate)


def as_job(job: Union[JobPosting, dict[str, Any], None]) -> JobPosting:
    """Validate a raw job mapping; a missing job scores against no requirements."""
    if job is None:
        return JobPosting()
    if isinstance(job, JobPosting):
        return job
    return JobPosting.model_validate(job)
