"""
Ranking and scoring data models.

Defines skill-match results, the per-factor score breakdown, and the
ranked candidate record returned by the ranking engine.
"""

from typing import Optional

from pydantic import Field

from src.utils.constants import MatchType, ScoreBand, ScoringFactor

from .base import CamelModel, EmbeddedModel
from .candidate import Candidate


class SkillMatchDetail(CamelModel):
    """A required tag paired with the candidate skill that satisfied it."""

    required: str
    candidate: str
    type: MatchType


class SkillMatchResult(CamelModel):
    """Outcome of matching a candidate's skills against required tags."""

    score: float = 0.0  # sum of match weights
    percentage: float = 0.0  # 0-100, two decimals
    exact_matches: list[SkillMatchDetail] = Field(default_factory=list)
    partial_matches: list[SkillMatchDetail] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    total_required: int = 0
    matched_count: int = 0

    @property
    def matched_tags(self) -> list[str]:
        """Required tags satisfied by an exact or partial match."""
        return [m.required for m in self.exact_matches + self.partial_matches]


class FactorScore(CamelModel):
    """One factor's contribution to the priority score."""

    score: float
    weight: float
    contribution: int  # round(score * weight), rounded independently


class ScoreBreakdown(CamelModel):
    """
    Traceable breakdown of a candidate's priority score.

    ``contribution`` values are rounded independently, so their sum may
    differ slightly from ``total_score``.
    """

    skill: FactorScore
    experience: FactorScore
    education: FactorScore
    availability: FactorScore
    recency: FactorScore
    total_score: int = Field(ge=0, le=100)

    skill_match: Optional[SkillMatchResult] = None

    @property
    def factors(self) -> dict[ScoringFactor, FactorScore]:
        """Factor scores keyed by factor, in weighting order."""
        return {
            ScoringFactor.SKILL: self.skill,
            ScoringFactor.EXPERIENCE: self.experience,
            ScoringFactor.EDUCATION: self.education,
            ScoringFactor.AVAILABILITY: self.availability,
            ScoringFactor.RECENCY: self.recency,
        }

    @property
    def contribution_total(self) -> int:
        """Sum of the independently rounded contributions."""
        return sum(f.contribution for f in self.factors.values())


class RankedCandidate(EmbeddedModel):
    """A candidate with its priority score and position in a ranked pool."""

    candidate: Candidate  # the caller's record, never modified
    priority_score: int = Field(ge=0, le=100)
    rank: int = Field(ge=1)
    skill_match_score: float = 0.0

    # Present when the ranking call asked for full analysis
    breakdown: Optional[ScoreBreakdown] = None
    skill_match: Optional[SkillMatchResult] = None

    @property
    def score_band(self) -> ScoreBand:
        """Distribution bucket of the priority score."""
        return ScoreBand.from_score(self.priority_score)
