"""
Population-level hiring insight models.

Defines the report derived from a ranked candidate pool: score
distribution, top candidates, skill gaps and recommendations.
"""

from pydantic import Field

from src.utils.constants import RecommendationType

from .base import CamelModel
from .ranking import RankedCandidate


class SkillGap(CamelModel):
    """A required tag that too few candidates cover."""

    skill: str
    coverage: int  # percent of the pool, rounded
    candidates_with_skill: int
    total_candidates: int


class Recommendation(CamelModel):
    """A rule-derived hint for the recruiter."""

    type: RecommendationType
    message: str


class ScoreDistribution(CamelModel):
    """Counts of candidates per priority score bucket."""

    excellent: int = 0  # >= 90
    good: int = 0  # [80, 90)
    average: int = 0  # [60, 80)
    below: int = 0  # < 60

    @property
    def total(self) -> int:
        return self.excellent + self.good + self.average + self.below


class InsightsReport(CamelModel):
    """Aggregate statistics for one job's candidate pool."""

    total_candidates: int = 0
    average_score: int = 0
    top_candidates: list[RankedCandidate] = Field(default_factory=list)
    skill_gaps: list[SkillGap] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)
    score_distribution: ScoreDistribution = Field(default_factory=ScoreDistribution)
