"""
Pydantic data models for the ranking engine.

This module provides all records used by the scoring pipeline: the input
candidate and job posting, scoring options, per-candidate breakdowns, and
population-level insight reports.
"""

# Base models
from .base import CamelModel, EmbeddedModel

# Candidate models
from .candidate import Candidate, CandidateSkill

# Job models
from .job import JobPosting, RankingOptions, ScoringWeights, SkillRequirement

# Ranking models
from .ranking import (
    FactorScore,
    RankedCandidate,
    ScoreBreakdown,
    SkillMatchDetail,
    SkillMatchResult,
)

# Insight models
from .insights import InsightsReport, Recommendation, ScoreDistribution, SkillGap

# Taxonomy models
from .taxonomy import (
    CategoryBreakdown,
    SkillRecommendation,
    SkillUpgrade,
    TaxonomyMatch,
    TaxonomyMatchResult,
    TaxonomyMiss,
)

__all__ = [
    # Base
    "CamelModel",
    "EmbeddedModel",
    # Candidate
    "Candidate",
    "CandidateSkill",
    # Job
    "JobPosting",
    "RankingOptions",
    "ScoringWeights",
    "SkillRequirement",
    # Ranking
    "FactorScore",
    "RankedCandidate",
    "ScoreBreakdown",
    "SkillMatchDetail",
    "SkillMatchResult",
    # Insights
    "InsightsReport",
    "Recommendation",
    "ScoreDistribution",
    "SkillGap",
    # Taxonomy
    "CategoryBreakdown",
    "SkillRecommendation",
    "SkillUpgrade",
    "TaxonomyMatch",
    "TaxonomyMatchResult",
    "TaxonomyMiss",
]
