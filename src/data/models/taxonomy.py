"""
Taxonomy-weighted skill matching models.

Defines the detailed result of matching annotated candidate skills
against prioritized job requirements.
"""

from typing import Optional, Union

from pydantic import Field

from .base import CamelModel


class TaxonomyMatch(CamelModel):
    """A requirement satisfied by a candidate skill."""

    requirement: str
    candidate: str
    category: str
    subcategory: str
    priority: str
    level: str
    verified: bool = False
    score: float
    weight: float
    match_type: str = "exact"


class TaxonomyMiss(CamelModel):
    """A requirement no candidate skill satisfied."""

    requirement: str
    category: str
    subcategory: str
    priority: str
    weight: float
    impact: str  # "critical" for required skills, else "moderate"


class CategoryBreakdown(CamelModel):
    """Matched vs. total requirements for one taxonomy category."""

    matched: int
    total: int
    percentage: int
    score: float
    max_score: float


class SkillUpgrade(CamelModel):
    """A partial match that could become an exact one."""

    current: str
    target: str
    category: str


class SkillRecommendation(CamelModel):
    """Improvement advice derived from a taxonomy match."""

    type: str  # critical, improvement, enhancement, complementary
    title: str
    description: str
    skills: list[Union[str, SkillUpgrade]] = Field(default_factory=list)
    priority: int


class TaxonomyMatchResult(CamelModel):
    """Outcome of taxonomy-weighted skill matching."""

    score: float = 0.0
    max_score: float = 0.0
    percentage: float = 0.0
    exact: list[TaxonomyMatch] = Field(default_factory=list)
    partial: list[TaxonomyMatch] = Field(default_factory=list)
    missing: list[TaxonomyMiss] = Field(default_factory=list)
    category_breakdown: dict[str, CategoryBreakdown] = Field(default_factory=dict)
    recommendations: list[SkillRecommendation] = Field(default_factory=list)
    passes_minimum: bool = True
    minimum_score: Optional[float] = None
