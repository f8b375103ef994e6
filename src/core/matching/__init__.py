"""Candidate skill matching module."""

from .skill_matcher import SkillMatcher, match_skills
from .taxonomy_matcher import (
    TaxonomyMatcher,
    categorize_skill,
    enhanced_skill_match,
    generate_skill_recommendations,
    suggest_complementary_skills,
)

__all__ = [
    "SkillMatcher",
    "match_skills",
    "TaxonomyMatcher",
    "categorize_skill",
    "enhanced_skill_match",
    "generate_skill_recommendations",
    "suggest_complementary_skills",
]
