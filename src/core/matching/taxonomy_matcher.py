"""
Taxonomy-weighted skill matching.

Extends plain tag matching with skill categories, requirement priorities,
proficiency levels and verification, and derives improvement advice from
the result.
"""

import re
from typing import Any, Optional, Sequence, Union

from src.data.models import (
    CandidateSkill,
    CategoryBreakdown,
    SkillRecommendation,
    SkillRequirement,
    SkillUpgrade,
    TaxonomyMatch,
    TaxonomyMatchResult,
    TaxonomyMiss,
)
from src.utils.constants import (
    CATEGORY_PATTERNS,
    COMPLEMENTARY_SKILLS,
    COMPLEMENTARY_SUGGESTION_LIMIT,
    DEFAULT_LEVEL_MULTIPLIER,
    LEVEL_MULTIPLIERS,
    PARTIAL_MATCH_WEIGHT,
    PRIORITY_MULTIPLIERS,
    SKILL_TAXONOMY,
    VERIFIED_SKILL_BONUS,
)
from src.utils.logger import get_logger
from src.utils.rounding import round_half_up, round_int

logger = get_logger(__name__)

SkillInput = Union[str, CandidateSkill, dict[str, Any]]
RequirementInput = Union[str, SkillRequirement, dict[str, Any]]


class TaxonomyMatcher:
    """
    Scores annotated skills against prioritized requirements.

    Each requirement's weight is scaled by its taxonomy category and
    subcategory weights and by its priority. Exact matches earn that weight
    adjusted for proficiency level and verification; partial matches earn
    60% of it.
    """

    def __init__(
        self,
        use_taxonomy: bool = True,
        include_partial_matches: bool = True,
        category_weights: Optional[dict[str, float]] = None,
        minimum_score: float = 0.0,
    ):
        """
        Initialize the taxonomy matcher.

        Args:
            use_taxonomy: Apply category and subcategory weights
            include_partial_matches: Give partial credit for related skills
            category_weights: Overrides for taxonomy category weights
            minimum_score: Percentage a candidate must reach to pass
        """
        self.use_taxonomy = use_taxonomy
        self.include_partial_matches = include_partial_matches
        self.category_weights = category_weights or {}
        self.minimum_score = minimum_score

    def match(
        self,
        candidate_skills: Sequence[SkillInput],
        requirements: Sequence[RequirementInput],
    ) -> TaxonomyMatchResult:
        """
        Match annotated candidate skills against job requirements.

        Args:
            candidate_skills: Skill names or CandidateSkill records
            requirements: Requirement names or SkillRequirement records

        Returns:
            TaxonomyMatchResult with matches, category breakdown and advice
        """
        skills = [to_candidate_skill(s) for s in candidate_skills or []]
        reqs = [to_requirement(r) for r in requirements or []]

        exact: list[TaxonomyMatch] = []
        partial: list[TaxonomyMatch] = []
        missing: list[TaxonomyMiss] = []

        total_score = 0.0
        max_possible = 0.0

        for req in reqs:
            base_weight = self._base_weight(req)
            max_possible += base_weight
            req_name = req.name.lower()

            exact_skill = next((s for s in skills if s.name.lower() == req_name), None)
            if exact_skill is not None:
                level_multiplier = LEVEL_MULTIPLIERS.get(exact_skill.level, DEFAULT_LEVEL_MULTIPLIER)
                bonus = VERIFIED_SKILL_BONUS if exact_skill.verified else 1.0
                score = base_weight * level_multiplier * bonus
                exact.append(self._matched(req, exact_skill, score, base_weight, "exact"))
                total_score += score
                continue

            partial_skill = None
            if self.include_partial_matches:
                partial_skill = next(
                    (s for s in skills if self._is_related(s, req)),
                    None,
                )

            if partial_skill is not None:
                score = base_weight * PARTIAL_MATCH_WEIGHT
                partial.append(self._matched(req, partial_skill, score, base_weight, "partial"))
                total_score += score
            else:
                missing.append(
                    TaxonomyMiss(
                        requirement=req.name,
                        category=req.category,
                        subcategory=req.subcategory,
                        priority=req.priority,
                        weight=base_weight,
                        impact="critical" if req.required else "moderate",
                    )
                )

        final_score = (total_score / max_possible) * 100 if max_possible > 0 else 0.0

        result = TaxonomyMatchResult(
            score=total_score,
            max_score=max_possible,
            percentage=round_half_up(final_score, 2),
            exact=exact,
            partial=partial,
            missing=missing,
            category_breakdown=self._category_breakdown(exact + partial, missing),
            passes_minimum=final_score >= self.minimum_score,
            minimum_score=self.minimum_score,
        )
        result.recommendations = generate_skill_recommendations(result, skills)

        logger.debug(
            f"Taxonomy match: {len(exact)} exact, {len(partial)} partial, "
            f"{len(missing)} missing ({result.percentage}%)"
        )
        return result

    def _base_weight(self, req: SkillRequirement) -> float:
        """Requirement weight scaled by taxonomy and priority."""
        category_weight = 1.0
        subcategory_weight = 1.0
        if self.use_taxonomy:
            category = SKILL_TAXONOMY.get(req.category, {})
            category_weight = (
                self.category_weights.get(req.category)
                or category.get("weight")
                or 1.0
            )
            subcategory = category.get("subcategories", {}).get(req.subcategory, {})
            subcategory_weight = subcategory.get("weight") or 1.0

        priority_multiplier = PRIORITY_MULTIPLIERS.get(req.priority, 1.0)
        return req.weight * category_weight * subcategory_weight * priority_multiplier

    @staticmethod
    def _is_related(skill: CandidateSkill, req: SkillRequirement) -> bool:
        """Substring match either way, or same category and subcategory."""
        skill_name = skill.name.lower()
        req_name = req.name.lower()
        return (
            req_name in skill_name
            or skill_name in req_name
            or (skill.category == req.category and skill.subcategory == req.subcategory)
        )

    @staticmethod
    def _matched(
        req: SkillRequirement,
        skill: CandidateSkill,
        score: float,
        weight: float,
        match_type: str,
    ) -> TaxonomyMatch:
        return TaxonomyMatch(
            requirement=req.name,
            candidate=skill.name,
            category=req.category,
            subcategory=req.subcategory,
            priority=req.priority,
            level=skill.level,
            verified=skill.verified,
            score=score,
            weight=weight,
            match_type=match_type,
        )

    @staticmethod
    def _category_breakdown(
        matched: list[TaxonomyMatch],
        missing: list[TaxonomyMiss],
    ) -> dict[str, CategoryBreakdown]:
        """Summarize matched vs. total requirements per taxonomy category."""
        breakdown = {}
        for category in SKILL_TAXONOMY:
            category_matches = [m for m in matched if m.category == category]
            category_missing = [m for m in missing if m.category == category]
            total = len(category_matches) + len(category_missing)
            if total == 0:
                continue

            breakdown[category] = CategoryBreakdown(
                matched=len(category_matches),
                total=total,
                percentage=round_int(len(category_matches) / total * 100),
                score=sum(m.score for m in category_matches),
                max_score=(
                    sum(m.weight for m in category_matches)
                    + sum(m.weight for m in category_missing)
                ),
            )
        return breakdown


def enhanced_skill_match(
    candidate_skills: Sequence[SkillInput],
    requirements: Sequence[RequirementInput],
    use_taxonomy: bool = True,
    include_partial_matches: bool = True,
    category_weights: Optional[dict[str, float]] = None,
    minimum_score: float = 0.0,
) -> TaxonomyMatchResult:
    """Run a one-off taxonomy-weighted match."""
    matcher = TaxonomyMatcher(
        use_taxonomy=use_taxonomy,
        include_partial_matches=include_partial_matches,
        category_weights=category_weights,
        minimum_score=minimum_score,
    )
    return matcher.match(candidate_skills, requirements)


def generate_skill_recommendations(
    result: TaxonomyMatchResult,
    candidate_skills: Sequence[SkillInput],
) -> list[SkillRecommendation]:
    """
    Derive improvement advice from a taxonomy match.

    Args:
        result: Taxonomy match result
        candidate_skills: The candidate's current skills

    Returns:
        Recommendations ordered by priority (most urgent first)
    """
    recommendations = []

    critical_missing = [
        m for m in result.missing if m.priority == "critical" or m.impact == "critical"
    ]
    if critical_missing:
        recommendations.append(
            SkillRecommendation(
                type="critical",
                title="Critical Skills Gap",
                description=(
                    f"Missing {len(critical_missing)} critical skills that are "
                    "essential for this role"
                ),
                skills=[m.requirement for m in critical_missing],
                priority=1,
            )
        )

    high_priority_missing = [m for m in result.missing if m.priority == "high"]
    if high_priority_missing:
        recommendations.append(
            SkillRecommendation(
                type="improvement",
                title="High Priority Skills",
                description="Consider developing these high-priority skills to strengthen candidacy",
                skills=[m.requirement for m in high_priority_missing],
                priority=2,
            )
        )

    upgrades = [m for m in result.partial if m.match_type == "partial"]
    if upgrades:
        recommendations.append(
            SkillRecommendation(
                type="enhancement",
                title="Skill Enhancement Opportunities",
                description="These skills show potential but could be strengthened",
                skills=[
                    SkillUpgrade(current=m.candidate, target=m.requirement, category=m.category)
                    for m in upgrades
                ],
                priority=3,
            )
        )

    complementary = suggest_complementary_skills(candidate_skills)
    if complementary:
        recommendations.append(
            SkillRecommendation(
                type="complementary",
                title="Complementary Skills",
                description="Skills that complement your existing expertise",
                skills=complementary,
                priority=4,
            )
        )

    return sorted(recommendations, key=lambda r: r.priority)


def suggest_complementary_skills(candidate_skills: Sequence[SkillInput]) -> list[str]:
    """
    Suggest skills that usually accompany ones the candidate already has.

    Args:
        candidate_skills: Skill names or CandidateSkill records

    Returns:
        Up to five suggested skill names the candidate does not list
    """
    names = {to_candidate_skill(s).name.lower() for s in candidate_skills or []}
    suggestions = []
    for anchor, companions in COMPLEMENTARY_SKILLS.items():
        if anchor not in names:
            continue
        suggestions.extend(c for c in companions if c.lower() not in names)
    return suggestions[:COMPLEMENTARY_SUGGESTION_LIMIT]


def categorize_skill(skill_name: str) -> str:
    """
    Infer a taxonomy category from a skill name.

    Args:
        skill_name: Free-text skill name

    Returns:
        "technical", "soft", "domain" or "certifications"; "technical" if unknown
    """
    skill = skill_name.lower()
    for category, patterns in CATEGORY_PATTERNS:
        if any(re.search(pattern, skill) for pattern in patterns):
            return category
    if "certification" in skill or "certified" in skill:
        return "certifications"
    return "technical"


def to_candidate_skill(value: SkillInput) -> CandidateSkill:
    """Coerce a skill name or dict into a CandidateSkill."""
    if isinstance(value, CandidateSkill):
        return value
    if isinstance(value, str):
        return CandidateSkill(name=value)
    return CandidateSkill.model_validate(value)


def to_requirement(value: RequirementInput) -> SkillRequirement:
    """Coerce a requirement name or dict into a SkillRequirement."""
    if isinstance(value, SkillRequirement):
        return value
    if isinstance(value, str):
        return SkillRequirement(name=value)
    return SkillRequirement.model_validate(value)
