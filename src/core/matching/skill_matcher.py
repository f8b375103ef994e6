"""
Candidate skill matcher.

Compares a candidate's skills against a job's required-skill tags and
classifies every tag as an exact match, a partial (substring) match, or
missing.
"""

from typing import Optional, Sequence

from src.data.models import SkillMatchDetail, SkillMatchResult
from src.utils.constants import EXACT_MATCH_WEIGHT, PARTIAL_MATCH_WEIGHT, MatchType
from src.utils.rounding import round_half_up


class SkillMatcher:
    """
    Matches candidate skills to required tags.

    For each required tag, in tag order:
    - exact match: the folded skill equals the folded tag
    - partial match: either folded string contains the other
    - otherwise the tag is missing

    Skills and tags are trimmed first. A blank skill is contained in every
    tag, and a blank tag in every skill, so either one matches partially.
    """

    def __init__(
        self,
        exact_match_weight: float = EXACT_MATCH_WEIGHT,
        partial_match_weight: float = PARTIAL_MATCH_WEIGHT,
        case_insensitive: bool = True,
    ):
        """
        Initialize the skill matcher.

        Args:
            exact_match_weight: Credit for an exact match (also the per-tag maximum)
            partial_match_weight: Credit for a substring match
            case_insensitive: Case-fold skills and tags before comparing
        """
        self.exact_match_weight = exact_match_weight
        self.partial_match_weight = partial_match_weight
        self.case_insensitive = case_insensitive

    def match(
        self,
        candidate_skills: Sequence[str],
        required_tags: Sequence[str],
    ) -> SkillMatchResult:
        """
        Match candidate skills against required tags.

        Args:
            candidate_skills: Candidate skills, in any order, duplicates allowed
            required_tags: Required-skill tags of the job posting

        Returns:
            SkillMatchResult whose match lists follow the order of required_tags
        """
        required_tags = list(required_tags or [])
        candidate_skills = list(candidate_skills or [])

        if not required_tags or not candidate_skills:
            return SkillMatchResult(
                missing_skills=required_tags,
                total_required=len(required_tags),
            )

        skills = self._prepare(candidate_skills)

        exact_matches: list[SkillMatchDetail] = []
        partial_matches: list[SkillMatchDetail] = []
        missing_skills: list[str] = []

        for tag in required_tags:
            folded_tag = self._normalize(tag)
            exact = next((original for original, folded in skills if folded == folded_tag), None)
            if exact is not None:
                exact_matches.append(
                    SkillMatchDetail(required=tag, candidate=exact, type=MatchType.EXACT)
                )
                continue

            partial = next(
                (
                    original
                    for original, folded in skills
                    if folded_tag in folded or folded in folded_tag
                ),
                None,
            )
            if partial is not None:
                partial_matches.append(
                    SkillMatchDetail(required=tag, candidate=partial, type=MatchType.PARTIAL)
                )
                continue

            missing_skills.append(tag)

        score = (
            len(exact_matches) * self.exact_match_weight
            + len(partial_matches) * self.partial_match_weight
        )
        max_score = len(required_tags) * self.exact_match_weight
        percentage = (score / max_score) * 100 if max_score > 0 else 0.0

        return SkillMatchResult(
            score=score,
            percentage=round_half_up(percentage, 2),
            exact_matches=exact_matches,
            partial_matches=partial_matches,
            missing_skills=missing_skills,
            total_required=len(required_tags),
            matched_count=len(exact_matches) + len(partial_matches),
        )

    def covers(self, candidate_skills: Sequence[str], tag: str) -> bool:
        """
        Check whether any skill satisfies a tag by the exact/partial rule.

        Args:
            candidate_skills: Candidate skills
            tag: A single required tag

        Returns:
            True if some skill equals, contains, or is contained in the tag
        """
        folded_tag = self._normalize(tag)
        return any(
            folded_tag in folded or folded in folded_tag
            for _, folded in self._prepare(candidate_skills or [])
        )

    def _prepare(self, candidate_skills: Sequence[str]) -> list[tuple[str, str]]:
        """Pair each skill with its normalized form."""
        return [(skill, self._normalize(skill)) for skill in candidate_skills]

    def _normalize(self, value: Optional[str]) -> str:
        """Trim and optionally case-fold a skill or tag."""
        text = str(value).strip() if value is not None else ""
        return text.casefold() if self.case_insensitive else text


def match_skills(
    candidate_skills: Sequence[str],
    required_tags: Sequence[str],
    exact_match_weight: float = EXACT_MATCH_WEIGHT,
    partial_match_weight: float = PARTIAL_MATCH_WEIGHT,
    case_insensitive: bool = True,
) -> SkillMatchResult:
    """Match skills with a one-off SkillMatcher."""
    matcher = SkillMatcher(
        exact_match_weight=exact_match_weight,
        partial_match_weight=partial_match_weight,
        case_insensitive=case_insensitive,
    )
    return matcher.match(candidate_skills, required_tags)
