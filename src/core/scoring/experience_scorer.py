"""
Experience relevance scoring.

Derives a 0-100 relevance score from a candidate's free-text experience
description, the job category and the job's required-skill tags.
"""

import re
from typing import Optional, Sequence

from src.utils.constants import (
    EXPERIENCE_CATEGORY_BONUS,
    EXPERIENCE_MIN_BASE_SCORE,
    EXPERIENCE_TAG_BONUS,
    EXPERIENCE_TAG_BONUS_CAP,
    EXPERIENCE_YEAR_BUCKETS,
    MAX_PRIORITY_SCORE,
)

# First integer directly followed by "year(s)" or "yr(s)"
YEARS_PATTERN = re.compile(r"(\d+)\s*(?:years?|yrs?)", re.IGNORECASE)


def extract_years(experience_text: str) -> int:
    """
    Extract years of experience from free text.

    Args:
        experience_text: e.g. "5 years as chef", "2yrs in retail"

    Returns:
        The first number stated in years, or 0 if none is stated
    """
    match = YEARS_PATTERN.search(experience_text or "")
    return int(match.group(1)) if match else 0


def years_base_score(years: int) -> int:
    """Base score for a number of years of experience."""
    for minimum_years, score in EXPERIENCE_YEAR_BUCKETS:
        if years >= minimum_years:
            return score
    return EXPERIENCE_MIN_BASE_SCORE


def score_experience(
    experience_text: str,
    required_tags: Sequence[str] = (),
    job_category: Optional[str] = None,
) -> int:
    """
    Score how relevant a candidate's experience is to a job.

    The score adds up:
    - a base of 10-40 points from the stated years
    - 30 points if the job category appears in the text
    - 10 points per required tag contained in the text, capped at 30
      (an empty tag is contained in any text)

    Args:
        experience_text: Candidate's experience description
        required_tags: Job's required-skill tags
        job_category: Job category, e.g. "Kitchen"

    Returns:
        Relevance score from 0 to 100; 0 for empty text
    """
    if not experience_text:
        return 0

    text = experience_text.casefold()
    score = years_base_score(extract_years(text))

    if job_category and job_category.casefold() in text:
        score += EXPERIENCE_CATEGORY_BONUS

    tag_matches = sum(1 for tag in required_tags or [] if tag.casefold() in text)
    if tag_matches > 0:
        score += min(EXPERIENCE_TAG_BONUS_CAP, tag_matches * EXPERIENCE_TAG_BONUS)

    return min(MAX_PRIORITY_SCORE, score)
