"""
Independent factor scorers: education, availability and application recency.

Each scorer is a pure lookup that maps a candidate attribute to a 0-100
score.
"""

import math
from datetime import datetime
from typing import Optional

from src.utils.clock import as_utc
from src.utils.constants import (
    AVAILABILITY_DEFAULT_SCORE,
    AVAILABILITY_LADDER,
    EDUCATION_DEFAULT_SCORE,
    EDUCATION_LADDER,
    RECENCY_DAY_BUCKETS,
    RECENCY_MISSING_SCORE,
    RECENCY_STALE_SCORE,
)

SECONDS_PER_DAY = 24 * 60 * 60


def first_keyword_score(
    text: str,
    ladder: tuple[tuple[str, int], ...],
    default: int,
) -> int:
    """
    Score text against an ordered keyword ladder.

    Args:
        text: Free text to search (case-folded before matching)
        ladder: (keyword, score) pairs evaluated strictly in order
        default: Score when no keyword occurs in the text

    Returns:
        Score of the first keyword contained in the text
    """
    folded = (text or "").casefold()
    for keyword, score in ladder:
        if keyword in folded:
            return score
    return default


def score_education(education: str) -> int:
    """Score the highest education mentioned, e.g. "Bachelor in Hotel Management" -> 80."""
    return first_keyword_score(education, EDUCATION_LADDER, EDUCATION_DEFAULT_SCORE)


def score_availability(availability: str) -> int:
    """Score how soon a candidate can start, e.g. "Within 2 weeks" -> 80."""
    return first_keyword_score(availability, AVAILABILITY_LADDER, AVAILABILITY_DEFAULT_SCORE)


def days_since(applied_at: datetime, now: datetime) -> int:
    """Whole days elapsed between applying and now (floored)."""
    elapsed = (as_utc(now) - as_utc(applied_at)).total_seconds()
    return math.floor(elapsed / SECONDS_PER_DAY)


def score_recency(applied_at: Optional[datetime], now: datetime) -> int:
    """
    Score how recently a candidate applied.

    Args:
        applied_at: Application timestamp; naive values are read as UTC
        now: Reference instant supplied by the caller's clock

    Returns:
        100 for at most a day ago down to 50 for over a month; 0 if unknown
    """
    if applied_at is None:
        return RECENCY_MISSING_SCORE

    days = days_since(applied_at, now)
    for maximum_days, score in RECENCY_DAY_BUCKETS:
        if days <= maximum_days:
            return score
    return RECENCY_STALE_SCORE
