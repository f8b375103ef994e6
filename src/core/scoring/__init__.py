"""Candidate scoring module."""

from .composite_scorer import CompositeScorer, resolve_weights
from .experience_scorer import extract_years, score_experience
from .factor_scorers import (
    days_since,
    score_availability,
    score_education,
    score_recency,
)

__all__ = [
    "CompositeScorer",
    "resolve_weights",
    "extract_years",
    "score_experience",
    "days_since",
    "score_availability",
    "score_education",
    "score_recency",
]
