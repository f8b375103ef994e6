"""Candidate ranking and hiring insights module."""

from .insights import InsightAggregator, get_insight_aggregator
from .ranking_engine import (
    RankingEngine,
    get_ranking_engine,
    resolve_options,
)

__all__ = [
    "InsightAggregator",
    "get_insight_aggregator",
    "RankingEngine",
    "get_ranking_engine",
    "resolve_options",
]
