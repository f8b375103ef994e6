"""
Host-side services for the ranking engine.

This module contains infrastructure that wraps the pure engine without
adding state to it.
"""

from src.services.ranking_cache import RankingCache

__all__ = [
    "RankingCache",
]
