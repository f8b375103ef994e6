"""
Tests for src.services.ranking_cache — memoized ranking results.
"""

from datetime import timedelta

import pytest

from src.services import RankingCache
from src.utils.config import reload_settings


@pytest.fixture
def cache(ranking_engine):
    return RankingCache(ranking_engine, max_entries=2)


# ── rank() ──────────────────────────────────────────────────────────────────


class TestCachedRank:
    def test_miss_then_hit(self, cache, sample_pool, sample_job):
        first = cache.rank(sample_pool, sample_job)
        second = cache.rank(sample_pool, sample_job)
        assert (cache.misses, cache.hits) == (1, 1)
        assert [r.candidate.id for r in first] == [r.candidate.id for r in second]

    def test_matches_engine(self, cache, ranking_engine, sample_pool, sample_job):
        assert cache.rank(sample_pool, sample_job) == ranking_engine.rank(sample_pool, sample_job)

    def test_returned_list_is_a_copy(self, cache, sample_pool, sample_job):
        first = cache.rank(sample_pool, sample_job)
        first.clear()
        assert len(cache.rank(sample_pool, sample_job)) == len(sample_pool)

    def test_options_change_key(self, cache, sample_pool, sample_job):
        cache.rank(sample_pool, sample_job)
        cache.rank(sample_pool, sample_job, {"sort_by": "experience"})
        assert cache.misses == 2

    def test_equivalent_options_share_key(self, cache, sample_pool, sample_job):
        cache.rank(sample_pool, sample_job)
        cache.rank(sample_pool, sample_job, {"sort_by": "priority_score", "include_analysis": True})
        assert cache.hits == 1

    def test_now_changes_key(self, cache, sample_pool, sample_job, now):
        cache.rank(sample_pool, sample_job, now=now)
        cache.rank(sample_pool, sample_job, now=now + timedelta(days=1))
        assert cache.misses == 2

    def test_candidate_change_invalidates(self, cache, make_candidate, sample_job):
        cache.rank([make_candidate(skills=["Cooking"])], sample_job)
        cache.rank([make_candidate(skills=["Baking"])], sample_job)
        assert cache.misses == 2


# ── Eviction ────────────────────────────────────────────────────────────────


class TestEviction:
    def test_bounded(self, cache, sample_pool, sample_job):
        for sort_by in ("priority_score", "skill_match", "experience"):
            cache.rank(sample_pool, sample_job, {"sort_by": sort_by})
        assert len(cache) == 2

    def test_least_recently_used_evicted(self, cache, sample_pool, sample_job):
        cache.rank(sample_pool, sample_job, {"sort_by": "priority_score"})
        cache.rank(sample_pool, sample_job, {"sort_by": "skill_match"})
        cache.rank(sample_pool, sample_job, {"sort_by": "priority_score"})
        cache.rank(sample_pool, sample_job, {"sort_by": "experience"})
        cache.rank(sample_pool, sample_job, {"sort_by": "priority_score"})
        assert cache.hits == 2

    def test_clear(self, cache, sample_pool, sample_job):
        cache.rank(sample_pool, sample_job)
        cache.clear()
        assert len(cache) == 0
        assert (cache.hits, cache.misses) == (0, 0)

    def test_invalid_size(self, ranking_engine):
        with pytest.raises(ValueError):
            RankingCache(ranking_engine, max_entries=0)

    def test_size_from_settings(self, ranking_engine, monkeypatch):
        monkeypatch.setenv("RANKING_CACHE_MAX_ENTRIES", "2")
        try:
            reload_settings()
            assert RankingCache(ranking_engine).max_entries == 2
        finally:
            monkeypatch.delenv("RANKING_CACHE_MAX_ENTRIES")
            reload_settings()

    def test_default_size(self, ranking_engine):
        assert RankingCache(ranking_engine).max_entries == 128
