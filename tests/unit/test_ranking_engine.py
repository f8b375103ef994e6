"""
Tests for src.core.ranking.ranking_engine — sorting, ranks, options.

The sample pool scores 99 (c-strong), 44 (c-mid) and 14 for the remaining
three candidates, which tie and keep their input order.
"""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from src.core.ranking import RankingEngine, get_ranking_engine, resolve_options
from src.data.models import RankingOptions, ScoringWeights
from src.utils.clock import SystemClock
from src.utils.constants import SortBy


def ids(ranked):
    return [r.candidate.id for r in ranked]


# ── rank() ordering ─────────────────────────────────────────────────────────


class TestRankOrdering:
    def test_sorted_by_priority_score(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.rank(sample_pool, sample_job)
        assert ids(ranked) == ["c-strong", "c-mid", "c-weak", "c-tie-a", "c-tie-b"]
        assert [r.priority_score for r in ranked] == [99, 44, 14, 14, 14]

    def test_ranks_are_contiguous(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.rank(sample_pool, sample_job)
        assert [r.rank for r in ranked] == [1, 2, 3, 4, 5]

    def test_ties_keep_input_order(self, ranking_engine, sample_pool, sample_job):
        reordered = [sample_pool[4], sample_pool[3], sample_pool[0]]
        ranked = ranking_engine.rank(reordered, sample_job)
        assert ids(ranked) == ["c-tie-b", "c-tie-a", "c-weak"]

    def test_result_is_permutation_of_input(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.rank(sample_pool, sample_job)
        assert sorted(ids(ranked)) == sorted(c.id for c in sample_pool)

    def test_candidate_identity_preserved(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.rank(sample_pool, sample_job)
        assert ranked[0].candidate is sample_pool[1]

    def test_scores_non_increasing(self, ranking_engine, sample_pool, sample_job):
        scores = [r.priority_score for r in ranking_engine.rank(sample_pool, sample_job)]
        assert scores == sorted(scores, reverse=True)

    def test_empty_pool(self, ranking_engine, sample_job):
        assert ranking_engine.rank([], sample_job) == []

    def test_single_candidate(self, ranking_engine, make_candidate, sample_job):
        ranked = ranking_engine.rank([make_candidate()], sample_job)
        assert len(ranked) == 1
        assert ranked[0].rank == 1
        assert ranked[0].priority_score == 76

    def test_dict_candidates(self, ranking_engine, sample_job):
        ranked = ranking_engine.rank(
            [{"id": "a", "skills": ["Driving"]}, {"id": "b", "skills": ["Cooking"]}],
            sample_job.model_dump(),
        )
        assert ids(ranked) == ["b", "a"]


# ── rank() sort keys ────────────────────────────────────────────────────────


class TestSortKeys:
    def test_skill_match(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.rank(sample_pool, sample_job, {"sort_by": "skill_match"})
        assert ids(ranked)[:2] == ["c-strong", "c-mid"]
        assert [r.skill_match_score for r in ranked][:2] == [100.0, 33.33]

    def test_experience(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.rank(
            sample_pool, sample_job, RankingOptions(sort_by=SortBy.EXPERIENCE)
        )
        assert ids(ranked) == ["c-strong", "c-mid", "c-tie-a", "c-tie-b", "c-weak"]
        assert [r.rank for r in ranked] == [1, 2, 3, 4, 5]

    def test_application_date_most_recent_first(self, ranking_engine, make_candidate, sample_job):
        pool = [
            make_candidate(id="older", applied_days_ago=10),
            make_candidate(id="undated", applied_days_ago=None),
            make_candidate(id="newer", applied_days_ago=1),
        ]
        ranked = ranking_engine.rank(pool, sample_job, {"sort_by": "application_date"})
        assert ids(ranked) == ["newer", "older", "undated"]

    def test_priority_score_still_reported(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.rank(sample_pool, sample_job, {"sort_by": "experience"})
        assert ranked[2].priority_score == 14

    def test_unknown_sort_key_rejected(self, ranking_engine, sample_pool, sample_job):
        with pytest.raises(ValidationError):
            ranking_engine.rank(sample_pool, sample_job, {"sort_by": "salary"})

    def test_unknown_sort_key_is_value_error(self):
        with pytest.raises(ValueError):
            SortBy("salary")


# ── rank() options ──────────────────────────────────────────────────────────


class TestRankOptions:
    def test_analysis_included_by_default(self, ranking_engine, sample_pool, sample_job):
        top = ranking_engine.rank(sample_pool, sample_job)[0]
        assert top.breakdown is not None
        assert top.breakdown.total_score == top.priority_score
        assert top.skill_match.percentage == 100.0

    def test_analysis_omitted(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.rank(sample_pool, sample_job, {"include_analysis": False})
        assert all(r.breakdown is None and r.skill_match is None for r in ranked)
        assert ranked[0].priority_score == 99

    def test_option_weights(self, ranking_engine, sample_pool, sample_job):
        weights = {"skill": 0, "experience": 0, "education": 0, "availability": 0, "recency": 1}
        ranked = ranking_engine.rank(sample_pool, sample_job, {"weights": weights})
        assert ids(ranked) == ["c-strong", "c-mid", "c-weak", "c-tie-a", "c-tie-b"]
        assert [r.priority_score for r in ranked] == [100, 80, 50, 0, 0]

    def test_engine_weights_used_without_option_weights(self, fixed_clock, sample_pool, sample_job):
        engine = RankingEngine(fixed_clock, weights={"skill": 1, "experience": 0, "education": 0, "availability": 0, "recency": 0})
        ranked = engine.rank(sample_pool, sample_job, {"sort_by": "priority_score"})
        assert [r.priority_score for r in ranked][:2] == [100, 33]

    def test_none_weights_mean_defaults(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.rank(sample_pool, sample_job, {"weights": None})
        assert ranked[0].priority_score == 99

    def test_explicit_now(self, ranking_engine, make_candidate, sample_job, now):
        ranked = ranking_engine.rank([make_candidate()], sample_job, now=now + timedelta(days=40))
        assert ranked[0].breakdown.recency.score == 50


# ── Purity ──────────────────────────────────────────────────────────────────


class TestPurity:
    def test_idempotent(self, ranking_engine, sample_pool, sample_job):
        first = ranking_engine.rank(sample_pool, sample_job)
        second = ranking_engine.rank(sample_pool, sample_job)
        assert [r.model_dump() for r in first] == [r.model_dump() for r in second]

    def test_inputs_not_mutated(self, ranking_engine, sample_pool, sample_job):
        before = [c.model_dump() for c in sample_pool]
        order = ids(sample_pool)
        ranking_engine.rank(sample_pool, sample_job)
        assert [c.model_dump() for c in sample_pool] == before
        assert ids(sample_pool) == order

    def test_extra_candidate_fields_kept(self, ranking_engine, make_candidate, sample_job):
        candidate = make_candidate(phone="9800000000")
        ranked = ranking_engine.rank([candidate], sample_job)
        assert ranked[0].candidate.phone == "9800000000"


# ── update_candidate_scores() ───────────────────────────────────────────────


class TestUpdateCandidateScores:
    def test_ranks_without_analysis(self, ranking_engine, sample_pool, sample_job):
        ranked = ranking_engine.update_candidate_scores(sample_pool, sample_job)
        assert ids(ranked)[0] == "c-strong"
        assert ranked[0].breakdown is None

    def test_empty_pool(self, ranking_engine, sample_job):
        assert ranking_engine.update_candidate_scores([], sample_job) == []


# ── Helpers ─────────────────────────────────────────────────────────────────


class TestHelpers:
    def test_resolve_options_defaults(self):
        options = resolve_options(None)
        assert SortBy(options.sort_by) == SortBy.PRIORITY_SCORE
        assert options.include_analysis is True
        assert options.weights == ScoringWeights()

    def test_resolve_options_passes_instances_through(self):
        options = RankingOptions(include_analysis=False)
        assert resolve_options(options) is options

    def test_engine_properties(self, ranking_engine):
        assert ranking_engine.weights == ScoringWeights()
        assert ranking_engine.skill_matcher is ranking_engine.scorer.skill_matcher

    def test_get_ranking_engine_singleton(self):
        engine = get_ranking_engine()
        assert engine is get_ranking_engine()
        assert isinstance(engine.clock, SystemClock)
