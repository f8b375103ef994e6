"""
Tests for src.core.scoring.experience_scorer — years, category and tag relevance.
"""

import pytest

from src.core.scoring import extract_years, score_experience
from src.core.scoring.experience_scorer import years_base_score


# ── extract_years() ─────────────────────────────────────────────────────────


class TestExtractYears:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("5 years as chef", 5),
            ("1 year in retail", 1),
            ("2yrs in retail", 2),
            ("Over 12 Yrs of service", 12),
            ("8 YEARS", 8),
            ("5years", 5),
        ],
    )
    def test_stated_years(self, text, expected):
        assert extract_years(text) == expected

    def test_first_stated_number_wins(self):
        assert extract_years("3 years cooking, 10 years total") == 3

    def test_number_without_unit_ignored(self):
        assert extract_years("Worked 2019-2023 as cook") == 0

    def test_months_are_not_years(self):
        assert extract_years("6 months internship") == 0

    def test_empty(self):
        assert extract_years("") == 0


# ── years_base_score() ──────────────────────────────────────────────────────


class TestYearsBaseScore:
    @pytest.mark.parametrize(
        "years, expected",
        [(0, 10), (1, 20), (2, 20), (3, 30), (4, 30), (5, 40), (25, 40)],
    )
    def test_buckets(self, years, expected):
        assert years_base_score(years) == expected


# ── score_experience() ──────────────────────────────────────────────────────


class TestScoreExperience:
    def test_years_only(self):
        assert score_experience("5 years as chef", ["Cooking"], "Kitchen") == 40

    def test_empty_text_scores_zero(self):
        assert score_experience("", ["Cooking"], "Kitchen") == 0

    def test_no_years_stated_gets_minimum_base(self):
        assert score_experience("Helped at family shop") == 10

    def test_category_bonus(self):
        assert score_experience("4 years in a hotel kitchen", [], "Kitchen") == 60

    def test_category_is_case_insensitive(self):
        assert score_experience("4 YEARS IN A KITCHEN", [], "kitchen") == 60

    def test_no_category(self):
        assert score_experience("4 years in a hotel kitchen", [], None) == 30

    def test_tag_bonus_per_tag(self):
        text = "2 years of cooking and restaurant work"
        assert score_experience(text, ["Cooking", "Restaurant", "Baking"]) == 40

    def test_tag_bonus_capped(self):
        text = "1 year cooking, baking, grilling and plating"
        tags = ["Cooking", "Baking", "Grilling", "Plating"]
        assert score_experience(text, tags) == 50

    def test_blank_tag_counts_as_contained(self):
        assert score_experience("5 years as chef", ["", "Cooking"], None) == 50

    def test_whitespace_tag_matched_literally(self):
        assert score_experience("1 year  of  work", ["  "]) == 30
        assert score_experience("1 year of work", ["  "]) == 20

    def test_capped_at_100(self):
        text = "8 years kitchen cooking restaurant food preparation"
        tags = ["Cooking", "Restaurant", "Food Preparation"]
        assert score_experience(text, tags, "Kitchen") == 100
