"""
Shared test fixtures for the ranking engine test suite.

Sets environment variables before any src imports to keep logging quiet,
then provides factory fixtures for candidates and job
postings plus engines on a frozen clock.
"""

import os

# === Set environment BEFORE any src imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from src.core.matching import SkillMatcher
from src.core.ranking import InsightAggregator, RankingEngine
from src.core.scoring import CompositeScorer
from src.data.models import Candidate, JobPosting
from src.utils.clock import FixedClock


NOW = datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(NOW)


@pytest.fixture
def make_candidate():
    """Factory that returns a callable to build Candidate records."""

    def _factory(
        id: str = "c-1",
        name: str = "Sita Sharma",
        skills: Optional[list[str]] = None,
        experience: str = "5 years as cook in a hotel kitchen",
        education: str = "Bachelor in Hotel Management",
        availability: str = "Immediate",
        applied_days_ago: Optional[float] = 0,
        **kwargs,
    ) -> Candidate:
        if skills is None:
            skills = ["Cooking", "English", "Restaurant"]
        applied_at = None
        if applied_days_ago is not None:
            applied_at = NOW - timedelta(days=applied_days_ago)
        return Candidate(
            id=id,
            name=name,
            skills=skills,
            experience=experience,
            education=education,
            availability=availability,
            applied_at=applied_at,
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_job():
    """Factory that returns a callable to build JobPosting records."""

    def _factory(
        id: str = "job-1",
        title: str = "Cook",
        tags: Optional[list[str]] = None,
        category: Optional[str] = "Kitchen",
    ) -> JobPosting:
        if tags is None:
            tags = ["Cooking", "Restaurant", "Food Preparation"]
        return JobPosting(id=id, title=title, tags=tags, category=category)

    return _factory


@pytest.fixture
def sample_job(make_job) -> JobPosting:
    return make_job()


@pytest.fixture
def sample_pool(make_candidate) -> list[Candidate]:
    """Five candidates spanning strong to weak fits for the sample job."""
    return [
        make_candidate(
            id="c-weak",
            name="Hari Thapa",
            skills=["Driving"],
            experience="",
            education="SLC",
            availability="Within 3 months",
            applied_days_ago=45,
        ),
        make_candidate(
            id="c-strong",
            name="Sita Sharma",
            skills=["Cooking", "Restaurant", "Food Preparation"],
            experience="6 years cooking in a kitchen, food preparation and restaurant service",
            education="Master in Hospitality",
            availability="Immediate",
            applied_days_ago=0,
        ),
        make_candidate(
            id="c-mid",
            name="Ram Gurung",
            skills=["Cooking", "English"],
            experience="3 years as cook",
            education="+2",
            availability="Within 2 weeks",
            applied_days_ago=5,
        ),
        make_candidate(
            id="c-tie-a",
            name="Maya Rai",
            skills=["Cleaning"],
            experience="1 year",
            education="School",
            availability="",
            applied_days_ago=None,
        ),
        make_candidate(
            id="c-tie-b",
            name="Gita Magar",
            skills=["Cleaning"],
            experience="1 year",
            education="School",
            availability="",
            applied_days_ago=None,
        ),
    ]


# ---------------------------------------------------------------------------
# Engine fixtures (frozen clock, default weights)
# ---------------------------------------------------------------------------


@pytest.fixture
def skill_matcher() -> SkillMatcher:
    return SkillMatcher()


@pytest.fixture
def composite_scorer(fixed_clock) -> CompositeScorer:
    return CompositeScorer(fixed_clock)


@pytest.fixture
def ranking_engine(fixed_clock) -> RankingEngine:
    return RankingEngine(fixed_clock)


@pytest.fixture
def insight_aggregator(ranking_engine) -> InsightAggregator:
    return InsightAggregator(ranking_engine)
