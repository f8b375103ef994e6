"""
Application-wide constants for the candidate ranking engine.

This module contains all constant values used by the scoring pipeline.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "ats-ranking-engine"
APP_DISPLAY_NAME: Final[str] = "ATS Candidate Ranking Engine"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Skill Matching Constants
# =============================================================================

EXACT_MATCH_WEIGHT: Final[float] = 1.0
PARTIAL_MATCH_WEIGHT: Final[float] = 0.6


# =============================================================================
# Factor Scoring Constants
# =============================================================================

# Years-of-experience buckets, evaluated top to bottom: (minimum years, score)
EXPERIENCE_YEAR_BUCKETS: Final[tuple[tuple[int, int], ...]] = (
    (5, 40),
    (3, 30),
    (1, 20),
)
EXPERIENCE_MIN_BASE_SCORE: Final[int] = 10
EXPERIENCE_CATEGORY_BONUS: Final[int] = 30
EXPERIENCE_TAG_BONUS: Final[int] = 10
EXPERIENCE_TAG_BONUS_CAP: Final[int] = 30

# Ordered keyword ladders; the first pattern found in the text wins.
EDUCATION_LADDER: Final[tuple[tuple[str, int], ...]] = (
    ("phd", 100),
    ("doctorate", 100),
    ("master", 90),
    ("masters", 90),
    ("bachelor", 80),
    ("bachelors", 80),
    ("degree", 80),
    ("+2", 60),
    ("intermediate", 60),
    ("slc", 40),
    ("school", 40),
    ("high school", 40),
)
EDUCATION_DEFAULT_SCORE: Final[int] = 30

AVAILABILITY_LADDER: Final[tuple[tuple[str, int], ...]] = (
    ("immediate", 100),
    ("within 1 week", 90),
    ("within 2 weeks", 80),
    ("within 1 month", 70),
    ("within 2 months", 60),
    ("within 3 months", 50),
)
AVAILABILITY_DEFAULT_SCORE: Final[int] = 40

# Days since application, evaluated top to bottom: (maximum days, score)
RECENCY_DAY_BUCKETS: Final[tuple[tuple[int, int], ...]] = (
    (1, 100),
    (3, 90),
    (7, 80),
    (14, 70),
    (30, 60),
)
RECENCY_STALE_SCORE: Final[int] = 50
RECENCY_MISSING_SCORE: Final[int] = 0


# =============================================================================
# Scoring Constants
# =============================================================================

# Default weights for the composite priority score
DEFAULT_SCORING_WEIGHTS: Final[dict[str, float]] = {
    "skill": 0.4,
    "experience": 0.3,
    "education": 0.1,
    "availability": 0.1,
    "recency": 0.1,
}

MIN_PRIORITY_SCORE: Final[int] = 0
MAX_PRIORITY_SCORE: Final[int] = 100


# =============================================================================
# Insight Constants
# =============================================================================

TOP_CANDIDATE_THRESHOLD: Final[int] = 80
TOP_CANDIDATES_LIMIT: Final[int] = 5
SKILL_GAP_COVERAGE_THRESHOLD: Final[float] = 50.0
LOW_AVERAGE_THRESHOLD: Final[float] = 60.0

# Lower bounds of the score distribution buckets
SCORE_DISTRIBUTION_BOUNDS: Final[dict[str, int]] = {
    "excellent": 90,
    "good": 80,
    "average": 60,
}

RECOMMENDATION_MESSAGES: Final[dict[str, str]] = {
    "no_top_candidates": (
        "No candidates scored above 80%. Consider reviewing job requirements "
        "or expanding search criteria."
    ),
    "skill_gaps": (
        "{count} required skills have low candidate coverage. Consider skills "
        "training or alternative requirements."
    ),
    "low_average": (
        "Average candidate score is below 60%. Consider adjusting job "
        "requirements or improving job posting visibility."
    ),
}


# =============================================================================
# Skill Taxonomy Constants
# =============================================================================

SKILL_TAXONOMY: Final[dict[str, dict]] = {
    "technical": {
        "label": "Technical Skills",
        "weight": 1.0,
        "subcategories": {
            "programming": {"label": "Programming Languages", "weight": 1.0},
            "frameworks": {"label": "Frameworks & Libraries", "weight": 0.9},
            "databases": {"label": "Database Technologies", "weight": 0.8},
            "tools": {"label": "Development Tools", "weight": 0.7},
            "cloud": {"label": "Cloud Platforms", "weight": 0.9},
            "devops": {"label": "DevOps & CI/CD", "weight": 0.8},
        },
    },
    "soft": {
        "label": "Soft Skills",
        "weight": 0.8,
        "subcategories": {
            "communication": {"label": "Communication", "weight": 1.0},
            "leadership": {"label": "Leadership", "weight": 0.9},
            "teamwork": {"label": "Teamwork", "weight": 0.9},
            "problem_solving": {"label": "Problem Solving", "weight": 0.8},
            "adaptability": {"label": "Adaptability", "weight": 0.7},
        },
    },
    "domain": {
        "label": "Domain Knowledge",
        "weight": 0.9,
        "subcategories": {
            "industry": {"label": "Industry Experience", "weight": 1.0},
            "business": {"label": "Business Knowledge", "weight": 0.8},
            "compliance": {"label": "Compliance & Regulations", "weight": 0.7},
            "processes": {"label": "Process Knowledge", "weight": 0.6},
        },
    },
    "certifications": {
        "label": "Certifications",
        "weight": 0.7,
        "subcategories": {
            "professional": {"label": "Professional Certifications", "weight": 1.0},
            "technical": {"label": "Technical Certifications", "weight": 0.9},
            "language": {"label": "Language Certifications", "weight": 0.6},
        },
    },
}

PRIORITY_MULTIPLIERS: Final[dict[str, float]] = {
    "critical": 1.5,
    "high": 1.2,
    "medium": 1.0,
    "low": 0.8,
    "nice-to-have": 0.6,
}

LEVEL_MULTIPLIERS: Final[dict[str, float]] = {
    "expert": 1.0,
    "advanced": 0.9,
    "intermediate": 0.8,
    "beginner": 0.6,
    "basic": 0.5,
}
DEFAULT_LEVEL_MULTIPLIER: Final[float] = 0.8
VERIFIED_SKILL_BONUS: Final[float] = 1.1

# Existing skill -> skills that usually accompany it
COMPLEMENTARY_SKILLS: Final[dict[str, tuple[str, ...]]] = {
    "javascript": ("TypeScript", "Node.js", "React"),
    "python": ("Django", "Flask", "Pandas"),
    "aws": ("Docker", "Kubernetes", "Terraform"),
}
COMPLEMENTARY_SUGGESTION_LIMIT: Final[int] = 5

# Regex fragments used to infer a skill's category, checked in order
CATEGORY_PATTERNS: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    (
        "technical",
        (
            r"javascript|python|java|php|ruby|go|rust|typescript|swift|kotlin",
            r"react|angular|vue|node|express|django|flask|spring|laravel",
            r"mysql|postgresql|mongodb|redis|elasticsearch|oracle",
            r"aws|azure|google cloud|docker|kubernetes|terraform",
            r"git|jenkins|ci/cd|devops|linux|unix",
        ),
    ),
    (
        "soft",
        (
            r"communication|leadership|teamwork|management|presentation",
            r"problem solving|critical thinking|creativity|adaptability",
            r"negotiation|conflict resolution|mentoring|coaching",
        ),
    ),
    (
        "domain",
        (
            r"healthcare|finance|banking|insurance|retail|e-commerce",
            r"education|government|non-profit|manufacturing|construction",
            r"marketing|sales|accounting|legal|hr|human resources",
        ),
    ),
)


# =============================================================================
# Enums
# =============================================================================


class ScoringFactor(str, Enum):
    """Factors combined into the composite priority score."""

    SKILL = "skill"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    AVAILABILITY = "availability"
    RECENCY = "recency"


class SortBy(str, Enum):
    """Keys a ranked pool can be ordered by."""

    PRIORITY_SCORE = "priority_score"
    SKILL_MATCH = "skill_match"
    EXPERIENCE = "experience"
    APPLICATION_DATE = "application_date"


class MatchType(str, Enum):
    """How a candidate skill satisfied a required tag."""

    EXACT = "exact"
    PARTIAL = "partial"


class RecommendationType(str, Enum):
    """Severity of a hiring recommendation."""

    WARNING = "warning"
    INFO = "info"


class ScoreBand(Enum):
    """Distribution buckets for priority scores."""

    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    BELOW = "below"

    @classmethod
    def from_score(cls, score: float) -> "ScoreBand":
        """Convert a numeric priority score to a band."""
        if score >= SCORE_DISTRIBUTION_BOUNDS["excellent"]:
            return cls.EXCELLENT
        elif score >= SCORE_DISTRIBUTION_BOUNDS["good"]:
            return cls.GOOD
        elif score >= SCORE_DISTRIBUTION_BOUNDS["average"]:
            return cls.AVERAGE
        return cls.BELOW
