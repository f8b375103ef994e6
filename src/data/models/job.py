"""
Job posting data models for the ranking engine.

Defines the posting a candidate pool is ranked against, the taxonomy
requirement record, and the weights used for composite scoring.
"""

from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from src.utils.constants import DEFAULT_SCORING_WEIGHTS, SortBy

from .base import EmbeddedModel


class JobPosting(EmbeddedModel):
    """A job posting with its required-skill tags."""

    id: Optional[str] = None
    title: str = ""
    tags: list[str] = Field(default_factory=list)  # required skills, in display order
    category: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v: Any) -> Any:
        """Treat a missing tag list as empty."""
        return [] if v is None else v

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        if isinstance(v, int):
            return str(v)
        return v


class SkillRequirement(EmbeddedModel):
    """A required or preferred skill with taxonomy metadata."""

    name: str
    category: str = "technical"
    subcategory: str = "programming"
    priority: str = "medium"  # critical, high, medium, low, nice-to-have
    required: bool = False
    weight: float = 1.0  # Weight for scoring (higher = more important)


class ScoringWeights(EmbeddedModel):
    """
    Weights for the composite priority score.

    Weights are used exactly as given. They are not renormalized when they
    do not sum to 1.0, which changes the achievable maximum score.
    """

    # A mistyped factor name is an error, not a silent default
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True, extra="forbid")

    skill: float = Field(default=DEFAULT_SCORING_WEIGHTS["skill"], ge=0)
    experience: float = Field(default=DEFAULT_SCORING_WEIGHTS["experience"], ge=0)
    education: float = Field(default=DEFAULT_SCORING_WEIGHTS["education"], ge=0)
    availability: float = Field(default=DEFAULT_SCORING_WEIGHTS["availability"], ge=0)
    recency: float = Field(default=DEFAULT_SCORING_WEIGHTS["recency"], ge=0)

    @classmethod
    def from_defaults(cls) -> "ScoringWeights":
        """Create scoring weights from default constants."""
        return cls(**DEFAULT_SCORING_WEIGHTS)

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary."""
        return {
            "skill": self.skill,
            "experience": self.experience,
            "education": self.education,
            "availability": self.availability,
            "recency": self.recency,
        }

    @property
    def total_weight(self) -> float:
        """Calculate sum of all weights."""
        return (
            self.skill
            + self.experience
            + self.education
            + self.availability
            + self.recency
        )

    @property
    def is_normalized(self) -> bool:
        """Check if weights sum to 1.0 (within float tolerance)."""
        return abs(self.total_weight - 1.0) < 1e-9


class RankingOptions(EmbeddedModel):
    """Options for a single ranking call."""

    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    sort_by: SortBy = SortBy.PRIORITY_SCORE
    include_analysis: bool = True

    @field_validator("weights", mode="before")
    @classmethod
    def default_weights(cls, v: Any) -> Any:
        """Treat missing weights as the defaults."""
        return ScoringWeights() if v is None else v
