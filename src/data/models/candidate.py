"""
Candidate data models for the ranking engine.

Defines the applicant record as it arrives from the host portal, plus the
richer skill profile used by taxonomy-weighted matching.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator

from .base import EmbeddedModel


class Candidate(EmbeddedModel):
    """
    An applicant for a job posting.

    Every field is optional so partially filled portal records can be
    ranked; missing text falls back to an empty string.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="allow",  # keep portal fields the engine does not read
    )

    id: Optional[str] = None
    name: str = ""

    # Qualifications
    skills: list[str] = Field(default_factory=list)  # ordered, duplicates allowed
    experience: str = ""  # free text, e.g. "5 years as chef"
    education: str = ""
    availability: str = ""

    applied_at: Optional[datetime] = Field(default=None, alias="appliedAt")

    @field_validator("skills", mode="before")
    @classmethod
    def default_skills(cls, v: Any) -> Any:
        """Treat a missing skill list as empty."""
        return [] if v is None else v

    @field_validator("experience", "education", "availability", "name", mode="before")
    @classmethod
    def default_text(cls, v: Any) -> Any:
        """Treat missing free text as empty."""
        return "" if v is None else v

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        """Accept numeric identifiers from the portal."""
        if isinstance(v, int):
            return str(v)
        return v

    @property
    def display_name(self) -> str:
        """Name for tables and logs."""
        return self.name or self.id or "Unknown Candidate"


class CandidateSkill(EmbeddedModel):
    """A skill annotated with taxonomy metadata."""

    name: str
    category: str = "technical"
    subcategory: str = "programming"
    level: str = "intermediate"  # basic, beginner, intermediate, advanced, expert
    verified: bool = False
