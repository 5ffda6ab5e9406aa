"""Pydantic models for persisted assessment profiles."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from disc_insights.disc_types import Scores, Trait
from disc_insights.driving_forces import DrivingForceResult
from disc_insights.scoring import DiscProfile


class ProfileSubmission(BaseModel):
    """Identity fields plus scored results, as handed to the repository."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=100)
    email: str | None = None
    department: str = Field(..., min_length=1, max_length=100)
    team_code: str | None = None
    natural: Scores
    adaptive: Scores
    primary_natural: Trait
    primary_adaptive: Trait
    driving_forces: DrivingForceResult | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("department")
    @classmethod
    def validate_department(cls, v: str) -> str:
        """Store the trimmed department; blank departments are invalid."""
        v = v.strip()
        if not v:
            raise ValueError("department must not be blank")
        return v

    @field_validator("team_code")
    @classmethod
    def normalize_team_code(cls, v: str | None) -> str | None:
        """Team codes are compared trimmed and upper-cased."""
        if v is None:
            return None
        v = v.strip().upper()
        return v or None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @classmethod
    def from_scores(
        cls,
        *,
        name: str,
        department: str,
        disc: DiscProfile,
        email: str | None = None,
        team_code: str | None = None,
        driving_forces: DrivingForceResult | None = None,
    ) -> ProfileSubmission:
        """Build a submission from a freshly scored DISC profile."""
        return cls(
            name=name,
            email=email,
            department=department,
            team_code=team_code,
            natural=disc.natural,
            adaptive=disc.adaptive,
            primary_natural=disc.primary_natural,
            primary_adaptive=disc.primary_adaptive,
            driving_forces=driving_forces,
        )


class Profile(ProfileSubmission):
    """A saved profile. Owned by the repository, never updated."""

    id: int = Field(..., ge=1)
    created_at: datetime

    @property
    def disc(self) -> DiscProfile:
        return DiscProfile(
            natural=self.natural,
            adaptive=self.adaptive,
            primary_natural=self.primary_natural,
            primary_adaptive=self.primary_adaptive,
        )
