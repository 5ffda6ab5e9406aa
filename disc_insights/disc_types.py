"""DISC and Driving Forces type definitions.

Defines the four DISC traits (Dominance / Influence / Steadiness /
Conscientiousness), the 12 Driving Forces pole codes grouped into 6 motivator
axes, and the score / answer models shared by the scorers and the analytics
engine.
"""

from __future__ import annotations

from enum import Enum
import math

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------
class Trait(str, Enum):
    """One of the four DISC traits."""

    D = "D"
    I = "I"  # noqa: E741
    S = "S"
    C = "C"


# Fixed enumeration order, also the tie-break order for primary types.
TRAITS: tuple[Trait, ...] = (Trait.D, Trait.I, Trait.S, Trait.C)

TRAIT_NAMES: dict[Trait, str] = {
    Trait.D: "Dominance",
    Trait.I: "Influence",
    Trait.S: "Steadiness",
    Trait.C: "Conscientiousness",
}


class DrivingForce(str, Enum):
    """A Driving Forces pole code."""

    KI = "KI"  # Knowledge - Instinctive
    KN = "KN"  # Knowledge - Intellectual
    US = "US"  # Utility - Selfless
    UR = "UR"  # Utility - Resourceful
    SO = "SO"  # Surroundings - Objective
    SH = "SH"  # Surroundings - Harmonious
    OI = "OI"  # Others - Intentional
    OA = "OA"  # Others - Altruistic
    PC = "PC"  # Power - Collaborative
    PD = "PD"  # Power - Commanding
    MR = "MR"  # Methodologies - Receptive
    MS = "MS"  # Methodologies - Structured


class Motivator(str, Enum):
    """A Driving Forces motivator axis."""

    KNOWLEDGE = "Knowledge"
    UTILITY = "Utility"
    SURROUNDINGS = "Surroundings"
    OTHERS = "Others"
    POWER = "Power"
    METHODOLOGIES = "Methodologies"


# Left pole first: it wins ties on its axis.
MOTIVATOR_AXES: dict[Motivator, tuple[DrivingForce, DrivingForce]] = {
    Motivator.KNOWLEDGE: (DrivingForce.KI, DrivingForce.KN),
    Motivator.UTILITY: (DrivingForce.US, DrivingForce.UR),
    Motivator.SURROUNDINGS: (DrivingForce.SO, DrivingForce.SH),
    Motivator.OTHERS: (DrivingForce.OI, DrivingForce.OA),
    Motivator.POWER: (DrivingForce.PC, DrivingForce.PD),
    Motivator.METHODOLOGIES: (DrivingForce.MR, DrivingForce.MS),
}


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------
def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (12.5 -> 13)."""
    return math.floor(value + 0.5)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class DiscAnswer(BaseModel):
    """One forced-choice item: the option most and least like the respondent."""

    model_config = ConfigDict(frozen=True)

    most: Trait
    least: Trait

    @model_validator(mode="after")
    def _most_differs_from_least(self) -> DiscAnswer:
        if self.most == self.least:
            raise ValueError("most and least must be different traits")
        return self


class Scores(BaseModel):
    """Percentage distribution over the four traits."""

    model_config = ConfigDict(frozen=True)

    D: int = Field(ge=0, le=100, strict=True)
    I: int = Field(ge=0, le=100, strict=True)  # noqa: E741
    S: int = Field(ge=0, le=100, strict=True)
    C: int = Field(ge=0, le=100, strict=True)

    @field_validator("D", "I", "S", "C", mode="before")
    @classmethod
    def whole_number_floats(cls, v: object) -> object:
        """Accept 60.0 as 60; fractional values still fail the int check."""
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    def get(self, trait: Trait) -> int:
        return getattr(self, trait.value)

    def as_dict(self) -> dict[Trait, int]:
        return {t: self.get(t) for t in TRAITS}

    def max_value(self) -> int:
        return max(self.as_dict().values())


UNIFORM_SCORES = Scores(D=25, I=25, S=25, C=25)


def primary_trait(scores: Scores) -> Trait:
    """Highest-scoring trait; ties go to the earliest trait in D, I, S, C."""
    return max(TRAITS, key=scores.get)


def empty_distribution() -> dict[Trait, int]:
    return {t: 0 for t in TRAITS}
