"""DISC questionnaire scoring — Natural and Adaptive profiles.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict

from disc_insights.disc_types import (
    TRAIT_NAMES,
    TRAITS,
    UNIFORM_SCORES,
    DiscAnswer,
    Scores,
    Trait,
    primary_trait,
    round_half_up,
)


# ---------------------------------------------------------------------------
# Weights
# ---------------------------------------------------------------------------
_NATURAL_MOST_WEIGHT = 2.0
_ADAPTIVE_MOST_WEIGHT = 1.0
_ADAPTIVE_NOT_LEAST_WEIGHT = 0.5


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class DiscProfile(BaseModel):
    """Scored Natural / Adaptive profile of one respondent."""

    model_config = ConfigDict(frozen=True)

    natural: Scores
    adaptive: Scores
    primary_natural: Trait
    primary_adaptive: Trait


class TraitShift(BaseModel):
    """How far one trait moves between the Natural and Adaptive styles."""

    trait: Trait
    name: str
    natural: int
    adaptive: int
    shift: int


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def normalize_scores(raw: Mapping[Trait, float]) -> Scores:
    """Convert raw trait points into rounded percentages.

    Each trait is rounded on its own, so the result may not sum to exactly
    100. A zero total yields the uniform 25/25/25/25 distribution.
    """
    total = sum(raw.get(t, 0.0) for t in TRAITS)
    if total == 0:
        return UNIFORM_SCORES
    return Scores(**{
        t.value: round_half_up(raw.get(t, 0.0) / total * 100)
        for t in TRAITS
    })


def score_disc(answers: Iterable[DiscAnswer]) -> DiscProfile:
    """Score a completed DISC questionnaire.

    Args:
        answers: One most/least answer per item, in questionnaire order.

    Returns:
        DiscProfile with normalised Natural and Adaptive scores.
    """
    natural_raw: dict[Trait, float] = {t: 0.0 for t in TRAITS}
    adaptive_raw: dict[Trait, float] = {t: 0.0 for t in TRAITS}

    for answer in answers:
        natural_raw[answer.most] += _NATURAL_MOST_WEIGHT
        adaptive_raw[answer.most] += _ADAPTIVE_MOST_WEIGHT
        for t in TRAITS:
            if t != answer.least:
                adaptive_raw[t] += _ADAPTIVE_NOT_LEAST_WEIGHT

    natural = normalize_scores(natural_raw)
    adaptive = normalize_scores(adaptive_raw)
    return DiscProfile(
        natural=natural,
        adaptive=adaptive,
        primary_natural=primary_trait(natural),
        primary_adaptive=primary_trait(adaptive),
    )


def shift_analysis(profile: DiscProfile) -> list[TraitShift]:
    """Per-trait movement from Natural to Adaptive (positive = amplified)."""
    return [
        TraitShift(
            trait=t,
            name=TRAIT_NAMES[t],
            natural=profile.natural.get(t),
            adaptive=profile.adaptive.get(t),
            shift=profile.adaptive.get(t) - profile.natural.get(t),
        )
        for t in TRAITS
    ]


def is_profile_shifter(profile: DiscProfile) -> bool:
    """True when the primary type changes under pressure."""
    return profile.primary_natural != profile.primary_adaptive
