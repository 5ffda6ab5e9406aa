"""Department ↔ department compatibility scoring.

All functions are *pure* — no side-effects, no I/O.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from disc_insights.disc_types import Scores, Trait, primary_trait, round_half_up
from disc_insights.engine.departments import DepartmentAggregate


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class DepartmentCompatibility(BaseModel):
    """Score for a single department pair."""

    dept1: str
    dept2: str
    score: int = Field(ge=0, le=100)
    reasoning: str


# ---------------------------------------------------------------------------
# Scoring matrices
# ---------------------------------------------------------------------------
# Looked up as COMPATIBILITY_MATRIX[first][second]; symmetry is not assumed.
COMPATIBILITY_MATRIX: dict[Trait, dict[Trait, float]] = {
    Trait.D: {Trait.D: 0.6, Trait.I: 0.7, Trait.S: 0.9, Trait.C: 0.5},
    Trait.I: {Trait.D: 0.7, Trait.I: 0.6, Trait.S: 0.7, Trait.C: 0.8},
    Trait.S: {Trait.D: 0.9, Trait.I: 0.7, Trait.S: 0.6, Trait.C: 0.8},
    Trait.C: {Trait.D: 0.5, Trait.I: 0.8, Trait.S: 0.8, Trait.C: 0.6},
}

_REASONING: dict[tuple[Trait, Trait], str] = {
    (Trait.D, Trait.S): "Dominance and Steadiness complement each other - D provides drive while S ensures stability",
    (Trait.S, Trait.D): "Steadiness and Dominance complement each other - S provides stability while D ensures drive",
    (Trait.I, Trait.C): "Influence and Conscientiousness work well - I brings energy while C ensures quality",
    (Trait.C, Trait.I): "Conscientiousness and Influence work well - C ensures quality while I brings energy",
    (Trait.D, Trait.D): "Both departments are direct and results-focused - may need conflict management",
    (Trait.I, Trait.I): "Both departments are enthusiastic and collaborative - great for innovation",
    (Trait.S, Trait.S): "Both departments value stability - reliable but may resist change",
    (Trait.C, Trait.C): "Both departments are detail-oriented - high quality but may be slow",
}

DEFAULT_REASONING = "Standard collaboration expected"

_BALANCE_WEIGHT = 0.2


# ---------------------------------------------------------------------------
# Helpers shared with the collaboration analysis
# ---------------------------------------------------------------------------
def compatibility_reasoning(first: Trait, second: Trait) -> str:
    return _REASONING.get((first, second), DEFAULT_REASONING)


def balance(scores: Scores) -> float:
    """1 - max/100; a flatter profile is better balanced. 0 when max is 0."""
    peak = scores.max_value()
    return 1 - peak / 100 if peak > 0 else 0.0


def valid_for_pairing(aggregates: list[DepartmentAggregate]) -> list[DepartmentAggregate]:
    """Departments with a name, at least one profile and in-range averages."""
    valid = [
        a for a in aggregates
        if a.department and a.count > 0
        and all(v >= 0 for v in a.avg_natural.as_dict().values())
        and all(v >= 0 for v in a.avg_adaptive.as_dict().values())
    ]
    if len(valid) != len(aggregates):
        logger.warning("Ignoring %s departments with invalid averages", len(aggregates) - len(valid))
    return valid


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_pair_compatibility(a: DepartmentAggregate, b: DepartmentAggregate) -> DepartmentCompatibility:
    """Score one ordered department pair (0-100)."""
    primary_a = primary_trait(a.avg_natural)
    primary_b = primary_trait(b.avg_natural)

    base = COMPATIBILITY_MATRIX[primary_a][primary_b]
    bonus = (balance(a.avg_natural) + balance(b.avg_natural)) / 2 * _BALANCE_WEIGHT
    final = min(1.0, max(0.0, base + bonus))

    return DepartmentCompatibility(
        dept1=a.department,
        dept2=b.department,
        score=round_half_up(final * 100),
        reasoning=compatibility_reasoning(primary_a, primary_b),
    )


def calculate_department_compatibility(
    aggregates: list[DepartmentAggregate],
) -> list[DepartmentCompatibility]:
    """Score every unordered department pair, best matches first.

    Returns an empty list when fewer than two valid departments exist.
    """
    valid = valid_for_pairing(aggregates)
    if len(valid) < 2:
        logger.info("Not enough departments for compatibility analysis: %s", len(valid))
        return []

    results = [
        calculate_pair_compatibility(a, b)
        for i, a in enumerate(valid)
        for b in valid[i + 1:]
    ]
    logger.info("Calculated %s compatibility scores", len(results))
    return sorted(results, key=lambda r: r.score, reverse=True)
