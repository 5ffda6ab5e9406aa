"""Detailed department collaboration analysis.

Extends the headline compatibility score with an adaptive-weighted matrix,
side-by-side profile comparisons and categorised recommendations per pair.
All functions are *pure*.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, Field

from disc_insights.disc_types import TRAITS, Scores, Trait, primary_trait, round_half_up
from disc_insights.engine.compatibility import (
    COMPATIBILITY_MATRIX,
    balance,
    compatibility_reasoning,
    valid_for_pairing,
)
from disc_insights.engine.departments import DepartmentAggregate


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class CompatibilityDetails(BaseModel):
    primary_type1: Trait
    primary_type2: Trait
    natural_compatibility: int
    adaptive_compatibility: int
    score_difference: int
    reasoning: str


class CompatibilityMatrixEntry(BaseModel):
    dept1: str
    dept2: str
    score: int = Field(ge=0, le=100)
    details: CompatibilityDetails


class StyleComparison(BaseModel):
    dept1_scores: Scores
    dept2_scores: Scores
    differences: dict[Trait, int]
    primary_type1: Trait
    primary_type2: Trait


class ProfileComparison(BaseModel):
    dept1: str
    dept2: str
    natural: StyleComparison
    adaptive: StyleComparison
    summary: str


Priority = Literal["high", "medium", "low"]
Category = Literal["communication", "workflow", "conflict", "synergy"]


class PairRecommendation(BaseModel):
    text: str
    priority: Priority
    category: Category


class CollaborationRecommendation(BaseModel):
    dept1: str
    dept2: str
    recommendations: list[PairRecommendation] = Field(min_length=1)


class CollaborationMetadata(BaseModel):
    department_count: int = Field(ge=0)
    total_pairs: int = Field(ge=0)
    available: bool


class DepartmentCollaborationAnalysis(BaseModel):
    compatibility_matrix: list[CompatibilityMatrixEntry] = Field(default_factory=list)
    profile_comparisons: list[ProfileComparison] = Field(default_factory=list)
    recommendations: list[CollaborationRecommendation] = Field(default_factory=list)
    metadata: CollaborationMetadata


# ---------------------------------------------------------------------------
# Weights
# ---------------------------------------------------------------------------
_NATURAL_WEIGHT = 0.7
_ADAPTIVE_WEIGHT = 0.3
_BALANCE_WEIGHT = 0.15
_DIFFERENCE_THRESHOLD = 30
_DIFFERENCE_PENALTY = 0.05
_SIGNIFICANT_DIFFERENCE = 20


def _pairs(aggregates: list[DepartmentAggregate]) -> list[tuple[DepartmentAggregate, DepartmentAggregate]]:
    valid = valid_for_pairing(aggregates)
    if len(valid) < 2:
        return []
    return [(a, b) for i, a in enumerate(valid) for b in valid[i + 1:]]


# ---------------------------------------------------------------------------
# Compatibility matrix
# ---------------------------------------------------------------------------
def detailed_compatibility(a: DepartmentAggregate, b: DepartmentAggregate) -> CompatibilityMatrixEntry:
    """Natural (70%) and Adaptive (30%) blend with balance bonus and contrast penalty."""
    primary1 = primary_trait(a.avg_natural)
    primary2 = primary_trait(b.avg_natural)
    natural_compat = COMPATIBILITY_MATRIX[primary1][primary2]
    adaptive_compat = COMPATIBILITY_MATRIX[primary_trait(a.avg_adaptive)][primary_trait(b.avg_adaptive)]

    difference = abs(a.avg_natural.max_value() - b.avg_natural.max_value())

    base = natural_compat * _NATURAL_WEIGHT + adaptive_compat * _ADAPTIVE_WEIGHT
    bonus = (balance(a.avg_natural) + balance(b.avg_natural)) / 2 * _BALANCE_WEIGHT
    penalty = _DIFFERENCE_PENALTY if difference > _DIFFERENCE_THRESHOLD else 0.0
    final = min(1.0, max(0.0, base + bonus - penalty))

    return CompatibilityMatrixEntry(
        dept1=a.department,
        dept2=b.department,
        score=round_half_up(final * 100),
        details=CompatibilityDetails(
            primary_type1=primary1,
            primary_type2=primary2,
            natural_compatibility=round_half_up(natural_compat * 100),
            adaptive_compatibility=round_half_up(adaptive_compat * 100),
            score_difference=difference,
            reasoning=compatibility_reasoning(primary1, primary2),
        ),
    )


def generate_compatibility_matrix(aggregates: list[DepartmentAggregate]) -> list[CompatibilityMatrixEntry]:
    """Detailed compatibility for every pair, best first."""
    entries = [detailed_compatibility(a, b) for a, b in _pairs(aggregates)]
    return sorted(entries, key=lambda e: e.score, reverse=True)


# ---------------------------------------------------------------------------
# Profile comparison
# ---------------------------------------------------------------------------
_SHARED_TYPE_OUTCOME: dict[Trait, str] = {
    Trait.D: "strong results focus but potential conflicts",
    Trait.I: "excellent collaboration but possible lack of structure",
    Trait.S: "stability but potential resistance to change",
    Trait.C: "high quality but potential slowness",
}


def _compare(first: Scores, second: Scores) -> StyleComparison:
    return StyleComparison(
        dept1_scores=first,
        dept2_scores=second,
        differences={t: first.get(t) - second.get(t) for t in TRAITS},
        primary_type1=primary_trait(first),
        primary_type2=primary_trait(second),
    )


def _comparison_summary(natural: StyleComparison) -> str:
    p1, p2 = natural.primary_type1, natural.primary_type2
    if p1 == p2:
        summary = (
            f"Both departments share a {p1.value}-dominant natural profile, "
            f"which can lead to {_SHARED_TYPE_OUTCOME[p1]}."
        )
    else:
        compat = COMPATIBILITY_MATRIX[p1][p2]
        if compat >= 0.8:
            summary = (
                f"These departments have complementary profiles ({p1.value} and {p2.value}) "
                "that work well together."
            )
        elif compat >= 0.6:
            summary = (
                f"These departments have different but compatible profiles ({p1.value} and {p2.value}) "
                "that can collaborate effectively."
            )
        else:
            summary = (
                f"These departments have contrasting profiles ({p1.value} and {p2.value}) "
                "that may require careful management to collaborate successfully."
            )

    max_diff = max(abs(v) for v in natural.differences.values())
    if max_diff > _SIGNIFICANT_DIFFERENCE:
        summary += (
            f" Significant differences in natural profiles ({max_diff}% max difference) "
            "suggest different working styles."
        )
    return summary


def compare_department_profiles(aggregates: list[DepartmentAggregate]) -> list[ProfileComparison]:
    """Side-by-side Natural and Adaptive comparison for every pair."""
    comparisons: list[ProfileComparison] = []
    for a, b in _pairs(aggregates):
        natural = _compare(a.avg_natural, b.avg_natural)
        comparisons.append(ProfileComparison(
            dept1=a.department,
            dept2=b.department,
            natural=natural,
            adaptive=_compare(a.avg_adaptive, b.avg_adaptive),
            summary=_comparison_summary(natural),
        ))
    return comparisons


# ---------------------------------------------------------------------------
# Pair recommendations
# ---------------------------------------------------------------------------
def _communication_recs(
    p1: Trait,
    p2: Trait,
    name1: str,
    name2: str,
) -> list[PairRecommendation]:
    # Order the pair so the D / I department comes first.
    if (p1, p2) in ((Trait.D, Trait.S), (Trait.I, Trait.C)):
        lead, other = name1, name2
    elif (p1, p2) in ((Trait.S, Trait.D), (Trait.C, Trait.I)):
        lead, other = name2, name1
    else:
        return []

    if Trait.D in (p1, p2):
        return [
            PairRecommendation(
                text=f"{lead} should provide clear context and allow {other} time to process information before expecting decisions.",
                priority="high",
                category="communication",
            ),
            PairRecommendation(
                text=f"{other} should proactively communicate concerns and provide structured updates to {lead}.",
                priority="high",
                category="communication",
            ),
        ]
    return [
        PairRecommendation(
            text=f"{lead} should include data and specific details when communicating with {other}.",
            priority="medium",
            category="communication",
        ),
        PairRecommendation(
            text=f"{other} should use engaging examples and stories when presenting to {lead}.",
            priority="medium",
            category="communication",
        ),
    ]


def _pair_recommendations(a: DepartmentAggregate, b: DepartmentAggregate) -> list[PairRecommendation]:
    p1 = primary_trait(a.avg_natural)
    p2 = primary_trait(b.avg_natural)
    name1, name2 = a.department, b.department
    compat = COMPATIBILITY_MATRIX[p1][p2]

    recs = _communication_recs(p1, p2, name1, name2)

    if compat >= 0.8:
        recs.append(PairRecommendation(
            text="Leverage the strong compatibility between these departments by creating joint projects "
                 "that capitalize on their complementary strengths.",
            priority="high",
            category="synergy",
        ))
    elif compat < 0.6:
        recs.append(PairRecommendation(
            text="Establish clear protocols and regular check-ins to manage potential conflicts "
                 "arising from different working styles.",
            priority="high",
            category="conflict",
        ))
        recs.append(PairRecommendation(
            text="Consider assigning a neutral facilitator for joint initiatives to help bridge communication gaps.",
            priority="medium",
            category="workflow",
        ))

    def holder(trait: Trait) -> str:
        return name1 if p1 == trait else name2

    def counterpart(trait: Trait) -> str:
        return name2 if p1 == trait else name1

    if Trait.D in (p1, p2):
        recs.append(PairRecommendation(
            text=f"Set clear deadlines and action items. {holder(Trait.D)} will drive results, "
                 f"but ensure {counterpart(Trait.D)} has time to process.",
            priority="medium",
            category="workflow",
        ))
    if Trait.C in (p1, p2):
        recs.append(PairRecommendation(
            text=f"Provide detailed documentation and allow time for quality review. "
                 f"{holder(Trait.C)} will ensure accuracy but may need more time.",
            priority="medium",
            category="workflow",
        ))
    if Trait.I in (p1, p2):
        recs.append(PairRecommendation(
            text=f"Schedule regular collaborative sessions and celebrate wins together. "
                 f"{holder(Trait.I)} thrives on engagement and recognition.",
            priority="low",
            category="synergy",
        ))
    if Trait.S in (p1, p2):
        recs.append(PairRecommendation(
            text=f"Maintain consistent processes and provide advance notice of changes. "
                 f"{holder(Trait.S)} values stability and predictability.",
            priority="medium",
            category="workflow",
        ))

    if p1 == p2 == Trait.D:
        recs.append(PairRecommendation(
            text="Both departments are results-driven. Establish clear decision-making authority "
                 "to prevent power struggles.",
            priority="high",
            category="conflict",
        ))
    if p1 == p2 == Trait.C:
        recs.append(PairRecommendation(
            text="Both departments value quality. Balance thoroughness with timeliness to avoid project delays.",
            priority="medium",
            category="workflow",
        ))

    return recs


def generate_collaboration_recommendations(
    aggregates: list[DepartmentAggregate],
) -> list[CollaborationRecommendation]:
    """Categorised, prioritised recommendations for every department pair."""
    results: list[CollaborationRecommendation] = []
    for a, b in _pairs(aggregates):
        recs = _pair_recommendations(a, b) or [PairRecommendation(
            text="Maintain regular communication and establish clear expectations for collaboration.",
            priority="medium",
            category="communication",
        )]
        results.append(CollaborationRecommendation(dept1=a.department, dept2=b.department, recommendations=recs))
    return results


# ---------------------------------------------------------------------------
# Combined analysis
# ---------------------------------------------------------------------------
def department_collaboration_analysis(aggregates: list[DepartmentAggregate]) -> DepartmentCollaborationAnalysis:
    """Matrix, comparisons and recommendations plus availability metadata."""
    count = len(aggregates)
    if count < 2:
        logger.info("Insufficient departments for collaboration analysis: %s", count)
        return DepartmentCollaborationAnalysis(
            metadata=CollaborationMetadata(department_count=count, total_pairs=0, available=False),
        )

    analysis = DepartmentCollaborationAnalysis(
        compatibility_matrix=generate_compatibility_matrix(aggregates),
        profile_comparisons=compare_department_profiles(aggregates),
        recommendations=generate_collaboration_recommendations(aggregates),
        metadata=CollaborationMetadata(
            department_count=count,
            total_pairs=count * (count - 1) // 2,
            available=True,
        ),
    )
    logger.info(
        "Collaboration analysis: %s departments, %s matrix entries",
        count, len(analysis.compatibility_matrix),
    )
    return analysis
