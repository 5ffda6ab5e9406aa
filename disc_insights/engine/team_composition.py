"""Team composition analysis — strengths, gaps and staffing recommendations.

All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from disc_insights.disc_types import TRAITS, Trait, primary_trait
from disc_insights.engine.departments import DepartmentAggregate


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class TeamComposition(BaseModel):
    """Composition report for one department."""

    department: str
    strengths: list[str] = Field(default_factory=list)
    gaps: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Thresholds & sentences
# ---------------------------------------------------------------------------
STRENGTH_THRESHOLD = 30
GAP_THRESHOLD = 20

_STRENGTHS: dict[Trait, str] = {
    Trait.D: "Strong drive and results orientation",
    Trait.I: "Excellent collaboration and communication",
    Trait.S: "Reliable and stable team members",
    Trait.C: "High attention to detail and quality",
}

# trait -> (gap, recommendation)
_GAPS: dict[Trait, tuple[str, str]] = {
    Trait.D: (
        "May lack assertiveness and drive",
        "Consider pairing with high-D individuals for projects requiring quick decisions",
    ),
    Trait.I: (
        "May struggle with relationship building",
        "Add team members who excel at networking and collaboration",
    ),
    Trait.S: (
        "May lack stability and consistency",
        "Include steady team members to provide structure",
    ),
    Trait.C: (
        "May overlook details and quality control",
        "Ensure quality checks and detail-oriented processes",
    ),
}

_CROSS_FUNCTIONAL: dict[Trait, str] = {
    Trait.D: "Works well with Steadiness-focused teams for balanced execution",
    Trait.I: "Complements Conscientiousness teams for thorough innovation",
    Trait.S: "Benefits from Dominance teams for driving change",
    Trait.C: "Pairs well with Influence teams for creative problem-solving",
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def analyze_department_composition(dept: DepartmentAggregate) -> TeamComposition:
    """Classify one department's average Natural profile against the thresholds."""
    result = TeamComposition(department=dept.department)

    for t in TRAITS:
        value = dept.avg_natural.get(t)
        if value > STRENGTH_THRESHOLD:
            result.strengths.append(_STRENGTHS[t])
        if value < GAP_THRESHOLD:
            gap, recommendation = _GAPS[t]
            result.gaps.append(gap)
            result.recommendations.append(recommendation)

    result.recommendations.append(_CROSS_FUNCTIONAL[primary_trait(dept.avg_natural)])
    return result


def analyze_team_composition(aggregates: list[DepartmentAggregate]) -> list[TeamComposition]:
    """One composition report per department, in input order."""
    return [analyze_department_composition(d) for d in aggregates]
