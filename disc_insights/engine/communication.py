"""Communication styles and cross-department communication tips.

All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from disc_insights.disc_types import Trait, primary_trait
from disc_insights.engine.departments import DepartmentAggregate


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class CommunicationStyle(BaseModel):
    style: str
    preferences: list[str] = Field(min_length=1)


class CommunicationInsight(BaseModel):
    """How a department prefers to communicate, and how to reach the others."""

    department: str
    style: str
    preferences: list[str]
    recommendations: list[str]


# ---------------------------------------------------------------------------
# Style profiles
# ---------------------------------------------------------------------------
COMMUNICATION_STYLES: dict[Trait, CommunicationStyle] = {
    Trait.D: CommunicationStyle(
        style="Direct and Results-Focused",
        preferences=[
            "Brief, to-the-point communication",
            "Focus on outcomes and action items",
            "Prefer written summaries over long meetings",
            "Appreciate quick decision-making",
        ],
    ),
    Trait.I: CommunicationStyle(
        style="Enthusiastic and Relationship-Focused",
        preferences=[
            "Engaging, story-driven communication",
            "Prefer face-to-face or video calls",
            "Value recognition and positive feedback",
            "Enjoy collaborative brainstorming sessions",
        ],
    ),
    Trait.S: CommunicationStyle(
        style="Patient and Supportive",
        preferences=[
            "Clear, step-by-step instructions",
            "Prefer structured meetings with agendas",
            "Value consistency and follow-through",
            "Appreciate time to process information",
        ],
    ),
    Trait.C: CommunicationStyle(
        style="Precise and Data-Driven",
        preferences=[
            "Detailed documentation and data",
            "Prefer written communication for accuracy",
            "Value thorough analysis before decisions",
            "Appreciate well-organized information",
        ],
    ),
}

# (speaker primary, listener primary) -> advice
_DIRECTIONAL_TIPS: dict[tuple[Trait, Trait], str] = {
    (Trait.D, Trait.S): "Provide context and allow time for processing",
    (Trait.S, Trait.D): "Lead with key points and action items",
    (Trait.I, Trait.C): "Include data and specific details",
    (Trait.C, Trait.I): "Use engaging examples and stories",
}

FALLBACK_RECOMMENDATION = "Standard communication practices apply"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def communication_insights(aggregates: list[DepartmentAggregate]) -> list[CommunicationInsight]:
    """Style, preferences and per-department tips for every department."""
    primaries = [(d, primary_trait(d.avg_natural)) for d in aggregates]

    insights: list[CommunicationInsight] = []
    for dept, primary in primaries:
        profile = COMMUNICATION_STYLES[primary]
        recommendations: list[str] = []
        for other, other_primary in primaries:
            if other.department == dept.department:
                continue
            tip = _DIRECTIONAL_TIPS.get((primary, other_primary))
            if tip:
                recommendations.append(f"When communicating with {other.department}: {tip}")
        insights.append(CommunicationInsight(
            department=dept.department,
            style=profile.style,
            preferences=list(profile.preferences),
            recommendations=recommendations or [FALLBACK_RECOMMENDATION],
        ))
    return insights
