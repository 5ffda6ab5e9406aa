"""Driving Forces scoring and motivator interpretation.

Scores the paired-choice motivator questionnaire and derives the individual
report sections (force classification, DISC integration, team dynamics and
development recommendations). All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from disc_insights.disc_types import MOTIVATOR_AXES, DrivingForce, Motivator, Trait


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class DrivingForceDescription(BaseModel):
    """Display metadata for a single pole."""

    name: str
    full_name: str
    description: str
    traits: list[str] = Field(default_factory=list, min_length=1)


class DrivingForceResult(BaseModel):
    """Raw pole counts plus the winning pole of each motivator axis."""

    scores: dict[DrivingForce, int]
    primary_forces: dict[Motivator, DrivingForce]

    @model_validator(mode="after")
    def _complete_tables(self) -> DrivingForceResult:
        if set(self.scores) != set(DrivingForce):
            raise ValueError("scores must contain all 12 driving force codes")
        if any(v < 0 for v in self.scores.values()):
            raise ValueError("driving force counts must be non-negative")
        if set(self.primary_forces) != set(Motivator):
            raise ValueError("primary_forces must cover all 6 motivators")
        for motivator, pole in self.primary_forces.items():
            if pole not in MOTIVATOR_AXES[motivator]:
                raise ValueError(f"{pole.value} is not a pole of {motivator.value}")
        return self


class ScoredForce(BaseModel):
    force: DrivingForce
    score: int
    description: DrivingForceDescription


class ForceClassification(BaseModel):
    """Forces bucketed by how strongly they motivate."""

    primary: list[ScoredForce] = Field(default_factory=list)
    situational: list[ScoredForce] = Field(default_factory=list)
    indifferent: list[ScoredForce] = Field(default_factory=list)


Alignment = Literal["strong", "moderate", "conflict"]


class DiscIntegration(BaseModel):
    alignment: Alignment
    insights: list[str]
    recommendations: list[str]


class TeamDynamics(BaseModel):
    collaboration_style: str
    complementary_profiles: list[str]
    communication_preferences: list[str]
    potential_frictions: list[str]


class DevelopmentRecommendations(BaseModel):
    leverage_primary: list[str]
    develop_situational: list[str]
    work_with_indifferent: list[str]
    personal_goals: list[str]


# ---------------------------------------------------------------------------
# Pole descriptions
# ---------------------------------------------------------------------------
DRIVING_FORCE_DESCRIPTIONS: dict[DrivingForce, DrivingForceDescription] = {
    DrivingForce.KI: DrivingForceDescription(
        name="Instinctive",
        full_name="Knowledge - Instinctive",
        description="Driven by utilizing past experiences and intuition, seeking specific knowledge when necessary.",
        traits=["Experience-based", "Intuitive", "Practical", "Action-oriented"],
    ),
    DrivingForce.KN: DrivingForceDescription(
        name="Intellectual",
        full_name="Knowledge - Intellectual",
        description="Driven by opportunities to learn, acquire knowledge, and discover truth.",
        traits=["Curious", "Analytical", "Learning-focused", "Truth-seeking"],
    ),
    DrivingForce.US: DrivingForceDescription(
        name="Selfless",
        full_name="Utility - Selfless",
        description="Driven by completing tasks for the sake of completion, with little expectation of personal return.",
        traits=["Altruistic", "Service-oriented", "Generous", "Self-sacrificing"],
    ),
    DrivingForce.UR: DrivingForceDescription(
        name="Resourceful",
        full_name="Utility - Resourceful",
        description="Driven by practical results, maximizing efficiency and returns for investments of time, talent, energy, and resources.",
        traits=["Efficient", "Results-driven", "Pragmatic", "ROI-focused"],
    ),
    DrivingForce.SO: DrivingForceDescription(
        name="Objective",
        full_name="Surroundings - Objective",
        description="Driven by the functionality and objectivity of surroundings.",
        traits=["Functional", "Practical", "Systematic", "Organized"],
    ),
    DrivingForce.SH: DrivingForceDescription(
        name="Harmonious",
        full_name="Surroundings - Harmonious",
        description="Driven by the experience, subjective viewpoints, and balance in surroundings.",
        traits=["Aesthetic", "Balanced", "Sensory-aware", "Atmosphere-focused"],
    ),
    DrivingForce.OI: DrivingForceDescription(
        name="Intentional",
        full_name="Others - Intentional",
        description="Driven to assist others for a specific purpose, not just for the sake of being helpful.",
        traits=["Purpose-driven", "Goal-oriented", "Strategic", "Outcome-focused"],
    ),
    DrivingForce.OA: DrivingForceDescription(
        name="Altruistic",
        full_name="Others - Altruistic",
        description="Driven by the benefits provided to others.",
        traits=["Caring", "Empathetic", "Supportive", "People-focused"],
    ),
    DrivingForce.PC: DrivingForceDescription(
        name="Collaborative",
        full_name="Power - Collaborative",
        description="Driven by being in a supporting role and contributing with little need for individual recognition.",
        traits=["Team-oriented", "Supportive", "Humble", "Cooperative"],
    ),
    DrivingForce.PD: DrivingForceDescription(
        name="Commanding",
        full_name="Power - Commanding",
        description="Driven by status, recognition, and control over personal freedom.",
        traits=["Ambitious", "Leadership-focused", "Status-driven", "Autonomous"],
    ),
    DrivingForce.MR: DrivingForceDescription(
        name="Receptive",
        full_name="Methodologies - Receptive",
        description="Driven by new ideas, methods, and opportunities that fall outside a defined system for living.",
        traits=["Innovative", "Flexible", "Open-minded", "Change-embracing"],
    ),
    DrivingForce.MS: DrivingForceDescription(
        name="Structured",
        full_name="Methodologies - Structured",
        description="Driven by traditional approaches, proven methods, and a defined system for living.",
        traits=["Systematic", "Traditional", "Consistent", "Process-oriented"],
    ),
}


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------
def score_driving_forces(choices: Iterable[DrivingForce]) -> DrivingForceResult:
    """Tally pole choices and pick the winning pole of each motivator axis.

    The left pole of an axis wins ties, so an empty questionnaire yields
    KI / US / SO / OI / PC / MR.
    """
    scores: dict[DrivingForce, int] = {f: 0 for f in DrivingForce}
    for choice in choices:
        scores[DrivingForce(choice)] += 1

    primary_forces: dict[Motivator, DrivingForce] = {}
    for motivator, (left, right) in MOTIVATOR_AXES.items():
        primary_forces[motivator] = left if scores[left] >= scores[right] else right

    return DrivingForceResult(scores=scores, primary_forces=primary_forces)


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------
_PRIMARY_THRESHOLD = 8
_SITUATIONAL_THRESHOLD = 4


def classify_driving_forces(scores: dict[DrivingForce, int]) -> ForceClassification:
    """Bucket forces into primary (>= 8), situational (>= 4) and indifferent."""
    result = ForceClassification()
    for force, score in scores.items():
        scored = ScoredForce(
            force=force,
            score=score,
            description=DRIVING_FORCE_DESCRIPTIONS[force],
        )
        if score >= _PRIMARY_THRESHOLD:
            result.primary.append(scored)
        elif score >= _SITUATIONAL_THRESHOLD:
            result.situational.append(scored)
        else:
            result.indifferent.append(scored)

    for bucket in (result.primary, result.situational, result.indifferent):
        bucket.sort(key=lambda f: f.score, reverse=True)
    return result


# ---------------------------------------------------------------------------
# DISC integration
# ---------------------------------------------------------------------------
_DISC_FORCE_ALIGNMENT: dict[Trait, frozenset[DrivingForce]] = {
    Trait.D: frozenset({DrivingForce.PD, DrivingForce.UR, DrivingForce.SO, DrivingForce.OI}),
    Trait.I: frozenset({DrivingForce.OA, DrivingForce.SH, DrivingForce.PC, DrivingForce.MR}),
    Trait.S: frozenset({DrivingForce.OA, DrivingForce.PC, DrivingForce.SH, DrivingForce.MS}),
    Trait.C: frozenset({DrivingForce.KN, DrivingForce.SO, DrivingForce.MS, DrivingForce.UR}),
}

# (disc type, force) -> (insight, recommendation or None)
_INTEGRATION_RULES: dict[Trait, list[tuple[DrivingForce, str, str | None]]] = {
    Trait.D: [
        (DrivingForce.PD,
         "Your dominant style combined with Commanding power creates strong leadership potential.",
         None),
        (DrivingForce.US,
         "Your direct approach may contrast with Selfless utility - be mindful of balancing assertiveness with service.",
         "Practice active listening and consider others' perspectives before making decisions"),
    ],
    Trait.I: [
        (DrivingForce.OA,
         "Your influence style paired with Altruistic orientation makes you excellent at building relationships and supporting others.",
         None),
        (DrivingForce.PD,
         "Your collaborative nature may conflict with Commanding power - you may struggle with needing individual recognition.",
         "Find ways to contribute that allow for both team success and personal acknowledgment"),
    ],
    Trait.S: [
        (DrivingForce.PC,
         "Your steady approach combined with Collaborative power creates a reliable and supportive team member.",
         None),
        (DrivingForce.PD,
         "Your preference for stability may conflict with Commanding power - you may feel uncomfortable in leadership roles.",
         "Consider taking on supportive leadership roles that align with your collaborative nature"),
    ],
    Trait.C: [
        (DrivingForce.KN,
         "Your conscientious style paired with Intellectual knowledge creates a strong analytical and learning-focused approach.",
         None),
        (DrivingForce.MR,
         "Your systematic nature may contrast with Receptive methodologies - you may resist change and new ideas.",
         "Practice being open to new approaches while maintaining your quality standards"),
    ],
}


def analyze_disc_integration(
    disc_type: Trait,
    primary_forces: list[DrivingForce],
) -> DiscIntegration:
    """Describe how a DISC style lines up with the respondent's primary forces."""
    compatible = _DISC_FORCE_ALIGNMENT[disc_type]
    aligned = sum(1 for f in primary_forces if f in compatible)
    total = len(primary_forces)

    insights: list[str] = []
    recommendations: list[str] = []

    alignment: Alignment
    if total > 0 and aligned == total:
        alignment = "strong"
        insights.append(
            f"Your {disc_type.value} behavioral style strongly aligns with your primary driving forces, "
            "creating a cohesive and consistent approach."
        )
    elif aligned >= total / 2:
        alignment = "moderate"
        insights.append(
            f"Your {disc_type.value} style generally complements your driving forces, "
            "with some areas that may require conscious integration."
        )
    else:
        alignment = "conflict"
        insights.append(
            f"Your {disc_type.value} behavioral style and driving forces show some tension, "
            "which may require awareness and adaptation."
        )

    for force, insight, recommendation in _INTEGRATION_RULES[disc_type]:
        if force in primary_forces:
            insights.append(insight)
            if recommendation:
                recommendations.append(recommendation)

    if not recommendations:
        recommendations = [
            "Continue leveraging the natural alignment between your behavior and motivations",
            "Be aware of situations where your DISC style and driving forces may create internal tension",
        ]

    return DiscIntegration(alignment=alignment, insights=insights, recommendations=recommendations)


# ---------------------------------------------------------------------------
# Team dynamics
# ---------------------------------------------------------------------------
_COMPLEMENTS: list[tuple[DrivingForce, list[str]]] = [
    (DrivingForce.PD, [
        "People with Collaborative (PC) power who can support your leadership",
        "Those with Structured (MS) methodologies who provide organization",
    ]),
    (DrivingForce.PC, [
        "People with Commanding (PD) power who can provide direction",
        "Those with Objective (SO) surroundings who bring structure",
    ]),
    (DrivingForce.KN, ["People with Instinctive (KI) knowledge who can provide practical experience"]),
    (DrivingForce.KI, ["People with Intellectual (KN) knowledge who can provide research and analysis"]),
    (DrivingForce.MR, ["People with Structured (MS) methodologies who can provide stability"]),
    (DrivingForce.MS, ["People with Receptive (MR) methodologies who can bring innovation"]),
]

# (force present, opposite absent, friction)
_FRICTIONS: list[tuple[DrivingForce, DrivingForce, str]] = [
    (DrivingForce.PD, DrivingForce.PC, "You may clash with others who also want to lead or control outcomes"),
    (DrivingForce.MS, DrivingForce.MR, "You may struggle with team members who constantly want to change processes"),
    (DrivingForce.UR, DrivingForce.US, "You may conflict with those who prioritize helping others over efficiency"),
    (DrivingForce.SO, DrivingForce.SH, "You may find it difficult to work with those who prioritize aesthetics over function"),
]


def team_dynamics_insights(primary_forces: list[DrivingForce]) -> TeamDynamics:
    """Collaboration style, complementary profiles and likely friction points."""
    forces = set(primary_forces)
    people_first = DrivingForce.OA in forces or DrivingForce.US in forces

    style: list[str] = []
    if DrivingForce.PC in forces:
        style.append("You thrive in collaborative, team-oriented environments where everyone contributes equally.")
    elif DrivingForce.PD in forces:
        style.append("You prefer taking leadership roles and driving team outcomes.")
    else:
        style.append("You adapt your collaboration style based on the situation and team needs.")
    if people_first:
        style.append("You naturally support others and prioritize team success over individual recognition.")

    complementary = [text for force, texts in _COMPLEMENTS if force in forces for text in texts]

    communication: list[str] = []
    if DrivingForce.KN in forces:
        communication.append("You appreciate detailed explanations and data-driven discussions")
    if people_first:
        communication.append("You value communication that focuses on people and relationships")
    if DrivingForce.SO in forces:
        communication.append("You prefer clear, organized, and functional communication")
    if DrivingForce.SH in forces:
        communication.append("You appreciate communication that considers feelings and creates harmony")

    frictions = [
        text for force, opposite, text in _FRICTIONS
        if force in forces and opposite not in forces
    ]

    return TeamDynamics(
        collaboration_style=" ".join(style),
        complementary_profiles=complementary or ["You work well with diverse team members"],
        communication_preferences=communication or ["Standard communication practices work well"],
        potential_frictions=frictions or ["Minimal friction expected with most team members"],
    )


# ---------------------------------------------------------------------------
# Development recommendations
# ---------------------------------------------------------------------------
def development_recommendations(classification: ForceClassification) -> DevelopmentRecommendations:
    """Turn a force classification into personal development suggestions."""
    leverage: list[str] = []
    develop: list[str] = []
    indifferent: list[str] = []
    goals: list[str] = []

    if classification.primary:
        names = ", ".join(f.description.name for f in classification.primary)
        leverage += [
            f"Focus on opportunities that align with your primary forces: {names}",
            "Seek roles and projects that naturally engage these motivators",
            "Use these forces as your foundation for decision-making and goal-setting",
        ]

    if classification.situational:
        names = ", ".join(f.description.name for f in classification.situational)
        develop += [
            f"Practice activating your situational forces when needed: {names}",
            "Look for opportunities to develop these motivators in relevant contexts",
            "Be aware of situations where these forces could be valuable",
        ]
    else:
        develop += [
            "You have a clear distinction between primary and indifferent forces",
            "Consider exploring middle-ground motivators to increase flexibility",
        ]

    if classification.indifferent:
        names = ", ".join(f.description.name for f in classification.indifferent)
        indifferent += [
            f"Recognize that these forces have minimal impact: {names}",
            "Don't expect these factors to motivate you significantly",
            "When these forces are required, partner with others who are naturally motivated by them",
        ]

    goals.append("Continue developing self-awareness around what truly motivates you")
    if len(classification.primary) >= 3:
        goals.append("Focus on integrating your multiple primary forces for maximum impact")
    if classification.situational:
        goals.append("Practice flexing your situational forces to become more adaptable")
    goals.append("Regularly reflect on how your driving forces align with your current activities and goals")

    return DevelopmentRecommendations(
        leverage_primary=leverage,
        develop_situational=develop,
        work_with_indifferent=indifferent,
        personal_goals=goals,
    )
