"""Assessment service — scoring write path and analytics read path.

The profile store is injected; nothing here keeps module-level state.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
import logging

from pydantic import BaseModel, Field

from disc_insights.disc_types import DiscAnswer, DrivingForce
from disc_insights.driving_forces import (
    DevelopmentRecommendations,
    DiscIntegration,
    DrivingForceResult,
    ForceClassification,
    TeamDynamics,
    analyze_disc_integration,
    classify_driving_forces,
    development_recommendations,
    score_driving_forces,
    team_dynamics_insights,
)
from disc_insights.engine.collaboration import (
    DepartmentCollaborationAnalysis,
    department_collaboration_analysis,
)
from disc_insights.engine.communication import CommunicationInsight, communication_insights
from disc_insights.engine.compatibility import (
    DepartmentCompatibility,
    calculate_department_compatibility,
)
from disc_insights.engine.departments import (
    DepartmentAggregate,
    aggregate_valid_rows,
    validate_profiles,
)
from disc_insights.engine.team_composition import TeamComposition, analyze_team_composition
from disc_insights.profile_models import Profile, ProfileSubmission
from disc_insights.profile_repository import ProfileSource
from disc_insights.scoring import TraitShift, is_profile_shifter, score_disc, shift_analysis


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class InsightsMetadata(BaseModel):
    department_count: int = Field(ge=0)
    total_results: int = Field(ge=0)
    skipped_records: int = Field(ge=0)
    compatibility_available: bool
    compatibility_reason: str | None = None


class InsightsReport(BaseModel):
    """Everything the aggregate dashboard renders."""

    departments: list[DepartmentAggregate]
    compatibility: list[DepartmentCompatibility]
    team_composition: list[TeamComposition]
    communication_insights: list[CommunicationInsight]
    department_collaboration: DepartmentCollaborationAnalysis
    metadata: InsightsMetadata


class DrivingForcesReport(BaseModel):
    result: DrivingForceResult
    classification: ForceClassification
    integration: DiscIntegration
    team_dynamics: TeamDynamics
    development: DevelopmentRecommendations


class IndividualReport(BaseModel):
    """Everything the individual report renders for one profile."""

    profile: Profile
    shifts: list[TraitShift]
    is_shifter: bool
    driving_forces: DrivingForcesReport | None = None


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------
class InsightsService:
    """Thin orchestration over the scorers, the store and the analyzers."""

    def __init__(self, repository: ProfileSource) -> None:
        self._repository = repository

    def submit_assessment(
        self,
        *,
        name: str,
        department: str,
        disc_answers: Iterable[DiscAnswer],
        driving_force_choices: Iterable[DrivingForce] | None = None,
        email: str | None = None,
        team_code: str | None = None,
    ) -> Profile:
        """Score a completed assessment and persist it."""
        disc = score_disc(disc_answers)
        forces = score_driving_forces(driving_force_choices) if driving_force_choices is not None else None
        submission = ProfileSubmission.from_scores(
            name=name,
            email=email,
            department=department,
            team_code=team_code,
            disc=disc,
            driving_forces=forces,
        )
        return self._repository.save_profile(submission)

    def build_insights(
        self,
        team_code: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> InsightsReport:
        """Aggregate analytics over the current profile set.

        Raises:
            DataAccessError: If the store cannot be read. An unreadable store
                is never reported as an empty one.
        """
        records = self._repository.fetch_records(
            team_code=team_code, start_date=start_date, end_date=end_date,
        )
        validation = validate_profiles(records)
        departments = aggregate_valid_rows(validation.valid)

        compatibility = calculate_department_compatibility(departments)
        department_count = len(departments)
        reason = None
        if department_count < 2:
            reason = "Need at least 2 departments with results to calculate compatibility"
        elif not compatibility:
            reason = "Compatibility calculation returned no results"

        report = InsightsReport(
            departments=departments,
            compatibility=compatibility,
            team_composition=analyze_team_composition(departments),
            communication_insights=communication_insights(departments),
            department_collaboration=department_collaboration_analysis(departments),
            metadata=InsightsMetadata(
                department_count=department_count,
                total_results=sum(d.count for d in departments),
                skipped_records=validation.skipped,
                compatibility_available=bool(compatibility),
                compatibility_reason=reason,
            ),
        )
        logger.info(
            "Insights built: team_code=%s departments=%s results=%s skipped=%s pairs=%s",
            team_code, department_count, report.metadata.total_results,
            validation.skipped, len(compatibility),
        )
        return report

    def individual_report(self, profile_id: int) -> IndividualReport | None:
        """Report sections for one saved profile; ``None`` if it does not exist."""
        profile = self._repository.get_profile(profile_id)
        if profile is None:
            return None

        disc = profile.disc
        forces_report = None
        if profile.driving_forces is not None:
            winners = list(profile.driving_forces.primary_forces.values())
            classification = classify_driving_forces(profile.driving_forces.scores)
            forces_report = DrivingForcesReport(
                result=profile.driving_forces,
                classification=classification,
                integration=analyze_disc_integration(profile.primary_natural, winners),
                team_dynamics=team_dynamics_insights(winners),
                development=development_recommendations(classification),
            )

        return IndividualReport(
            profile=profile,
            shifts=shift_analysis(disc),
            is_shifter=is_profile_shifter(disc),
            driving_forces=forces_report,
        )
