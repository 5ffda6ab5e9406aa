"""Tests for disc_insights/insights.py — assessment submission and report assembly."""

from disc_insights.disc_types import DiscAnswer, DrivingForce, Trait
from disc_insights.insights import InsightsService
from disc_insights.profile_repository import DataAccessError, ProfileRepository
import pytest


def _answers(most: str, least: str, n: int = 3) -> list[DiscAnswer]:
    return [DiscAnswer(most=Trait(most), least=Trait(least))] * n


def _row(department, natural, team_code=None):
    scores = dict(zip("DISC", natural))
    return {"department": department, "team_code": team_code, "natural": scores, "adaptive": scores}


class FakeRepository:
    """In-memory stand-in that serves canned rows."""

    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error

    def fetch_records(self, department=None, team_code=None, start_date=None, end_date=None):
        if self.error:
            raise self.error
        return list(self.rows)

    def get_profile(self, profile_id):
        return None

    def save_profile(self, submission):
        raise NotImplementedError


class TestSubmitAssessment:
    @pytest.fixture
    def service(self, tmp_path):
        return InsightsService(ProfileRepository(str(tmp_path / "profiles.json")))

    def test_scores_and_persists(self, service):
        profile = service.submit_assessment(name="Ann", department="Sales", disc_answers=_answers("D", "I"))
        assert profile.id == 1
        assert profile.natural.D == 100
        assert profile.primary_natural is Trait.D
        assert profile.driving_forces is None

    def test_with_driving_forces(self, service):
        profile = service.submit_assessment(
            name="Ann",
            department="Sales",
            disc_answers=_answers("S", "D"),
            driving_force_choices=[DrivingForce.PC, DrivingForce.PC, DrivingForce.PD],
            team_code="alpha",
        )
        assert profile.team_code == "ALPHA"
        assert profile.driving_forces.scores[DrivingForce.PC] == 2


class TestBuildInsights:
    @pytest.fixture
    def service(self, tmp_path):
        return InsightsService(ProfileRepository(str(tmp_path / "profiles.json")))

    def test_empty_store(self, service):
        report = service.build_insights()
        assert report.departments == []
        assert report.compatibility == []
        assert report.metadata.department_count == 0
        assert report.metadata.compatibility_available is False
        assert report.metadata.compatibility_reason.startswith("Need at least 2 departments")
        assert report.department_collaboration.metadata.available is False

    def test_two_departments(self, service):
        service.submit_assessment(name="Ann", department="Sales", disc_answers=_answers("D", "I"))
        service.submit_assessment(name="Bo", department="sales ", disc_answers=_answers("D", "C"))
        service.submit_assessment(name="Cy", department="Support", disc_answers=_answers("S", "D"))
        report = service.build_insights()

        assert [d.department for d in report.departments] == ["Sales", "Support"]
        assert report.metadata.total_results == 3
        assert report.metadata.compatibility_available is True
        assert report.metadata.compatibility_reason is None
        assert len(report.compatibility) == 1
        assert len(report.team_composition) == 2
        assert len(report.communication_insights) == 2
        assert report.department_collaboration.metadata.total_pairs == 1

    def test_team_code_filter(self, service):
        service.submit_assessment(name="Ann", department="Sales", disc_answers=_answers("D", "I"), team_code="A")
        service.submit_assessment(name="Bo", department="Ops", disc_answers=_answers("C", "I"), team_code="B")
        report = service.build_insights(team_code="a")
        assert [d.department for d in report.departments] == ["Sales"]
        assert report.metadata.compatibility_available is False

    def test_repeatable(self, service):
        service.submit_assessment(name="Ann", department="Sales", disc_answers=_answers("D", "I"))
        service.submit_assessment(name="Cy", department="Support", disc_answers=_answers("S", "D"))
        assert service.build_insights().model_dump() == service.build_insights().model_dump()

    def test_skipped_records_reported(self):
        service = InsightsService(FakeRepository([
            _row("Sales", (60, 20, 10, 10)),
            _row("Support", (10, 20, 50, 20)),
            _row("", (25, 25, 25, 25)),
            {"department": "Sales"},
        ]))
        report = service.build_insights()
        assert report.metadata.skipped_records == 2
        assert report.metadata.total_results == 2
        assert report.compatibility[0].score == 99

    def test_store_failure_propagates(self):
        service = InsightsService(FakeRepository(error=DataAccessError("Failed to load profiles: boom")))
        with pytest.raises(DataAccessError, match="boom"):
            service.build_insights()


class TestIndividualReport:
    @pytest.fixture
    def service(self, tmp_path):
        return InsightsService(ProfileRepository(str(tmp_path / "profiles.json")))

    def test_missing_profile(self, service):
        assert service.individual_report(42) is None

    def test_disc_only(self, service):
        saved = service.submit_assessment(name="Ann", department="Sales", disc_answers=_answers("D", "I"))
        report = service.individual_report(saved.id)
        assert report.profile.id == saved.id
        assert len(report.shifts) == 4
        assert report.is_shifter is False
        assert report.driving_forces is None

    def test_with_driving_forces(self, service):
        choices = [DrivingForce.PD] * 9 + [DrivingForce.UR] * 5
        saved = service.submit_assessment(
            name="Ann",
            department="Sales",
            disc_answers=_answers("D", "I"),
            driving_force_choices=choices,
        )
        forces = service.individual_report(saved.id).driving_forces
        assert [f.force for f in forces.classification.primary] == [DrivingForce.PD]
        assert [f.force for f in forces.classification.situational] == [DrivingForce.UR]
        assert forces.team_dynamics.collaboration_style.startswith("You prefer taking leadership roles")
        assert forces.integration.alignment == "moderate"
