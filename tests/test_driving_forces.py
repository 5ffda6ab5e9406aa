"""Tests for disc_insights/driving_forces.py — scoring and interpretation."""

from disc_insights.disc_types import DrivingForce, Motivator, Trait
from disc_insights.driving_forces import (
    DRIVING_FORCE_DESCRIPTIONS,
    DrivingForceResult,
    analyze_disc_integration,
    classify_driving_forces,
    development_recommendations,
    score_driving_forces,
    team_dynamics_insights,
)
from pydantic import ValidationError
import pytest


F = DrivingForce


def _scores(**counts: int) -> dict[DrivingForce, int]:
    scores = {f: 0 for f in DrivingForce}
    for code, n in counts.items():
        scores[F(code)] = n
    return scores


class TestScoreDrivingForces:
    def test_empty_choices_pick_left_poles(self):
        result = score_driving_forces([])
        assert all(v == 0 for v in result.scores.values())
        assert result.primary_forces == {
            Motivator.KNOWLEDGE: F.KI,
            Motivator.UTILITY: F.US,
            Motivator.SURROUNDINGS: F.SO,
            Motivator.OTHERS: F.OI,
            Motivator.POWER: F.PC,
            Motivator.METHODOLOGIES: F.MR,
        }

    def test_right_pole_wins_with_more_choices(self):
        result = score_driving_forces([F.KN, F.KN, F.KI, F.PD])
        assert result.scores[F.KN] == 2
        assert result.scores[F.KI] == 1
        assert result.primary_forces[Motivator.KNOWLEDGE] is F.KN
        assert result.primary_forces[Motivator.POWER] is F.PD

    def test_tie_goes_to_left_pole(self):
        result = score_driving_forces([F.MS, F.MR])
        assert result.primary_forces[Motivator.METHODOLOGIES] is F.MR

    def test_accepts_string_codes(self):
        result = score_driving_forces(["UR", "UR"])
        assert result.primary_forces[Motivator.UTILITY] is F.UR

    def test_unknown_code_rejected(self):
        with pytest.raises(ValueError):
            score_driving_forces(["XX"])


class TestDrivingForceResult:
    def test_incomplete_scores_rejected(self):
        primaries = score_driving_forces([]).primary_forces
        with pytest.raises(ValidationError, match="all 12"):
            DrivingForceResult(scores={F.KI: 1}, primary_forces=primaries)

    def test_pole_from_wrong_axis_rejected(self):
        primaries = dict(score_driving_forces([]).primary_forces)
        primaries[Motivator.KNOWLEDGE] = F.US
        with pytest.raises(ValidationError, match="not a pole of Knowledge"):
            DrivingForceResult(scores=_scores(), primary_forces=primaries)

    def test_every_force_has_description(self):
        assert set(DRIVING_FORCE_DESCRIPTIONS) == set(DrivingForce)


class TestClassification:
    def test_thresholds(self):
        c = classify_driving_forces(_scores(KN=9, PD=8, MS=5, MR=4, SO=3))
        assert [f.force for f in c.primary] == [F.KN, F.PD]
        assert [f.force for f in c.situational] == [F.MS, F.MR]
        assert len(c.indifferent) == 8
        assert c.indifferent[0].force is F.SO

    def test_description_attached(self):
        c = classify_driving_forces(_scores(KN=10))
        assert c.primary[0].description.name == "Intellectual"


class TestDiscIntegration:
    def test_strong_alignment(self):
        result = analyze_disc_integration(Trait.D, [F.PD, F.UR, F.SO, F.OI])
        assert result.alignment == "strong"
        assert any("Commanding power" in i for i in result.insights)
        assert len(result.recommendations) == 2

    def test_conflict_with_recommendation(self):
        result = analyze_disc_integration(Trait.D, [F.KI, F.US, F.SH, F.OA, F.PC, F.MR])
        assert result.alignment == "conflict"
        assert result.recommendations == [
            "Practice active listening and consider others' perspectives before making decisions",
        ]

    def test_moderate_at_half(self):
        result = analyze_disc_integration(Trait.C, [F.KN, F.MR])
        assert result.alignment == "moderate"
        assert len(result.insights) == 3

    def test_no_forces_is_moderate(self):
        assert analyze_disc_integration(Trait.S, []).alignment == "moderate"


class TestTeamDynamics:
    def test_commanding_structured(self):
        d = team_dynamics_insights([F.PD, F.MS])
        assert d.collaboration_style == "You prefer taking leadership roles and driving team outcomes."
        assert len(d.complementary_profiles) == 3
        assert len(d.potential_frictions) == 2
        assert d.communication_preferences == ["Standard communication practices work well"]

    def test_people_first_style(self):
        d = team_dynamics_insights([F.PC, F.OA])
        assert d.collaboration_style.startswith("You thrive in collaborative")
        assert d.collaboration_style.endswith("over individual recognition.")
        assert "You value communication that focuses on people and relationships" in d.communication_preferences

    def test_defaults(self):
        d = team_dynamics_insights([])
        assert d.complementary_profiles == ["You work well with diverse team members"]
        assert d.potential_frictions == ["Minimal friction expected with most team members"]


class TestDevelopment:
    def test_no_situational_forces(self):
        rec = development_recommendations(classify_driving_forces(_scores(KN=9)))
        assert rec.develop_situational[0] == "You have a clear distinction between primary and indifferent forces"
        assert len(rec.personal_goals) == 2
        assert "Intellectual" in rec.leverage_primary[0]

    def test_many_primary_and_situational(self):
        rec = development_recommendations(classify_driving_forces(_scores(KN=9, PD=9, MS=9, UR=5)))
        assert len(rec.personal_goals) == 4
        assert "Resourceful" in rec.develop_situational[0]
