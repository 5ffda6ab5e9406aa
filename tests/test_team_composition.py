"""Tests for disc_insights/engine/team_composition.py."""

from disc_insights.disc_types import Scores, empty_distribution
from disc_insights.engine.departments import DepartmentAggregate
from disc_insights.engine.team_composition import analyze_department_composition, analyze_team_composition


def _dept(name, natural):
    scores = Scores(**dict(zip("DISC", natural)))
    return DepartmentAggregate(
        department=name,
        count=1,
        avg_natural=scores,
        avg_adaptive=scores,
        primary_natural_distribution=empty_distribution(),
        primary_adaptive_distribution=empty_distribution(),
    )


class TestTeamComposition:
    def test_dominant_department(self):
        comp = analyze_department_composition(_dept("Sales", (40, 10, 10, 10)))
        assert comp.strengths == ["Strong drive and results orientation"]
        assert comp.gaps == [
            "May struggle with relationship building",
            "May lack stability and consistency",
            "May overlook details and quality control",
        ]
        assert len(comp.recommendations) == 4
        assert comp.recommendations[-1] == "Works well with Steadiness-focused teams for balanced execution"

    def test_thresholds_are_strict(self):
        comp = analyze_department_composition(_dept("Ops", (30, 20, 25, 25)))
        assert comp.strengths == []
        assert comp.gaps == []
        assert comp.recommendations == ["Works well with Steadiness-focused teams for balanced execution"]

    def test_one_report_per_department_in_order(self):
        reports = analyze_team_composition([_dept("A", (10, 10, 60, 20)), _dept("B", (10, 10, 20, 60))])
        assert [r.department for r in reports] == ["A", "B"]
        assert reports[0].recommendations[-1] == "Benefits from Dominance teams for driving change"

