"""Tests for disc_insights/export.py — CSV export."""

import csv
import io
from datetime import datetime, timezone

from disc_insights.disc_types import DiscAnswer, Trait
from disc_insights.driving_forces import score_driving_forces
from disc_insights.export import export_profiles_to_csv, profile_to_row, profiles_to_csv
from disc_insights.profile_models import Profile
from disc_insights.scoring import score_disc


def _profile(pid=1, driving_forces=None, team_code=None):
    disc = score_disc([DiscAnswer(most=Trait.D, least=Trait.I)])
    return Profile(
        id=pid,
        created_at=datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc),
        name="Ann",
        email="ann@example.com",
        department="Sales",
        team_code=team_code,
        natural=disc.natural,
        adaptive=disc.adaptive,
        primary_natural=disc.primary_natural,
        primary_adaptive=disc.primary_adaptive,
        driving_forces=driving_forces,
    )


class TestProfileToRow:
    def test_scores_flattened(self):
        row = profile_to_row(_profile())
        assert row["natural_D"] == 100
        assert row["adaptive_S"] == 20
        assert row["date"] == "2024-03-15"
        assert row["profile_shifts"] is False
        assert row["team_code"] == ""

    def test_driving_forces_columns(self):
        row = profile_to_row(_profile(driving_forces=score_driving_forces(["KN", "PD"])))
        assert row["driving_forces_knowledge"] == "KN"
        assert row["driving_forces_power"] == "PD"
        assert row["driving_forces_utility"] == "US"

    def test_missing_driving_forces_blank(self):
        row = profile_to_row(_profile())
        assert row["driving_forces_methodologies"] == ""


class TestExportProfilesToCsv:
    def test_writes_header_and_rows(self, tmp_path):
        out = tmp_path / "exports" / "results.csv"
        path = export_profiles_to_csv([_profile(1), _profile(2, team_code="ab")], str(out))
        assert path == str(out)

        with open(out, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 2
        assert rows[0]["id"] == "1"
        assert rows[0]["natural_D"] == "100"
        assert rows[1]["team_code"] == "AB"
        assert rows[0]["primary_adaptive"] == "D"

    def test_empty_export_has_header(self, tmp_path):
        out = tmp_path / "empty.csv"
        export_profiles_to_csv([], str(out))
        header = out.read_text(encoding="utf-8").splitlines()[0].split(",")
        assert header[:6] == ["id", "name", "email", "department", "team_code", "date"]
        assert header[-1] == "driving_forces_methodologies"


class TestProfilesToCsv:
    def test_rendered_in_memory(self):
        text = profiles_to_csv([_profile(1), _profile(2)])
        rows = list(csv.DictReader(io.StringIO(text)))
        assert [r["id"] for r in rows] == ["1", "2"]
        assert rows[0]["email"] == "ann@example.com"

    def test_matches_file_export(self, tmp_path):
        out = tmp_path / "results.csv"
        export_profiles_to_csv([_profile(1)], str(out))
        with open(out, newline="", encoding="utf-8") as f:
            assert f.read() == profiles_to_csv([_profile(1)])
