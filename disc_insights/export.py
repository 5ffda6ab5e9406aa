"""CSV export of saved profiles for the admin dashboard."""

from __future__ import annotations

from collections.abc import Iterable
import csv
import io
import logging
from pathlib import Path
from typing import Any

from disc_insights.disc_types import TRAITS, Motivator
from disc_insights.profile_models import Profile


logger = logging.getLogger(__name__)


_CSV_COLUMNS = [
    "id", "name", "email", "department", "team_code", "date",
    *[f"natural_{t.value}" for t in TRAITS],
    *[f"adaptive_{t.value}" for t in TRAITS],
    "primary_natural", "primary_adaptive", "profile_shifts",
    *[f"driving_forces_{m.value.lower()}" for m in Motivator],
]


def profile_to_row(profile: Profile) -> dict[str, Any]:
    """Flatten one profile into a CSV row."""
    row: dict[str, Any] = {
        "id": profile.id,
        "name": profile.name,
        "email": profile.email or "",
        "department": profile.department,
        "team_code": profile.team_code or "",
        "date": profile.created_at.date().isoformat(),
        "primary_natural": profile.primary_natural.value,
        "primary_adaptive": profile.primary_adaptive.value,
        "profile_shifts": profile.primary_natural != profile.primary_adaptive,
    }
    for t in TRAITS:
        row[f"natural_{t.value}"] = profile.natural.get(t)
        row[f"adaptive_{t.value}"] = profile.adaptive.get(t)
    for m in Motivator:
        pole = profile.driving_forces.primary_forces[m].value if profile.driving_forces else ""
        row[f"driving_forces_{m.value.lower()}"] = pole
    return row


def _write_rows(fh: Any, profiles: Iterable[Profile]) -> int:
    writer = csv.DictWriter(fh, fieldnames=_CSV_COLUMNS)
    writer.writeheader()
    count = 0
    for profile in profiles:
        writer.writerow(profile_to_row(profile))
        count += 1
    return count


def profiles_to_csv(profiles: Iterable[Profile]) -> str:
    """Render *profiles* as CSV text in memory, for download buttons."""
    buf = io.StringIO()
    count = _write_rows(buf, profiles)
    logger.info("Profiles CSV rendered in memory (%s rows)", count)
    return buf.getvalue()


def export_profiles_to_csv(profiles: Iterable[Profile], filepath: str) -> str:
    """Write *profiles* to a CSV file.

    Args:
        profiles: Saved profiles, in the order to write them.
        filepath: Output CSV path; parent directories are created.

    Returns:
        The filepath written.
    """
    Path(filepath).parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", newline="", encoding="utf-8") as f:
        count = _write_rows(f, profiles)
    logger.info("Profiles CSV exported: %s (%s rows)", filepath, count)
    return filepath
