"""Department aggregation — validation, grouping and averaged profiles.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
import math
from typing import Any

from pydantic import BaseModel, Field

from disc_insights.disc_types import (
    TRAITS,
    Scores,
    Trait,
    empty_distribution,
    round_half_up,
)
from disc_insights.profile_models import Profile


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class AggregateRow(BaseModel):
    """The fields of a stored profile that aggregation needs."""

    department: str
    natural: dict[Trait, float]
    adaptive: dict[Trait, float]
    primary_natural: Trait
    primary_adaptive: Trait


class ProfileValidation(BaseModel):
    """Outcome of the data-quality filter."""

    valid: list[AggregateRow] = Field(default_factory=list)
    skipped: int = Field(default=0, ge=0)


class DepartmentAggregate(BaseModel):
    """Averaged statistics for everyone sharing a normalised department name."""

    department: str
    count: int = Field(ge=1)
    avg_natural: Scores
    avg_adaptive: Scores
    primary_natural_distribution: dict[Trait, int]
    primary_adaptive_distribution: dict[Trait, int]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def normalize_department(name: str) -> str:
    """Grouping key: trimmed and lower-cased."""
    return name.strip().lower()


def validate_profiles(rows: Iterable[Profile | Mapping[str, Any]]) -> ProfileValidation:
    """Split *rows* into usable aggregation rows and a count of skipped ones.

    A row is skipped when its department is missing or blank, or when any of
    the eight Natural / Adaptive score fields is missing, non-numeric or
    outside 0-100.
    """
    result = ProfileValidation()
    for row in rows:
        parsed = _to_aggregate_row(row)
        if parsed is None:
            result.skipped += 1
        else:
            result.valid.append(parsed)

    if result.skipped:
        logger.warning("Skipped %s malformed profile rows", result.skipped)
    return result


def _to_aggregate_row(row: Profile | Mapping[str, Any]) -> AggregateRow | None:
    if isinstance(row, Profile):
        return AggregateRow(
            department=row.department.strip(),
            natural={t: float(v) for t, v in row.natural.as_dict().items()},
            adaptive={t: float(v) for t, v in row.adaptive.as_dict().items()},
            primary_natural=row.primary_natural,
            primary_adaptive=row.primary_adaptive,
        )
    if not isinstance(row, Mapping):
        return None

    department = row.get("department")
    if not isinstance(department, str) or not department.strip():
        return None

    natural = _score_values(row.get("natural"))
    adaptive = _score_values(row.get("adaptive"))
    if natural is None or adaptive is None:
        return None

    # A missing or unknown primary label is re-derived from the scores.
    return AggregateRow(
        department=department.strip(),
        natural=natural,
        adaptive=adaptive,
        primary_natural=_as_trait(row.get("primary_natural")) or _argmax(natural),
        primary_adaptive=_as_trait(row.get("primary_adaptive")) or _argmax(adaptive),
    )


def _score_values(raw: Any) -> dict[Trait, float] | None:
    if not isinstance(raw, Mapping):
        return None
    values: dict[Trait, float] = {}
    for t in TRAITS:
        v = raw.get(t.value)
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            return None
        if not math.isfinite(v) or not 0 <= v <= 100:
            return None
        values[t] = float(v)
    return values


def _argmax(values: dict[Trait, float]) -> Trait:
    return max(TRAITS, key=values.__getitem__)


def _as_trait(value: Any) -> Trait | None:
    try:
        return Trait(value)
    except ValueError:
        return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def aggregate_departments(rows: Iterable[Profile | Mapping[str, Any]]) -> list[DepartmentAggregate]:
    """Group profiles by department and average their scores.

    Departments are matched case-insensitively after trimming and are
    returned in order of first appearance, each named after the trimmed
    department string of its first profile.
    """
    return aggregate_valid_rows(validate_profiles(rows).valid)


def aggregate_valid_rows(rows: list[AggregateRow]) -> list[DepartmentAggregate]:
    """Aggregate rows that already passed :func:`validate_profiles`."""
    groups: dict[str, list[AggregateRow]] = {}
    for row in rows:
        groups.setdefault(normalize_department(row.department), []).append(row)

    aggregates: list[DepartmentAggregate] = []
    for members in groups.values():
        aggregates.append(DepartmentAggregate(
            department=members[0].department,
            count=len(members),
            avg_natural=_average(members, "natural"),
            avg_adaptive=_average(members, "adaptive"),
            primary_natural_distribution=_distribution(m.primary_natural for m in members),
            primary_adaptive_distribution=_distribution(m.primary_adaptive for m in members),
        ))

    logger.info(
        "Aggregated %s rows into %s departments", len(rows), len(aggregates),
    )
    return aggregates


def _average(members: list[AggregateRow], field: str) -> Scores:
    n = len(members)
    return Scores(**{
        t.value: round_half_up(sum(getattr(m, field)[t] for m in members) / n)
        for t in TRAITS
    })


def _distribution(primaries: Iterable[Trait]) -> dict[Trait, int]:
    counts = empty_distribution()
    for p in primaries:
        counts[p] += 1
    return counts


def find_profile_shifters(profiles: Iterable[Profile]) -> list[Profile]:
    """Profiles whose primary type changes between Natural and Adaptive."""
    return [p for p in profiles if p.primary_natural != p.primary_adaptive]
