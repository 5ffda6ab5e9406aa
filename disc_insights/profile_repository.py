"""Repository for assessment profile persistence (JSON file)."""

from __future__ import annotations

from datetime import date, datetime, timezone
import json
import logging
from pathlib import Path
import tempfile
import threading
from typing import Any, Protocol

from pydantic import ValidationError

from disc_insights.profile_models import Profile, ProfileSubmission


logger = logging.getLogger(__name__)

_STORE_VERSION = "1.0"

# One lock per resolved store path, shared by every repository instance.
_PATH_LOCKS: dict[Path, threading.Lock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = path.resolve()
    with _PATH_LOCKS_GUARD:
        lock = _PATH_LOCKS.get(key)
        if lock is None:
            lock = _PATH_LOCKS[key] = threading.Lock()
        return lock


class DataAccessError(RuntimeError):
    """The profile store could not be read or written."""


class ProfileSource(Protocol):
    """Read side of a profile store, as used by the analytics engine."""

    def fetch_records(
        self,
        department: str | None = None,
        team_code: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[dict[str, Any]]: ...

    def get_profile(self, profile_id: int) -> Profile | None: ...

    def save_profile(self, submission: ProfileSubmission) -> Profile: ...


class ProfileRepository:
    """Thread-safe, append-only JSON store of completed assessments."""

    def __init__(self, data_path: str = "data/disc_profiles.json") -> None:
        self._path = Path(data_path)
        self.backup_path = Path(f"{data_path}.backup")
        self._lock = _lock_for(self._path)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def save_profile(self, submission: ProfileSubmission) -> Profile:
        """Persist *submission* and return it with its id and timestamp."""
        with self._lock:
            store = self._read_store()
            profile = Profile(
                **submission.model_dump(exclude={"id", "created_at"}),
                id=store["next_id"],
                created_at=datetime.now(timezone.utc),
            )
            store["profiles"] = [*store["profiles"], profile.model_dump(mode="json")]
            store["next_id"] = profile.id + 1
            self._create_backup()
            self._atomic_write(store)

        logger.info(
            "Saved profile id=%s department=%s team_code=%s has_driving_forces=%s",
            profile.id, profile.department, profile.team_code, profile.driving_forces is not None,
        )
        return profile

    def fetch_records(
        self,
        department: str | None = None,
        team_code: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[dict[str, Any]]:
        """Return stored rows matching the filters, without validating them.

        Department matches case-insensitively after trimming, team code after
        trimming and upper-casing. Dates are inclusive on the creation date.
        """
        with self._lock:
            rows = self._read_store()["profiles"]

        dept_key = department.strip().lower() if department and department.strip() else None
        code_key = team_code.strip().upper() if team_code and team_code.strip() else None

        matched: list[dict[str, Any]] = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            if dept_key is not None and str(row.get("department") or "").strip().lower() != dept_key:
                continue
            if code_key is not None and str(row.get("team_code") or "").strip().upper() != code_key:
                continue
            if (start_date or end_date) and not _within_dates(row.get("created_at"), start_date, end_date):
                continue
            matched.append(row)

        logger.debug("Fetched %s of %s stored rows", len(matched), len(rows))
        return matched

    def list_profiles(
        self,
        department: str | None = None,
        team_code: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[Profile]:
        """Like :meth:`fetch_records` but validated; malformed rows are skipped."""
        profiles: list[Profile] = []
        for row in self.fetch_records(department, team_code, start_date, end_date):
            try:
                profiles.append(Profile.model_validate(row))
            except ValidationError:
                logger.warning("Skipping malformed profile row id=%s", row.get("id"))
        return profiles

    def get_profile(self, profile_id: int) -> Profile | None:
        """Look up a single profile; ``None`` when absent or unreadable."""
        with self._lock:
            rows = self._read_store()["profiles"]

        row = next((r for r in rows if isinstance(r, dict) and r.get("id") == profile_id), None)
        if row is None:
            return None
        try:
            return Profile.model_validate(row)
        except ValidationError:
            logger.warning("Stored profile id=%s is malformed", profile_id)
            return None

    def team_codes(self) -> list[str]:
        """Distinct team codes in the store, sorted."""
        codes = {
            str(r["team_code"]).strip().upper()
            for r in self.fetch_records()
            if r.get("team_code") and str(r["team_code"]).strip()
        }
        return sorted(codes)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _read_store(self) -> dict[str, Any]:
        if not self._path.exists():
            return {"version": _STORE_VERSION, "next_id": 1, "profiles": []}
        try:
            with open(self._path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            raise DataAccessError(f"Failed to load profiles: {exc}") from exc

        if not isinstance(data, dict) or not isinstance(data.get("profiles"), list):
            raise DataAccessError("Failed to load profiles: unexpected store layout")
        next_id = data.get("next_id")
        if not isinstance(next_id, int):
            ids = [r.get("id") for r in data["profiles"] if isinstance(r, dict)]
            next_id = max((i for i in ids if isinstance(i, int)), default=0) + 1
        return {
            "version": data.get("version", _STORE_VERSION),
            "next_id": next_id,
            "profiles": data["profiles"],
        }

    def _atomic_write(self, store: dict[str, Any]) -> None:
        tmp: Path | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f"{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp = Path(fh.name)
                json.dump(store, fh, indent=2, ensure_ascii=False)
            tmp.replace(self._path)
        except OSError as exc:
            if tmp is not None and tmp.exists():
                tmp.unlink()
            raise DataAccessError(f"Failed to save profile: {exc}") from exc

    def _create_backup(self) -> None:
        """Copy the current store aside before overwriting it."""
        if self._path.exists():
            try:
                self.backup_path.write_text(self._path.read_text(encoding="utf-8"), encoding="utf-8")
            except OSError:
                logger.warning("Failed to create backup", exc_info=True)


def _within_dates(created_at: Any, start_date: date | None, end_date: date | None) -> bool:
    """Inclusive date-range check on an ISO timestamp string."""
    if not isinstance(created_at, str) or len(created_at) < 10:
        return False
    try:
        created = date.fromisoformat(created_at[:10])
    except ValueError:
        return False
    if start_date and created < start_date:
        return False
    if end_date and created > end_date:
        return False
    return True
