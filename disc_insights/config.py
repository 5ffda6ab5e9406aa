"""Environment-driven configuration.

Reads DISC_DATA_PATH, DISC_LOG_LEVEL and DISC_ADMIN_TEAM_CODE.
"""

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = "data/disc_profiles.json"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_data_path() -> str:
    """Location of the JSON profile store."""
    return os.getenv("DISC_DATA_PATH", "").strip() or DEFAULT_DATA_PATH


def get_log_level() -> str:
    """Configured log level name.

    Raises:
        ValueError: If DISC_LOG_LEVEL is not a standard level name.
    """
    level = os.getenv("DISC_LOG_LEVEL", "INFO").strip().upper() or "INFO"
    if level not in _LOG_LEVELS:
        raise ValueError(f"DISC_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
    return level


def get_admin_team_code() -> str | None:
    """Team code required to open the admin dashboard, if one is configured."""
    code = os.getenv("DISC_ADMIN_TEAM_CODE", "").strip().upper()
    return code or None


def configure_logging() -> None:
    """Apply a basic logging config at the configured level."""
    level = get_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Logging configured: level=%s data_path=%s", level, get_data_path())
