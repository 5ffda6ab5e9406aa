"""Tests for disc_insights.config module."""

import os
from unittest.mock import patch

from disc_insights.config import (
    DEFAULT_DATA_PATH,
    get_admin_team_code,
    get_data_path,
    get_log_level,
)
from dotenv import load_dotenv
import pytest


class TestDataPath:
    @patch.dict(os.environ, {}, clear=True)
    def test_default(self):
        assert get_data_path() == DEFAULT_DATA_PATH

    @patch.dict(os.environ, {"DISC_DATA_PATH": "/srv/disc/profiles.json"})
    def test_override(self):
        assert get_data_path() == "/srv/disc/profiles.json"

    @patch.dict(os.environ, {"DISC_DATA_PATH": "   "})
    def test_blank_falls_back(self):
        assert get_data_path() == DEFAULT_DATA_PATH


class TestLogLevel:
    @patch.dict(os.environ, {}, clear=True)
    def test_default_info(self):
        assert get_log_level() == "INFO"

    @patch.dict(os.environ, {"DISC_LOG_LEVEL": "debug"})
    def test_case_insensitive(self):
        assert get_log_level() == "DEBUG"

    @patch.dict(os.environ, {"DISC_LOG_LEVEL": "loud"})
    def test_invalid_raises(self):
        with pytest.raises(ValueError, match="DISC_LOG_LEVEL"):
            get_log_level()


class TestAdminTeamCode:
    @patch.dict(os.environ, {}, clear=True)
    def test_unset(self):
        assert get_admin_team_code() is None

    @patch.dict(os.environ, {"DISC_ADMIN_TEAM_CODE": " hr-admin "})
    def test_normalised(self):
        assert get_admin_team_code() == "HR-ADMIN"


class TestDotenv:
    @patch.dict(os.environ, {}, clear=True)
    def test_env_file_feeds_settings(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "DISC_DATA_PATH=/srv/disc/from_env.json\nDISC_LOG_LEVEL=warning\nDISC_ADMIN_TEAM_CODE=ops\n",
            encoding="utf-8",
        )
        load_dotenv(env_file)
        assert get_data_path() == "/srv/disc/from_env.json"
        assert get_log_level() == "WARNING"
        assert get_admin_team_code() == "OPS"

    @patch.dict(os.environ, {"DISC_DATA_PATH": "/explicit.json"}, clear=True)
    def test_environment_wins_over_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("DISC_DATA_PATH=/from_file.json\n", encoding="utf-8")
        load_dotenv(env_file)
        assert get_data_path() == "/explicit.json"
