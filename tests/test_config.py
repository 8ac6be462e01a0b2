"""Tests for configuration module."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

from eventcal.config import BUNDLED_EVENTS_FILE, Settings, get_settings


class TestSettings:
    """Tests for the Settings configuration class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_values(self) -> None:
        """Settings loads with sane defaults."""
        s = Settings(_env_file=None)
        assert s.eventcal_env == "development"
        assert s.eventcal_log_level == "INFO"
        assert s.eventcal_data_file == ""

    def test_data_file_defaults_to_bundled_sample(self, settings) -> None:
        """An empty data file setting falls back to the bundled CSV."""
        assert settings.data_file == BUNDLED_EVENTS_FILE
        assert settings.data_file.exists()

    def test_data_file_override(self, tmp_path: Path) -> None:
        """A configured data file is used as given."""
        target = tmp_path / "mine.csv"
        s = Settings(eventcal_data_file=str(target), _env_file=None)
        assert s.data_file == target

    @patch.dict(os.environ, {"EVENTCAL_LOG_LEVEL": "DEBUG", "EVENTCAL_ENV": "production"})
    def test_reads_environment(self) -> None:
        """Values come from EVENTCAL_* environment variables."""
        s = Settings(_env_file=None)
        assert s.eventcal_log_level == "DEBUG"
        assert s.eventcal_env == "production"

    def test_get_settings_singleton(self) -> None:
        """get_settings returns the same instance."""
        assert get_settings() is get_settings()
