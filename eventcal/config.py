"""Centralized configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_EVENTS_FILE = Path(__file__).parent / "data" / "events.csv"


class Settings(BaseSettings):
    """Application-wide settings sourced from .env / environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── General ──────────────────────────────────────────────────────
    eventcal_env: str = "development"
    eventcal_log_level: str = "INFO"

    # ── Events source ────────────────────────────────────────────────
    eventcal_data_file: str = ""

    # ── Derived ──────────────────────────────────────────────────────
    @property
    def data_file(self) -> Path:
        """Return the events file to load, falling back to the bundled sample."""
        if self.eventcal_data_file:
            return Path(self.eventcal_data_file).expanduser()
        return BUNDLED_EVENTS_FILE


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
