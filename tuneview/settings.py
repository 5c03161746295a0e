from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the tuneview client state.

    Values are loaded from environment variables and `.env`.

    Notes:
    - TUNEVIEW_THEME names one of the built-in themes; unknown names fall back
      to the default theme at startup.
    - Logs go to TUNEVIEW_LOG_DIR, resolved against the project root when relative.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Appearance
    TUNEVIEW_THEME: str = Field(default="default")

    # Logging (diagnostic; never written into the terminal UI itself)
    TUNEVIEW_LOG_DIR: Path = Field(default=Path("_logs"))
    TUNEVIEW_LOG_LEVEL: str = Field(default="INFO")
    # Timed rotation retention count (days). Old log files are auto-deleted.
    TUNEVIEW_LOG_BACKUP_COUNT: int = Field(default=14)


def load_settings() -> Settings:
    s = Settings()
    s.TUNEVIEW_THEME = (s.TUNEVIEW_THEME or "default").strip() or "default"
    return s
