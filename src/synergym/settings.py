"""Application settings loaded from environment variables.

Every variable is prefixed with ``SYNERGYM_`` and may also be placed in a
``.env`` file in the working directory.

Usage:
    from synergym.settings import get_settings

    settings = get_settings()
    print(settings.ai_coach_url)
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository-level data directory (next to src/)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"


class Settings(BaseSettings):
    """Runtime configuration for synergym."""

    model_config = SettingsConfigDict(
        env_prefix="SYNERGYM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------
    data_dir: Path = Field(
        default=DEFAULT_DATA_DIR,
        description="Directory holding the SQLite database file",
    )
    db_filename: str = Field(
        default="synergym.db",
        description="Database file name inside data_dir",
    )
    seed_path: Path | None = Field(
        default=None,
        description="Exercise seed JSON; the bundled file is used when unset",
    )

    # -------------------------------------------------------------------------
    # AI coach service
    # -------------------------------------------------------------------------
    ai_coach_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Base URL of the AI coach service",
    )
    ai_coach_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for one AI coach round trip",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Root log level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("ai_coach_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
