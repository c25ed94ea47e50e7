"""
Settings for the contract reminders service.

Values come from the environment (or a ``.env`` file). Storage options use
the ``STORAGE_`` prefix, e.g. ``STORAGE_DATA_DIR=/var/lib/reminders``.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.exceptions import ConfigurationError


class StorageSettings(BaseSettings):
    """Where and how the memo database is opened."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "reminders.db"
    pool_size: int = Field(default=5, ge=1)
    busy_timeout: int = Field(default=30000, ge=0, description="milliseconds")

    @field_validator("data_dir")
    @classmethod
    def usable_data_dir(cls, v: Path) -> Path:
        """The memo database directory is created up front so a bad path fails at startup."""
        if v.exists() and not v.is_dir():
            raise ConfigurationError("STORAGE_DATA_DIR", f"{v} is not a directory")
        try:
            v.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError("STORAGE_DATA_DIR", f"cannot create {v}: {e}") from e
        return v

    @field_validator("db_name")
    @classmethod
    def plain_file_name(cls, v: str) -> str:
        if not v or Path(v).name != v:
            raise ConfigurationError("STORAGE_DB_NAME", f"{v!r} must be a bare file name")
        return v

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Contract Reminders"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    storage: StorageSettings = Field(default_factory=StorageSettings)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Load settings once per process."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Forget loaded settings so the next call re-reads the environment."""
    global _settings
    _settings = None
