"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Every setting has a default: the service runs with no environment at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - data_file is relative to the working directory unless given absolute
"""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    data_file: Path = Path("data/funds_data.json")

    @field_validator("data_file", mode="before")
    @classmethod
    def expand_user(cls, v):
        """Allow ~ in DATA_FILE."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    # API
    cors_origins: list[str] = ["*"]
    static_dir: str = "static"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
