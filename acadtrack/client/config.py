"""Client configuration, read from ACADTRACK_* environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Where the API lives and where the session is persisted."""

    model_config = SettingsConfigDict(
        env_prefix="ACADTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    API_URL: str = "http://localhost:5000"
    API_PREFIX: str = "/api"
    SESSION_FILE: Path = Path.home() / ".acadtrack" / "session.json"
    # When False, AuthContext.initialize() discards any persisted session
    HYDRATE_SESSION: bool = True

    @field_validator("API_URL")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("API_URL must be set and non-empty")
        s = v.strip().lower()
        if not (s.startswith("http://") or s.startswith("https://")):
            raise ValueError("API_URL must use http or https (e.g. http://localhost:5000)")
        return v.strip().rstrip("/")

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        return v.strip().rstrip("/")


@lru_cache
def get_client_settings() -> ClientSettings:
    """Return cached client settings."""
    return ClientSettings()
