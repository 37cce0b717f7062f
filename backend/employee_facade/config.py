"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Upstream base URL never ends with "/" (path joining adds exactly one)
    - employee_api_max_attempts is at least 1
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults match the local mock employee server: works out-of-the-box
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Upstream employee API
    employee_api_base_url: str = "http://localhost:8112/api/v1/employee"
    employee_api_max_attempts: int = 3
    employee_api_initial_backoff_ms: int = 250
    employee_api_connect_timeout_seconds: float = 2.0
    employee_api_read_timeout_seconds: float = 4.0

    @field_validator("employee_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("employee_api_max_attempts")
    @classmethod
    def clamp_max_attempts(cls, v: int) -> int:
        """Zero or negative would mean no call at all; one attempt is the floor."""
        return max(1, v)

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
