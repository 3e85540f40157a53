"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache), single instance per process
    - api_key is required and non-empty; the process refuses to start without it

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Settings injected with Depends(get_settings): the access guard never reads
      the environment per request
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "customer_api"
    mongodb_collection: str = "customer"
    mongodb_timeout_ms: int = 5000

    # Shared secret for PATCH/DELETE (x-api-key header)
    api_key: str

    @field_validator("api_key")
    @classmethod
    def api_key_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("API_KEY must not be empty")
        return v

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
