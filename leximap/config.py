"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the service runs with no environment at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - No env prefix: PORT is the conventional override injected by hosting platforms
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_VERSION = "1.0.0"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 8787

    # Relation service (Datamuse-compatible)
    relation_base_url: str = "https://api.datamuse.com/words"
    relation_timeout_seconds: float = 5.0

    @field_validator("relation_timeout_seconds")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        """Outbound calls must be bounded — a zero/negative timeout is a config error."""
        if v <= 0:
            raise ValueError("relation_timeout_seconds must be > 0")
        return v

    # Lexical database
    wordnet_auto_download: bool = True

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
