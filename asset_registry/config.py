"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - max_owned >= 1 (owner index capacity)
    - randomness_seed is valid hex (the beacon seed)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box against local SQLite
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./registry.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql://, asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    create_schema_on_startup: bool = True

    # Registry
    max_owned: int = Field(default=100, ge=1)

    # Deterministic collaborators
    randomness_seed: str = "00" * 32
    genesis_timestamp_ms: int = Field(default=0, ge=0)
    block_time_ms: int = Field(default=6_000, gt=0)
    event_log_size: int = Field(default=1_000, ge=1)

    @field_validator("randomness_seed")
    @classmethod
    def check_seed_is_hex(cls, v: str) -> str:
        bytes.fromhex(v)  # ValueError surfaces as a settings validation error
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
