"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - adapter_backend is always lower-case after validation

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the in-memory backend needs no setup
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Adapter settings from RESOURCE_ADAPTERS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RESOURCE_ADAPTERS_", env_file=".env", case_sensitive=False,
    )

    # Storage
    adapter_backend: str = "memory"

    @field_validator("adapter_backend", mode="before")
    @classmethod
    def normalize_backend(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
