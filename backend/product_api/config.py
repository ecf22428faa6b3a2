"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), single instance per process
    - Defaults reproduce the historical service: port 8080, seeded store, random ids

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works with no environment at all
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from product_api.core.domain_types import IdStrategy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Store
    seed_products: bool = True
    seed_file: str | None = None
    product_id_strategy: IdStrategy = IdStrategy.RANDOM

    @field_validator("seed_file", mode="before")
    @classmethod
    def blank_seed_file_is_none(cls, v: str | None) -> str | None:
        """SEED_FILE= (empty) means "use the built-in seed"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
