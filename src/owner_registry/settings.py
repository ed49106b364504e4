"""
owner_registry.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `OWNER_`), defaults suitable for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="OWNER_", case_sensitive=False)

    # dev/test create tables on startup; prod expects Alembic migrations.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "owner-registry"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./owners.db"
    sql_echo: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build `Settings(...)` directly and pass it to `create_app`; only the
# process entrypoint relies on the cached instance.
