"""
petclinic_customers.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Toggle whether database credentials come from the secrets store.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PETCLINIC_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "petclinic-customers"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence. Replaced at startup when credentials come from Secrets Manager.
    database_url: str = "sqlite+aiosqlite:///./petclinic.db"

    # Secrets Manager
    use_secrets_manager: bool = False
    aws_region: str | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The secrets token itself (SECRETS_NAME) is read by `petclinic_customers.credentials`
# from the raw process environment, not through this model.
