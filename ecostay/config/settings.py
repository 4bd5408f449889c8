# ecostay/config/settings.py

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "ecostay-certification"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    version: str = "0.1.0"

    # --- Governance ---
    registry_owner: str = Field(..., min_length=1)
    certification_validity_blocks: int = Field(52560, gt=0)

    # --- Height source ---
    genesis_timestamp: int = Field(0, ge=0)
    block_interval_seconds: int = Field(600, gt=0)

    # --- Storage ---
    storage_backend: Literal["memory", "redis", "database"] = "memory"
    redis_url: Optional[str] = None
    redis_key_prefix: str = "ecostay:"
    database_url: Optional[str] = None

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
