"""Parser configuration with strict Pydantic settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Parser settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    command_prefix: str = Field(
        default="/",
        min_length=1,
        max_length=1,
        alias="SLASHPARSE_COMMAND_PREFIX",
    )
    max_sub_commands: int = Field(default=2, ge=0, alias="SLASHPARSE_MAX_SUB_COMMANDS")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached parser settings."""
    return Settings()
