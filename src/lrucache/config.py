"""Configuration loading for lrucache."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CacheSettings(BaseSettings):
    """Runtime defaults derived from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LRUCACHE_",
        env_file=".env",
        extra="ignore",
    )

    default_capacity: int = Field(
        1000,
        ge=1,
        description="Capacity used when a cache is built without an explicit one",
    )
    minimum_capacity: int = Field(
        2,
        ge=1,
        description="Smallest capacity a cache accepts",
    )
    log_level: str = Field("INFO", description="Root log level used by configure_logging")
    log_format: Literal["json", "console"] = Field(
        "json",
        description="structlog renderer: JSON lines or human readable console output",
    )

    @model_validator(mode="after")
    def check_default_capacity(self) -> "CacheSettings":
        if self.default_capacity < self.minimum_capacity:
            raise ValueError(
                f"default_capacity ({self.default_capacity}) must be at least "
                f"minimum_capacity ({self.minimum_capacity})"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> CacheSettings:
    """Return cached settings instance."""

    return CacheSettings()  # type: ignore[call-arg]
