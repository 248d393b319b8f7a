from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment or defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    database_url: str = Field("sqlite:///./eventmarketers.db", alias="DATABASE_URL")
    jwt_secret: str = Field("change-me-in-production-0123456789abcdef", alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    jwt_ttl_minutes: int = Field(7 * 24 * 60, alias="JWT_TTL_MIN")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    auto_sync_interval_seconds: int = Field(0, alias="AUTO_SYNC_INTERVAL_SEC")
    default_mobile_language: str = Field("en", alias="MOBILE_DEFAULT_LANGUAGE")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value) -> str:
        if not value:
            return "INFO"
        value = str(value).strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            return "INFO"
        return value

    @field_validator("auto_sync_interval_seconds", mode="after")
    @classmethod
    def clamp_interval(cls, value: int) -> int:
        return max(value, 0)


@lru_cache
def get_settings() -> Settings:
    return Settings()
