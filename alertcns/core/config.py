"""Runtime configuration for the ALERT step-down tool."""
from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    app_title: str = Field(default="ALERT CNS Step-down Review", alias="APP_TITLE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    redact_logs: bool = Field(default=True, alias="REDACT_LOGS")

    # Content pack holding ADDS bands and plan boilerplate
    content_pack: str = Field(default="stepdown", alias="CONTENT_PACK")

    # Session storage key for the in-progress review
    session_key: str = Field(default="alertToolState_v_flag_v1", alias="SESSION_KEY")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> str:
        if value is None:
            return "INFO"
        name = str(value).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            return "INFO"
        return name

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
