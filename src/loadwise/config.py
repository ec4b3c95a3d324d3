"""Configuration settings for LoadWise."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables (LOADWISE_*).

    lactate_threshold_hr is used when deriving TSS for loaded and synthetic
    runs. RunRecord instances built directly always derive against
    DEFAULT_LACTATE_THRESHOLD_HR.
    """

    # Training stress
    lactate_threshold_hr: float = Field(default=165.0, gt=0)

    # Rolling windows (number of most recent sessions)
    acute_window: int = Field(default=7, ge=1)
    chronic_window: int = Field(default=42, ge=1)
    variability_window: int = Field(default=7, ge=1)

    # Logging
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_prefix="LOADWISE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
