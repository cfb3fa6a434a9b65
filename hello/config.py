"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden with a HELLO_-prefixed environment variable
    - get_settings() is cached (lru_cache) - single instance per process
    - property_name_timeout_seconds is strictly positive

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: runs out-of-the-box with no environment
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HELLO_", env_file=".env", case_sensitive=False,
    )

    # Shell
    display_consumer: str = "console"
    property_name_timeout_seconds: float = 10.0

    # Formatting
    culture: Literal["current", "invariant"] = "current"

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    @field_validator("property_name_timeout_seconds")
    @classmethod
    def require_positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("property_name_timeout_seconds must be > 0")
        return v

    @field_validator("display_consumer", mode="before")
    @classmethod
    def normalize_display_consumer(cls, v: str) -> str:
        """Consumer names are matched case-insensitively."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
