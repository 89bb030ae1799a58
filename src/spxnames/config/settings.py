"""Pydantic Settings for spxnames CLI configuration."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with support for env vars and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(default=False, alias="DEBUG_MODE")
    locale: Literal["en", "zh"] = Field(default="en", alias="SPXNAMES_LOCALE")

    # Scope and reserved words used when no CLI flag is given (paths may use ~ and $VARS)
    project_file: Optional[str] = Field(default=None, alias="SPXNAMES_PROJECT")
    reserved_file: Optional[str] = Field(default=None, alias="SPXNAMES_RESERVED")


# Global settings instance (lazy-loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
