"""Configuration management."""

from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="URN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Logging format (console or json)")

    # Map File Configuration
    comment_markers: str = Field(
        default=";#", description="Characters that start a line comment in the map file"
    )

    # Region Metadata Configuration
    default_priority: int = Field(
        default=60, ge=0, le=255, description="Map priority used when a region has no metadata"
    )
    default_color: Tuple[int, int, int] = Field(
        default=(0, 0, 0), description="Map color used when a region has no metadata"
    )
    strict_metadata: bool = Field(
        default=False, description="Fail the parse when a region has no metadata entry"
    )

    # Patch Configuration
    mod_key: str = Field(
        default="UniqueRegionNamesPatcher.esp", description="Plugin that receives new regions"
    )

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("console", "json"):
            raise ValueError(f"Unknown log format: {value}")
        return value

    @field_validator("default_color")
    @classmethod
    def _check_default_color(cls, value: Tuple[int, int, int]) -> Tuple[int, int, int]:
        if any(not 0 <= c <= 255 for c in value):
            raise ValueError(f"Color components must be within 0-255: {value}")
        return value


# Instantiate singleton settings object
settings = Settings()
