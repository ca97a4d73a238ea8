"""Settings for tenant capability probing"""
import logging
from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Capability probe settings, read from the process environment"""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file")

    # Probe behaviour
    disable_platform_cache: bool = Field(
        default=False,
        description="Force the platform cache check to report unavailable"
    )
    memoize_currency_probe: bool = Field(
        default=False,
        description="Cache the advanced multi-currency answer for the context lifetime"
    )
    modern_theme_identifier: str = Field(
        default="Theme4",
        description="UI theme substring that marks the modern theme"
    )
    local_partition_namespace: str = Field(
        default="local",
        description="Scope prefix for cache partitions without a namespace"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('modern_theme_identifier', 'local_partition_namespace')
    @classmethod
    def validate_not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator('log_file')
    @classmethod
    def ensure_log_directory(cls, v):
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v
