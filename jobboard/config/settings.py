"""
JobBoard Configuration Module

Environment-based configuration with fail-fast validation.
All settings are loaded from JOBBOARD_* environment variables (or a
.env file) with sensible defaults.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings with validation."""

    model_config = SettingsConfigDict(
        env_prefix="JOBBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    # Network
    host: str = Field(
        default="0.0.0.0",
        description="Interface the listener binds to",
    )
    port: int = Field(
        default=5000,
        ge=0,
        le=65535,
        description="TCP port the listener binds to (0 picks a free port)",
    )
    backlog: int = Field(
        default=50,
        ge=1,
        description="Listen queue size",
    )
    accept_poll_interval: float = Field(
        default=0.5,
        gt=0,
        description="Seconds between checks of the running flag while idle",
    )
    encoding: str = Field(
        default="utf-8",
        description="Text encoding of wire lines",
    )

    # ID generation
    job_id_prefix: str = Field(
        default="JOB",
        min_length=1,
        description="Prefix of job posting IDs",
    )
    application_id_prefix: str = Field(
        default="APP",
        min_length=1,
        description="Prefix of application IDs",
    )
    job_seeker_id_prefix: str = Field(
        default="JS",
        min_length=1,
        description="Prefix of synthesized job seeker IDs",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


def get_settings() -> Settings:
    """
    Get validated settings instance.

    Raises:
        ValidationError: If settings are invalid.
    """
    return Settings()
