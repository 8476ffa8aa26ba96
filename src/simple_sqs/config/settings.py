"""
Module: settings.py
Description: Library configuration using pydantic-settings.

Loads defaults for queue clients from SIMPLE_SQS_* environment variables
with validation. Supports .env files for local development.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SIMPLE_SQS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Queue settings
    aws_region: str = Field(default="us-east-1", description="AWS region of the queue")
    queue_name: Optional[str] = Field(
        default=None,
        description="Name of the SQS queue"
    )
    visibility_timeout_seconds: int = Field(
        default=30,
        description="Seconds a received message stays hidden from other receivers"
    )

    # Receive settings
    receive_wait_seconds: int = Field(
        default=20,
        ge=0,
        le=20,
        description="Long-poll wait time for receive calls"
    )

    # Purge settings
    purge_poll_interval_seconds: float = Field(
        default=0.05,
        gt=0,
        description="Delay between queue length checks while waiting for a purge"
    )
    purge_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Maximum seconds to wait for a purge to drain the queue (unbounded if unset)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()


# Global settings instance
settings = Settings()
