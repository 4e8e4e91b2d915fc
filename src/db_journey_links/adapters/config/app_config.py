"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")

    # Booking service configuration
    bahn_base_url: str = Field(
        default="https://www.bahn.de", description="Base URL of the DB booking service"
    )
    http_timeout_seconds: float = Field(
        default=10.0, description="Timeout for booking service requests in seconds"
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (compatible; db-journey-links)",
        description="User-Agent sent to the booking service",
    )

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=60,
        description="Maximum number of requests allowed per IP address per minute (0 disables)",
    )

    # Logging configuration
    log_level: str = Field(default="INFO", description="Root log level")
    log_requests: bool = Field(
        default=False, description="Log outgoing booking service requests"
    )

    @field_validator("bahn_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) base URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("bahn_base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("http_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("http_timeout_seconds must be positive")
        return v

    @field_validator("rate_limit_per_minute")
    @classmethod
    def validate_rate_limit(cls, v: int) -> int:
        """Validate rate limit is not negative."""
        if v < 0:
            raise ValueError("rate_limit_per_minute must not be negative")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level
