"""
Shared configuration management for the App Registry Gateway.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GATEWAY_",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Backend application registry
    backend_base_url: str = Field(default="http://localhost:3000")
    backend_timeout_seconds: float = Field(default=10.0, gt=0)
    backend_connect_timeout_seconds: float = Field(default=5.0, gt=0)

    # Response used when the backend cannot be reached
    fallback_status_code: int = Field(default=503)

    # Gateway metadata
    service_display_name: str = Field(default="App Registry Gateway")
    service_version: str = Field(default="1.0.0")

    # CORS
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("backend_base_url")
    @classmethod
    def _check_backend_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("backend_base_url must be an http(s) URL")
        return value.rstrip("/")

    @field_validator("fallback_status_code")
    @classmethod
    def _check_fallback_status_code(cls, value: int) -> int:
        # The fallback carries a JSON body, so bodiless statuses are rejected
        if not 200 <= value <= 599 or value in (204, 304):
            raise ValueError("fallback_status_code must be an HTTP status that allows a body")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.lower()


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"

    def __init__(self, service_name: str, port: int, **kwargs):
        super().__init__(service_name=service_name, port=port, **kwargs)


def get_config(service_name: str, port: int, **overrides) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port, **overrides)
