"""Centralized client settings using pydantic-settings.

This module provides a single source of truth for the client configuration
loaded from environment variables. Uses pydantic for automatic validation,
type coercion, and documentation.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from environment variables.

    Override any field via the environment variable named in its
    ``validation_alias``.
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Keycloak connection
    server_url: str = Field(
        default="http://localhost:8080",
        description="Base URL of the Keycloak server (without /admin)",
        validation_alias="KEYCLOAK_URL",
    )
    access_token: str = Field(
        default="",
        description="Bearer token presented on every admin request",
        validation_alias="KEYCLOAK_ACCESS_TOKEN",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates of the Keycloak server",
        validation_alias="KEYCLOAK_VERIFY_SSL",
    )
    request_timeout: float = Field(
        default=60.0,
        description="Transport timeout in seconds for each admin request",
        validation_alias="KEYCLOAK_REQUEST_TIMEOUT",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_logs: bool = Field(
        default=False,
        validation_alias="JSON_LOGS",
        description="Enable JSON formatted logging for structured log aggregation",
    )
    correlation_ids: bool = Field(
        default=True,
        validation_alias="CORRELATION_IDS",
        description="Enable correlation IDs in logs for request tracing",
    )


# Global settings instance - initialized once at module import
settings = Settings()
