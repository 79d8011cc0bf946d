"""Configuration settings for the HTTP API helper.

This module defines environment-driven defaults used when a
:class:`~http_api_helper.models.RequestConfig` does not set a value
explicitly: release mode, default timeout, logging level and the
connectivity probe target. Settings are loaded from environment
variables prefixed with ``HTTP_API_HELPER_`` and from ``.env`` files.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    :param release_mode: Suppress all diagnostic logging
    :type release_mode: bool
    :param log_level: Logging level for the application
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    :param default_timeout_seconds: Timeout applied to requests when the
                                    request config does not set one
    :type default_timeout_seconds: int
    :param connectivity_host: Host resolved to decide network reachability
    :type connectivity_host: str
    :param connectivity_port: Port used for the reachability lookup
    :type connectivity_port: int
    :param connectivity_timeout_seconds: Upper bound for the lookup
    :type connectivity_timeout_seconds: float
    """

    model_config = SettingsConfigDict(
        env_prefix="HTTP_API_HELPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )

    release_mode: bool = Field(
        False, description="Suppress all request/response diagnostics"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    # Requests
    default_timeout_seconds: int = Field(
        60, description="Default request timeout in seconds"
    )

    # Connectivity probe
    connectivity_host: str = Field(
        "google.com", description="Host looked up to check reachability"
    )
    connectivity_port: int = Field(443, description="Port for the lookup")
    connectivity_timeout_seconds: float = Field(
        5.0, description="Reachability lookup timeout in seconds"
    )

    @field_validator("default_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Reject non-positive timeouts.

        :param v: Configured timeout
        :type v: int
        :return: The timeout unchanged
        :rtype: int
        :raises ValueError: If the timeout is zero or negative
        """
        if v <= 0:
            raise ValueError("default_timeout_seconds must be positive")
        return v


def get_settings() -> Settings:
    """Read settings from the current environment.

    Unlike the module-level :data:`settings` instance this reflects
    environment changes made after import.

    :return: Freshly loaded settings
    :rtype: Settings
    """
    return Settings()


settings = Settings()
"""Global settings instance, loaded once at import time."""
