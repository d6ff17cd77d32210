"""Mailgun client configuration with Pydantic v2.

Manages API credentials, endpoint and logging settings loaded from
environment variables or .env file.

All settings can be overridden via environment variables.

Author: Odiseo
Created: 2026-10-17
Version: 1.0.0
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mailgun_client.core.exceptions import MailgunConfigError


class MailgunConfig(BaseSettings):
    """Mailgun client configuration.

    Loads settings from environment variables and .env file using Pydantic v2.
    All settings are case-sensitive and strictly validated.

    Attributes:
        MAILGUN_API_KEY: Private API key used for basic auth ("api", key).
        MAILGUN_DOMAIN: Sending domain the domain-scoped endpoints act on.
        MAILGUN_BASE_URL: API root, including the version segment.
        MAILGUN_TIMEOUT: HTTP timeout in seconds.
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        LOG_TO_FILE: Whether to log to file.
        LOG_DIR: Directory for log files.
        LOG_MAX_SIZE_MB: Rotation threshold for log files.
        LOG_BACKUP_COUNT: Rotated files to keep.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ========================================================================
    # API Configuration
    # ========================================================================
    MAILGUN_API_KEY: str = Field(
        default="",
        description="Mailgun private API key",
    )
    MAILGUN_DOMAIN: str = Field(
        default="",
        description="Mailgun sending domain",
    )
    MAILGUN_BASE_URL: str = Field(
        default="https://api.mailgun.net/v3/",
        description="Mailgun API base URL",
    )
    MAILGUN_TIMEOUT: int = Field(
        default=30,
        ge=1,
        le=300,
        description="HTTP timeout in seconds",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================
    LOG_LEVEL: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        description="Whether to log to file",
    )
    LOG_DIR: str = Field(
        default="./logs",
        description="Directory for log files",
    )
    LOG_MAX_SIZE_MB: int = Field(
        default=10,
        gt=0,
        description="Maximum log file size in megabytes",
    )
    LOG_BACKUP_COUNT: int = Field(
        default=5,
        gt=0,
        description="Number of backup log files to keep",
    )

    @field_validator("MAILGUN_BASE_URL")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL and normalize its trailing slash.

        Args:
            v: Base URL to validate.

        Returns:
            Base URL ending with exactly one slash.

        Raises:
            ValueError: If URL is empty or not http(s).
        """
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("MAILGUN_BASE_URL must be an http(s) URL")
        return v.rstrip("/") + "/"

    @field_validator("MAILGUN_DOMAIN")
    @classmethod
    def validate_domain(cls, v: str) -> str:
        """Strip surrounding whitespace from the domain.

        Note: Domain can be empty during initialization,
        but will be validated later when needed.
        """
        return v.strip()

    def validate_client_config(self) -> None:
        """Validate complete API configuration.

        Ensures the settings needed to talk to Mailgun are present before
        a client is created.

        Raises:
            MailgunConfigError: If required settings are missing.
        """
        missing_fields = []

        if not self.MAILGUN_API_KEY or not self.MAILGUN_API_KEY.strip():
            missing_fields.append("MAILGUN_API_KEY")

        if not self.MAILGUN_DOMAIN:
            missing_fields.append("MAILGUN_DOMAIN")

        if missing_fields:
            raise MailgunConfigError(
                f"Required Mailgun settings missing: {', '.join(missing_fields)}. "
                f"Set these environment variables to enable API calls."
            )

    def get_client_config(self) -> dict[str, str | int]:
        """Get client configuration as dictionary.

        Returns:
            Dictionary suitable for MailgunClient initialization.
        """
        return {
            "api_key": self.MAILGUN_API_KEY,
            "domain": self.MAILGUN_DOMAIN,
            "base_url": self.MAILGUN_BASE_URL,
            "timeout": self.MAILGUN_TIMEOUT,
        }
