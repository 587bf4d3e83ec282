"""
Configuration management for the Matomo client.

Supports configuration via environment variables and .env files.
"""

from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResponseFormat(str, Enum):
    """Response formats understood by the Matomo API."""
    JSON = "json"
    XML = "xml"
    CSV = "csv"
    TSV = "tsv"
    HTML = "html"
    RSS = "rss"
    ORIGINAL = "original"


class MatomoConfig(BaseSettings):
    """
    Configuration settings for the Matomo client.

    All settings can be configured via environment variables with the MATOMO_ prefix
    (MATOMO_URL, MATOMO_AUTH_TOKEN, MATOMO_DEFAULT_SITE_ID, ...).
    """

    model_config = SettingsConfigDict(
        env_prefix="MATOMO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    url: Optional[str] = Field(
        default=None,
        description="Base URL of the Matomo instance, e.g. https://analytics.example.com"
    )
    auth_token: Optional[str] = Field(
        default=None,
        description="token_auth sent with every API call"
    )
    default_site_id: Optional[int] = Field(
        default=None,
        description="idSite added to calls that do not carry one"
    )

    # Request settings
    format: ResponseFormat = Field(
        default=ResponseFormat.JSON,
        description="Response format requested from the API"
    )
    language: Optional[str] = Field(
        default=None,
        description="Language code added to calls that do not carry one"
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout for a single API call"
    )
    security_mode: bool = Field(
        default=True,
        description="Send parameters in a POST body instead of the query string"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format"
    )

    @property
    def base_url(self) -> str:
        """Base URL without a trailing slash."""
        return (self.url or "").rstrip("/")

    @property
    def api_endpoint(self) -> str:
        """Full URL of the API entry point."""
        return f"{self.base_url}/index.php"


# Global config instance
_config: Optional[MatomoConfig] = None


def get_config() -> MatomoConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = MatomoConfig()
    return _config


def set_config(config: MatomoConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
