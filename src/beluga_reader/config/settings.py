"""Configuration management using pydantic-settings.

Supports environment variables (BELUGA_ prefix) and .env file loading.
Only the command line entry point reads settings; the client and session
take explicit constructor arguments.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from beluga_reader.utils.http_client import DEFAULT_USER_AGENT


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BELUGA_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    # Instance loaded when no URL is given
    default_instance_url: str = Field(
        default="https://beluga.gcollazo.com",
        description="Instance URL without trailing slash",
    )

    # HTTP
    http_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds (unset keeps the httpx default)",
    )
    user_agent: str = DEFAULT_USER_AGENT
    follow_redirects: bool = True


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
