"""Settings for the central search client.

Values are read from environment variables prefixed with ``CENTRAL_SEARCH_``
or from a local ``.env`` file.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CENTRAL_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="https://search.maven.org", description="Base URL of the search service"
    )
    select_path: str = Field(
        default="/solrsearch/select", description="Path of the select handler"
    )
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached client settings."""
    return Settings()


def configure_logging(log_level: str | None = None) -> None:
    """Configure logging for applications embedding the client.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR); defaults to
            the configured ``log_level`` setting
    """
    log_level = log_level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
