"""Configuration management using Pydantic Settings.

Loads configuration from environment variables with validation.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from RESULT_-prefixed environment variables."""

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Exception capture (of_throwable)
    log_captured_exceptions: bool = Field(
        default=True,
        description="Log exceptions captured by of_throwable at DEBUG level",
    )
    log_tracebacks: bool = Field(
        default=False,
        description="Attach the traceback (exc_info) when logging captured exceptions",
    )

    model_config = SettingsConfigDict(
        env_prefix="RESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get library settings (singleton).

    Cached because settings are read on every captured exception and should
    not hit the environment each time.

    Returns:
        Library settings
    """
    return Settings()
