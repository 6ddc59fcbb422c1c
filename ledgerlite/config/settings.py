"""
Configuration Management for LedgerLite

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
With no environment set, the defaults reproduce the plain
"expense.txt in the working directory" behavior.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Flat-file storage configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGERLITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_file: Path = Field(
        default=Path("expense.txt"),
        description="Path to the backing file holding all expenses"
    )
    file_encoding: str = Field(
        default="utf-8",
        description="Text encoding of the backing file"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEDGERLITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Add policy
    reject_invalid_entries: bool = Field(
        default=True,
        description="Refuse to save an expense that fails validation "
                    "(False = print warnings and save anyway)"
    )

    # Display
    newest_first: bool = Field(
        default=False,
        description="Show the expense table with the most recent date first"
    )
    currency_symbol: str = Field(
        default="$",
        max_length=3,
        description="Symbol printed in front of amounts"
    )


class LoggingSettings(BaseSettings):
    """Structured logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGERLITE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    log_level: str = Field(
        default="WARNING",
        description="Minimum level for log output"
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Write logs to this file instead of stderr"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept the standard logging level names."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return v.upper()


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()

    @property
    def logging(self) -> LoggingSettings:
        return LoggingSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
