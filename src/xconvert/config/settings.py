"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a local .env file.

Files that USE this module:
- xconvert.app (logging options and window defaults)
- xconvert.adapters.providers.exchangerate_api (API key, base URL, timeout)

Files that this module USES:
- xconvert.shared.validators (currency code validation)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from xconvert.shared.validators import validate_currency_code


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- ExchangeRate-API ---
    # Left empty on purpose: the fetcher refuses to run until a key is set
    api_key: str = Field(default="", alias="EXCHANGERATE_API_KEY")
    base_url: str = Field(
        default="https://v6.exchangerate-api.com/v6", alias="EXCHANGERATE_BASE_URL"
    )

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Window defaults ---
    default_from_currency: str = Field(default="USD", alias="DEFAULT_FROM_CURRENCY")
    default_to_currency: str = Field(default="EUR", alias="DEFAULT_TO_CURRENCY")
    default_amount: str = Field(default="1.00", alias="DEFAULT_AMOUNT")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=True, alias="XCONVERT_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be joined with '/'."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("EXCHANGERATE_BASE_URL must be an http(s) URL")
        return v

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        return v.strip()

    @field_validator("default_from_currency", "default_to_currency")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        """Validate default currency selections."""
        v = v.strip().upper()
        if not validate_currency_code(v):
            raise ValueError("Default currencies must be 3-letter codes")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be a standard logging level name")
        return v


# Global settings instance
settings = Settings()
