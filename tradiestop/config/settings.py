"""
Configuration management for the TradieStop client.
"""

from decimal import Decimal
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TradieStopConfig(BaseSettings):
    """Configuration settings for the TradieStop client."""

    # Remote API Configuration
    api_base_url: str = Field(
        default="http://localhost:5001/api", alias="API_BASE_URL"
    )
    request_timeout: float = Field(default=10.0, gt=0, alias="REQUEST_TIMEOUT")

    # Session persistence
    session_file: Path = Field(
        default=Path.home() / ".tradiestop" / "session.json", alias="SESSION_FILE"
    )

    # Notifications
    notification_poll_interval: float = Field(
        default=15.0, gt=0, alias="NOTIFICATION_POLL_INTERVAL"
    )

    # Invoicing defaults
    default_tax_rate: Decimal = Field(
        default=Decimal("10"), ge=0, le=100, alias="DEFAULT_TAX_RATE"
    )
    invoice_due_days: int = Field(default=15, ge=0, alias="INVOICE_DUE_DAYS")
    currency_symbol: str = Field(default="$", alias="CURRENCY_SYMBOL")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Retry Configuration (read-only requests)
    max_retries: int = Field(default=3, ge=0, alias="MAX_RETRIES")
    retry_delay: float = Field(default=1.0, ge=0, alias="RETRY_DELAY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v):
        """Ensure the API base URL is absolute and has no trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("currency_symbol")
    @classmethod
    def validate_currency_symbol(cls, v):
        """Ensure the currency symbol is a short, non-numeric marker."""
        if not v or len(v) > 3 or any(ch.isdigit() for ch in v):
            raise ValueError("Currency symbol must be 1-3 non-digit characters")
        return v


def load_config(env_file: Optional[str] = None) -> TradieStopConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return TradieStopConfig()


# Global configuration instance
_config: Optional[TradieStopConfig] = None


def get_config() -> TradieStopConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> TradieStopConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
