# src/moneyproblem/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or a ``.env`` file.

Files that USE this module:
- moneyproblem.app (pivot, rates, target currency, display and logging settings)

Files that this module USES:
- moneyproblem.domain (Currency, ExchangeRate)
- moneyproblem.shared.validators (parse_rates for EXCHANGE_RATES)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import List, Optional  # Type hints for lists and optional values

from pydantic import Field, field_validator, model_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from moneyproblem.domain import Currency, ExchangeRate
from moneyproblem.shared.validators import MAX_DECIMALS, parse_rates


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Bank ---
    pivot_currency: Currency = Field(default=Currency.EUR, alias="PIVOT_CURRENCY")
    # e.g. "USD=1.2,KRW=1344" (use ";" as separator when rates contain thousands commas)
    exchange_rates: str = Field(default="", alias="EXCHANGE_RATES")

    # --- Evaluation ---
    target_currency: Currency = Field(default=Currency.USD, alias="TARGET_CURRENCY")
    display_decimals: int = Field(default=2, alias="DISPLAY_DECIMALS", ge=0, le=MAX_DECIMALS)

    # --- Logging ---
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_stdout: bool = Field(default=False, alias="MONEYPROBLEM_LOG_STDOUT")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @property
    def exchange_rate_list(self) -> List[ExchangeRate]:
        """Configured exchange rates, in declaration order."""
        return parse_rates(self.exchange_rates)

    @field_validator("pivot_currency", "target_currency", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        """Accept lower-case codes."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("exchange_rates")
    @classmethod
    def validate_exchange_rates(cls, v: str) -> str:
        """Validate EXCHANGE_RATES format."""
        parse_rates(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        v = v.upper()
        if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            raise ValueError("LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v

    @model_validator(mode="after")
    def check_pivot_rates(self) -> "Settings":
        """The pivot currency cannot have a rate of its own."""
        for rate in parse_rates(self.exchange_rates):
            if rate.to == self.pivot_currency:
                raise ValueError(f"EXCHANGE_RATES cannot contain the pivot currency {rate.to}")
        return self


# Global settings instance
settings = Settings()
