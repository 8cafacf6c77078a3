# src/moneyproblem/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across layers:
- Validation and parsing of text input
- Logging configuration
"""

from moneyproblem.shared.validators import (
    parse_currency,
    parse_decimals,
    parse_holding,
    parse_number,
    parse_rate,
    parse_rates,
    validate_currency_code,
)
from moneyproblem.shared.logging_conf import setup_logging

__all__ = [
    "parse_currency",
    "parse_decimals",
    "parse_holding",
    "parse_number",
    "parse_rate",
    "parse_rates",
    "validate_currency_code",
    "setup_logging",
]
