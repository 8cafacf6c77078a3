# src/moneyproblem/shared/validators.py
"""
Input Validation Utilities - Parsing Configuration and Command Line Input

This module validates and parses the text forms of currencies, exchange
rates and holdings used in environment variables and command line arguments.

Files that USE this module:
- moneyproblem.config.settings (EXCHANGE_RATES field validator)
- moneyproblem.app (parses --rate options, holdings and --decimals)

Files that this module USES:
- moneyproblem.domain (Currency, ExchangeRate, Money)
"""
import math
import re
from typing import List

from moneyproblem.domain import Currency, ExchangeRate, Money, UnknownCurrencyError

_RATE_PATTERN = re.compile(r'^\s*([A-Za-z]{3})\s*=\s*([^\s=]+)\s*$')
_HOLDING_PATTERN = re.compile(r'^\s*([^\s:]+)\s*:\s*([A-Za-z]{3})\s*$')
_GROUPED_PATTERN = re.compile(r'^[+-]?\d{1,3}(,\d{3})+(\.\d*)?$')

MAX_DECIMALS = 10


def validate_currency_code(code: str) -> bool:
    """
    Validate a currency code against the supported currencies.

    Args:
        code: Currency code, any case

    Returns:
        True if supported, False otherwise
    """
    try:
        Currency.from_code(code)
        return True
    except UnknownCurrencyError:
        return False


def parse_number(value: str) -> float:
    """
    Parse a finite number, allowing "_" or "," as thousands separators.

    Commas must group digits by three ("1,344.5"); "1,5" is rejected rather
    than read as a decimal comma.

    Raises:
        ValueError: If the value is not a finite number
    """
    text = str(value).strip()
    if "," in text:
        if not _GROUPED_PATTERN.match(text):
            raise ValueError(f"Invalid thousands separators: {value!r}")
        text = text.replace(",", "")
    try:
        number = float(text.replace("_", ""))
    except ValueError:
        raise ValueError(f"Invalid number: {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"Number must be finite: {value!r}")
    return number


def parse_decimals(value: str) -> int:
    """
    Parse a display precision between 0 and MAX_DECIMALS.

    Raises:
        ValueError: If the value is not an integer in range
    """
    try:
        decimals = int(value)
    except ValueError:
        raise ValueError(f"Invalid number of decimals: {value!r}") from None
    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueError(f"Decimals must be between 0 and {MAX_DECIMALS}, got {decimals}")
    return decimals


def parse_currency(code: str) -> Currency:
    """
    Raises:
        ValueError: If the code is not a supported currency
    """
    try:
        return Currency.from_code(code)
    except UnknownCurrencyError as e:
        raise ValueError(str(e)) from None


def parse_rate(spec: str) -> ExchangeRate:
    """
    Parse "CUR=RATE" (e.g. "USD=1.2") into an exchange rate.

    Positivity is left to the bank, which rejects invalid rates.

    Raises:
        ValueError: If the format, currency or number is invalid
    """
    match = _RATE_PATTERN.match(spec or "")
    if not match:
        raise ValueError(f"Invalid exchange rate {spec!r}, expected CUR=RATE")
    return ExchangeRate(parse_number(match.group(2)), parse_currency(match.group(1)))


def parse_rates(specs: str) -> List[ExchangeRate]:
    """Parse a comma/semicolon separated list such as "USD=1.2;KRW=1344"."""
    if not specs or specs.isspace():
        return []
    separator = ";" if ";" in specs else ","
    return [parse_rate(spec) for spec in specs.split(separator) if spec.strip()]


def parse_holding(spec: str) -> Money:
    """
    Parse "AMOUNT:CUR" (e.g. "-5.5:USD") into money.

    Raises:
        ValueError: If the format, currency or amount is invalid
    """
    match = _HOLDING_PATTERN.match(spec or "")
    if not match:
        raise ValueError(f"Invalid holding {spec!r}, expected AMOUNT:CUR")
    return Money(parse_number(match.group(1)), parse_currency(match.group(2)))
