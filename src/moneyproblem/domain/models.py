# src/moneyproblem/domain/models.py
"""
Domain Models - Currency, Money and Exchange Rates

This module contains the value types the conversion engine works on:
- Currency: closed set of supported codes
- Money: an amount in one currency
- ExchangeRate: "1 unit of pivot currency = rate units of target currency"

Files that USE this module:
- moneyproblem.domain.bank (Bank stores ExchangeRate and converts Money)
- moneyproblem.domain.portfolio (Portfolio holds Money)
- moneyproblem.application.* (commands and results carry currencies)
- moneyproblem.config.settings (pivot and target currencies)
- tests.* (tests build money and rates)

Files that this module USES:
- moneyproblem.domain.errors (CurrencyMismatchError, InvalidMoneyError, UnknownCurrencyError)
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from moneyproblem.domain.errors import (
    CurrencyMismatchError,
    InvalidMoneyError,
    UnknownCurrencyError,
)


class Currency(Enum):
    """Supported currency codes."""
    EUR = "EUR"
    USD = "USD"
    KRW = "KRW"
    GBP = "GBP"
    JPY = "JPY"
    CHF = "CHF"
    CAD = "CAD"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        """
        Look up a currency by its code (case-insensitive).

        Raises:
            UnknownCurrencyError: If the code is not supported
        """
        normalized = (code or "").strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise UnknownCurrencyError(f"Unsupported currency: {code!r}") from None


@dataclass(frozen=True)
class Money:
    """
    An amount of money in a single currency.

    Attributes:
        amount: Any finite number, negative values represent debts
        currency: Currency the amount is expressed in
    """
    amount: float
    currency: Currency

    def __post_init__(self) -> None:
        if not math.isfinite(self.amount):
            raise InvalidMoneyError(f"Money amount must be finite, got {self.amount!r}")

    @classmethod
    def zero(cls, currency: Currency) -> "Money":
        return cls(0.0, currency)

    def add(self, other: "Money") -> "Money":
        """
        Add money expressed in the same currency.

        Raises:
            CurrencyMismatchError: If the currencies differ
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot add {other.currency} to {self.currency}, convert first"
            )
        return Money(self.amount + other.amount, self.currency)

    def times(self, factor: float) -> "Money":
        return Money(self.amount * factor, self.currency)

    def negate(self) -> "Money":
        return Money(-self.amount, self.currency)

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __neg__(self) -> "Money":
        return self.negate()

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"


@dataclass(frozen=True)
class ExchangeRate:
    """
    Rate from the bank's pivot currency to ``to``.

    No validation happens here; ``Bank.add`` rejects invalid rates.
    """
    rate: float
    to: Currency
