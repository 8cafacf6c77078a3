# src/moneyproblem/domain/__init__.py
"""
Domain Layer - Pure Business Objects

This package contains the conversion engine: value types, the Bank, the
Portfolio and the error/result values they return.
No dependencies on infrastructure or external systems.
"""

from moneyproblem.domain.models import Currency, ExchangeRate, Money
from moneyproblem.domain.bank import Bank
from moneyproblem.domain.portfolio import Portfolio
from moneyproblem.domain.result import Err, Ok, Result
from moneyproblem.domain.errors import (
    CurrencyMismatchError,
    DomainError,
    Error,
    InvalidMoneyError,
    UnknownCurrencyError,
    UnwrapError,
    invalid_rate,
    missing_exchange_rate,
    missing_exchange_rates,
    no_bank_defined,
)

__all__ = [
    "Currency",
    "Money",
    "ExchangeRate",
    "Bank",
    "Portfolio",
    "Ok",
    "Err",
    "Result",
    "Error",
    "DomainError",
    "CurrencyMismatchError",
    "InvalidMoneyError",
    "UnknownCurrencyError",
    "UnwrapError",
    "invalid_rate",
    "missing_exchange_rate",
    "missing_exchange_rates",
    "no_bank_defined",
]
