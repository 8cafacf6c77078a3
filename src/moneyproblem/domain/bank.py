# src/moneyproblem/domain/bank.py
"""
Bank - Pivot-Centred Exchange Rate Table

A Bank holds one rate per non-pivot currency, each read as
"1 pivot = rate target". Conversions between two non-pivot currencies go
through the pivot (two hops); no other path is ever searched.

Banks are immutable: ``add`` returns a new Bank and leaves the receiver alone.

Files that USE this module:
- moneyproblem.domain.portfolio (Portfolio.evaluate converts through a Bank)
- moneyproblem.application.* (use cases create, extend and read banks)
- moneyproblem.adapters.persistence.in_memory (stores the current bank)

Files that this module USES:
- moneyproblem.domain.models (Currency, Money, ExchangeRate)
- moneyproblem.domain.errors (Error factories)
- moneyproblem.domain.result (Ok, Err, Result)
"""
from __future__ import annotations

import math
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from moneyproblem.domain.errors import Error, invalid_rate, missing_exchange_rate
from moneyproblem.domain.models import Currency, ExchangeRate, Money
from moneyproblem.domain.result import Err, Ok, Result


class Bank:
    """Immutable exchange rate table around a pivot currency."""

    __slots__ = ("_pivot", "_rates")

    def __init__(self, pivot: Currency, rates: Optional[Mapping[Currency, ExchangeRate]] = None):
        """
        Prefer ``Bank.with_pivot_currency`` and ``add``, which validate rates.

        Args:
            pivot: Currency every stored rate is expressed from
            rates: Rates keyed by target currency (copied)
        """
        self._pivot = pivot
        self._rates: Mapping[Currency, ExchangeRate] = MappingProxyType(dict(rates or {}))

    @classmethod
    def with_pivot_currency(cls, pivot: Currency) -> "Bank":
        return cls(pivot)

    @property
    def pivot(self) -> Currency:
        return self._pivot

    @property
    def rates(self) -> Mapping[Currency, ExchangeRate]:
        """Read-only view of the rate table."""
        return self._rates

    def rate_for(self, currency: Currency) -> Optional[ExchangeRate]:
        return self._rates.get(currency)

    def currencies(self) -> Tuple[Currency, ...]:
        """Pivot first, then every currency with a registered rate."""
        return (self._pivot, *self._rates.keys())

    def add(self, rate: ExchangeRate) -> Result[Bank, Error]:
        """
        Register (or replace) the rate for ``rate.to``.

        Args:
            rate: Rate from the pivot to another currency

        Returns:
            Ok(new Bank) or Err when the rate is not strictly positive and
            finite, or targets the pivot currency
        """
        # bool is an int subclass but never a rate
        numeric = isinstance(rate.rate, (int, float)) and not isinstance(rate.rate, bool)
        if not numeric or not math.isfinite(rate.rate):
            return Err(invalid_rate(f"rate to {rate.to} must be a finite number, got {rate.rate!r}"))
        if rate.rate <= 0:
            return Err(invalid_rate(f"rate to {rate.to} must be greater than 0, got {rate.rate!r}"))
        if rate.to == self._pivot:
            return Err(invalid_rate(f"cannot add a rate for the pivot currency {self._pivot}"))

        rates: Dict[Currency, ExchangeRate] = dict(self._rates)
        rates[rate.to] = rate
        return Ok(Bank(self._pivot, rates))

    def convert(self, money: Money, to: Currency) -> Result[Money, Error]:
        """
        Convert money into ``to`` through the pivot currency.

        Args:
            money: Money to convert
            to: Target currency

        Returns:
            Ok(converted money) or Err naming every missing leg
        """
        if money.currency == to:
            return Ok(money)
        if money.currency == self._pivot:
            return self._from_pivot(money.amount, to)
        if to == self._pivot:
            return self._to_pivot(money)

        to_pivot = self._to_pivot(money)
        from_pivot = self._from_pivot(1.0, to)
        if to_pivot.is_err() or from_pivot.is_err():
            return Err(Error.combine(
                result.error for result in (to_pivot, from_pivot) if result.is_err()
            ))
        return self._from_pivot(to_pivot.value.amount, to)

    def _from_pivot(self, amount: float, to: Currency) -> Result[Money, Error]:
        rate = self._rates.get(to)
        if rate is None:
            return Err(missing_exchange_rate(self._pivot, to))
        return Ok(Money(amount * rate.rate, to))

    def _to_pivot(self, money: Money) -> Result[Money, Error]:
        rate = self._rates.get(money.currency)
        if rate is None:
            return Err(missing_exchange_rate(money.currency, self._pivot))
        return Ok(Money(money.amount * (1 / rate.rate), self._pivot))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bank):
            return NotImplemented
        return self._pivot == other._pivot and dict(self._rates) == dict(other._rates)

    def __hash__(self) -> int:
        return hash((self._pivot, frozenset(self._rates.items())))

    def __repr__(self) -> str:
        rates = ", ".join(f"{c}={r.rate}" for c, r in self._rates.items())
        return f"Bank(pivot={self._pivot}, rates={{{rates}}})"
