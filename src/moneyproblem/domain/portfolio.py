# src/moneyproblem/domain/portfolio.py
"""
Portfolio - Collection of Money Evaluated in One Currency

Evaluation converts every holding, then either sums them or reports every
missing exchange rate at once so the bank can be fixed in a single pass.

Files that USE this module:
- moneyproblem.application.* (portfolio use cases)
- moneyproblem.adapters.persistence.in_memory (stores the current portfolio)

Files that this module USES:
- moneyproblem.domain.bank (Bank.convert)
- moneyproblem.domain.models (Currency, Money)
- moneyproblem.domain.errors (missing_exchange_rates)
- moneyproblem.domain.result (Ok, Err, Result)
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Iterator, Tuple

from moneyproblem.domain.bank import Bank
from moneyproblem.domain.errors import Error, missing_exchange_rates
from moneyproblem.domain.models import Currency, Money
from moneyproblem.domain.result import Err, Ok, Result


@dataclass(frozen=True)
class Portfolio:
    """Immutable, ordered collection of money."""
    moneys: Tuple[Money, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable (lists in particular) but store a tuple
        object.__setattr__(self, "moneys", tuple(self.moneys))

    @classmethod
    def of(cls, *moneys: Money) -> "Portfolio":
        return cls(moneys)

    def add(self, money: Money) -> "Portfolio":
        return Portfolio(self.moneys + (money,))

    def currencies(self) -> Tuple[Currency, ...]:
        """Distinct currencies held, in first-seen order."""
        return tuple(dict.fromkeys(money.currency for money in self.moneys))

    def evaluate(self, bank: Bank, to: Currency) -> Result[Money, Error]:
        """
        Express the whole portfolio in one currency.

        Args:
            bank: Bank used for every conversion
            to: Target currency

        Returns:
            Ok(total) or Err listing every distinct missing rate
        """
        conversions = [bank.convert(money, to) for money in self.moneys]
        failures = [result.error for result in conversions if result.is_err()]
        if failures:
            return Err(missing_exchange_rates(failures))

        return Ok(_sum(to, (result.value for result in conversions)))

    def __iter__(self) -> Iterator[Money]:
        return iter(self.moneys)

    def __len__(self) -> int:
        return len(self.moneys)


def _sum(currency: Currency, moneys: Iterable[Money]) -> Money:
    return reduce(Money.add, moneys, Money.zero(currency))
