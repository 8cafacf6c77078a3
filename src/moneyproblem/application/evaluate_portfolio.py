# src/moneyproblem/application/evaluate_portfolio.py
"""
Evaluate Portfolio - Use Case

Fetches the current bank and portfolio, evaluates the portfolio in the
requested currency and maps the outcome to an ``EvaluationResult`` or a
``UseCaseError`` carrying the domain error's message.

Files that USE this module:
- moneyproblem.app (command line evaluation)
- tests.test_use_cases (unit tests)

Files that this module USES:
- moneyproblem.application.ports (BankRepository, PortfolioRepository)
- moneyproblem.application.common (UseCaseError)
- moneyproblem.domain (Bank, Currency, Money, results and errors)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from moneyproblem.application.common import UseCaseError
from moneyproblem.application.ports import BankRepository, PortfolioRepository
from moneyproblem.domain import (
    Bank,
    Currency,
    Err,
    Error,
    Money,
    Ok,
    Result,
    no_bank_defined,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluatePortfolio:
    currency: Currency


@dataclass(frozen=True)
class EvaluationResult:
    amount: float
    currency: Currency


class EvaluatePortfolioUseCase:
    """Evaluate the stored portfolio with the stored bank."""

    def __init__(self, bank_repository: BankRepository, portfolio_repository: PortfolioRepository):
        self.bank_repository = bank_repository
        self.portfolio_repository = portfolio_repository

    def invoke(self, command: EvaluatePortfolio) -> Result[EvaluationResult, UseCaseError]:
        bank = self.bank_repository.get_bank()
        bank_result: Result[Bank, Error] = Err(no_bank_defined()) if bank is None else Ok(bank)

        result = (
            bank_result
            .flat_map(lambda b: self._evaluate(b, command))
            .map(_to_result)
            .map_err(UseCaseError.from_error)
        )

        if result.is_ok():
            logger.info("Portfolio evaluated to %s %s", result.value.amount, result.value.currency)
        else:
            logger.warning("Portfolio evaluation in %s failed: %s", command.currency, result.error.message)
        return result

    def _evaluate(self, bank: Bank, command: EvaluatePortfolio) -> Result[Money, Error]:
        return self.portfolio_repository.get().evaluate(bank, command.currency)


def _to_result(money: Money) -> EvaluationResult:
    return EvaluationResult(amount=money.amount, currency=money.currency)
