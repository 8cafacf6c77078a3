# src/moneyproblem/application/portfolio_holdings.py
"""
Portfolio Holdings - Use Case for Adding Money to the Portfolio

Files that USE this module:
- moneyproblem.app (adds command line holdings)
- tests.test_use_cases (unit tests)

Files that this module USES:
- moneyproblem.application.ports (PortfolioRepository)
- moneyproblem.domain (Currency, Money, Ok, Result)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from moneyproblem.application.common import UseCaseError
from moneyproblem.application.ports import PortfolioRepository
from moneyproblem.domain import Currency, Money, Ok, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddInPortfolio:
    amount: float
    currency: Currency


class AddInPortfolioUseCase:
    def __init__(self, portfolio_repository: PortfolioRepository):
        self.portfolio_repository = portfolio_repository

    def invoke(self, command: AddInPortfolio) -> Result[None, UseCaseError]:
        money = Money(command.amount, command.currency)
        portfolio = self.portfolio_repository.get().add(money)
        self.portfolio_repository.save(portfolio)
        logger.debug("Added %s to portfolio (%d holdings)", money, len(portfolio))
        return Ok(None)
