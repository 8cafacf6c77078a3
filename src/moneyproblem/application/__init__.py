# src/moneyproblem/application/__init__.py
"""
Application Layer - Use Cases

This package contains the use cases that orchestrate the domain.
No direct I/O dependencies - uses repositories through the ports.
"""

from moneyproblem.application.common import UseCase, UseCaseError
from moneyproblem.application.ports import BankRepository, PortfolioRepository
from moneyproblem.application.bank_setup import (
    AddExchangeRate,
    AddExchangeRateUseCase,
    SetupBank,
    SetupBankUseCase,
)
from moneyproblem.application.portfolio_holdings import AddInPortfolio, AddInPortfolioUseCase
from moneyproblem.application.evaluate_portfolio import (
    EvaluatePortfolio,
    EvaluatePortfolioUseCase,
    EvaluationResult,
)

__all__ = [
    "UseCase",
    "UseCaseError",
    "BankRepository",
    "PortfolioRepository",
    "SetupBank",
    "SetupBankUseCase",
    "AddExchangeRate",
    "AddExchangeRateUseCase",
    "AddInPortfolio",
    "AddInPortfolioUseCase",
    "EvaluatePortfolio",
    "EvaluatePortfolioUseCase",
    "EvaluationResult",
]
