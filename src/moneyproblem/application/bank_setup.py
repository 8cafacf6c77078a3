# src/moneyproblem/application/bank_setup.py
"""
Bank Setup - Use Cases for Creating and Extending the Bank

- SetupBankUseCase: replace the current bank with an empty one around a pivot
- AddExchangeRateUseCase: register a rate in the current bank

Files that USE this module:
- moneyproblem.app (seeds the bank from settings and command line rates)
- tests.test_use_cases (unit tests)

Files that this module USES:
- moneyproblem.application.ports (BankRepository)
- moneyproblem.application.common (UseCaseError)
- moneyproblem.domain (Bank, Currency, ExchangeRate, results and errors)
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from moneyproblem.application.common import UseCaseError
from moneyproblem.application.ports import BankRepository
from moneyproblem.domain import Bank, Currency, Err, ExchangeRate, Ok, Result, no_bank_defined

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetupBank:
    pivot_currency: Currency


@dataclass(frozen=True)
class AddExchangeRate:
    rate: float
    currency: Currency


class SetupBankUseCase:
    def __init__(self, bank_repository: BankRepository):
        self.bank_repository = bank_repository

    def invoke(self, command: SetupBank) -> Result[None, UseCaseError]:
        self.bank_repository.save(Bank.with_pivot_currency(command.pivot_currency))
        logger.info("Bank set up with pivot currency %s", command.pivot_currency)
        return Ok(None)


class AddExchangeRateUseCase:
    """Add (or replace) an exchange rate in the current bank."""

    def __init__(self, bank_repository: BankRepository):
        self.bank_repository = bank_repository

    def invoke(self, command: AddExchangeRate) -> Result[None, UseCaseError]:
        bank = self.bank_repository.get_bank()
        if bank is None:
            logger.warning("Cannot add rate to %s: no bank defined", command.currency)
            return Err(UseCaseError.from_error(no_bank_defined()))

        result = bank.add(ExchangeRate(command.rate, command.currency))
        if result.is_err():
            logger.warning("Rejected exchange rate %s %s: %s",
                           command.rate, command.currency, result.error.message)
            return Err(UseCaseError.from_error(result.error))

        self.bank_repository.save(result.value)
        logger.info("Exchange rate added: 1 %s = %s %s", bank.pivot, command.rate, command.currency)
        return Ok(None)
