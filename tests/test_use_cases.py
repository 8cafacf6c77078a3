# tests/test_use_cases.py
"""
Use Case Tests - Unit Tests for the Application Layer

Exercises the use cases against in-memory repositories and against mocked
repositories to check how they talk to the ports.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- moneyproblem.application (use cases, commands, UseCaseError)
- moneyproblem.adapters.persistence (in-memory repositories)
- moneyproblem.domain (Bank, Portfolio, Money)
- unittest.mock (Mock for repository doubles)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock objects for repository doubles

from moneyproblem.adapters.persistence import InMemoryBankRepository, InMemoryPortfolioRepository
from moneyproblem.application import (
    AddExchangeRate,
    AddExchangeRateUseCase,
    AddInPortfolio,
    AddInPortfolioUseCase,
    EvaluatePortfolio,
    EvaluatePortfolioUseCase,
    EvaluationResult,
    SetupBank,
    SetupBankUseCase,
    UseCaseError,
)
from moneyproblem.domain import Bank, Currency, Err, ExchangeRate, Money, Ok, Portfolio

EUR, USD, KRW = Currency.EUR, Currency.USD, Currency.KRW


@pytest.fixture
def bank_repository():
    return InMemoryBankRepository()


@pytest.fixture
def portfolio_repository():
    return InMemoryPortfolioRepository()


class TestSetupBank:
    def test_saves_empty_bank(self, bank_repository):
        result = SetupBankUseCase(bank_repository).invoke(SetupBank(EUR))

        assert result == Ok(None)
        assert bank_repository.get_bank() == Bank.with_pivot_currency(EUR)


class TestAddExchangeRate:
    def test_without_bank(self, bank_repository):
        result = AddExchangeRateUseCase(bank_repository).invoke(AddExchangeRate(1.2, USD))

        assert result == Err(UseCaseError("No bank defined"))

    def test_adds_rate(self, bank_repository):
        bank_repository.save(Bank.with_pivot_currency(EUR))

        result = AddExchangeRateUseCase(bank_repository).invoke(AddExchangeRate(1.2, USD))

        assert result.is_ok()
        assert bank_repository.get_bank().rate_for(USD) == ExchangeRate(1.2, USD)

    def test_invalid_rate_keeps_bank(self, bank_repository):
        bank = Bank.with_pivot_currency(EUR)
        bank_repository.save(bank)

        result = AddExchangeRateUseCase(bank_repository).invoke(AddExchangeRate(-5, USD))

        assert result.is_err()
        assert result.error.message.startswith("Invalid exchange rate")
        assert bank_repository.get_bank() is bank


class TestAddInPortfolio:
    def test_appends_money(self, portfolio_repository):
        use_case = AddInPortfolioUseCase(portfolio_repository)
        use_case.invoke(AddInPortfolio(5, USD))
        use_case.invoke(AddInPortfolio(10, EUR))

        assert portfolio_repository.get() == Portfolio.of(Money(5, USD), Money(10, EUR))


class TestEvaluatePortfolio:
    def test_no_bank_defined(self, bank_repository, portfolio_repository):
        use_case = EvaluatePortfolioUseCase(bank_repository, portfolio_repository)

        assert use_case.invoke(EvaluatePortfolio(USD)) == Err(UseCaseError("No bank defined"))

    def test_evaluation_result(self, bank_repository, portfolio_repository):
        bank_repository.save(Bank.with_pivot_currency(EUR).add(ExchangeRate(1.2, USD)).unwrap())
        portfolio_repository.save(Portfolio.of(Money(5, USD), Money(10, EUR)))

        result = EvaluatePortfolioUseCase(bank_repository, portfolio_repository).invoke(
            EvaluatePortfolio(USD)
        )

        assert isinstance(result.value, EvaluationResult)
        assert result.value.currency is USD
        assert result.value.amount == pytest.approx(17)

    def test_missing_rates_become_use_case_error(self, bank_repository, portfolio_repository):
        bank_repository.save(Bank.with_pivot_currency(EUR))
        portfolio_repository.save(Portfolio.of(Money(1, USD), Money(1, KRW)))

        result = EvaluatePortfolioUseCase(bank_repository, portfolio_repository).invoke(
            EvaluatePortfolio(EUR)
        )

        assert result == Err(UseCaseError("Missing exchange rate(s): [USD->EUR],[KRW->EUR]"))

    def test_uses_repository_ports(self):
        bank = Bank.with_pivot_currency(EUR)
        bank_repository = Mock()
        bank_repository.get_bank.return_value = bank
        portfolio_repository = Mock()
        portfolio_repository.get.return_value = Portfolio.of(Money(3, EUR))

        result = EvaluatePortfolioUseCase(bank_repository, portfolio_repository).invoke(
            EvaluatePortfolio(EUR)
        )

        assert result == Ok(EvaluationResult(3.0, EUR))
        bank_repository.get_bank.assert_called_once()
        portfolio_repository.get.assert_called_once()
        portfolio_repository.save.assert_not_called()
