# tests/test_formatter.py
"""
Formatter Tests - Unit Tests for Text Formatting Functions

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- moneyproblem.adapters.formatting.formatter (formatter functions for testing)
- moneyproblem.application (EvaluationResult, UseCaseError)
- moneyproblem.domain (Bank, Money)
"""
from moneyproblem.adapters.formatting.formatter import (
    format_bank,
    format_error,
    format_evaluation,
    format_money,
)
from moneyproblem.application import EvaluationResult, UseCaseError
from moneyproblem.domain import Bank, Currency, Error, ExchangeRate, Money


class TestFormatMoney:
    def test_default_decimals(self):
        assert format_money(Money(11200.000000000002, Currency.KRW)) == "11,200.00 KRW"

    def test_custom_decimals(self):
        assert format_money(Money(0.8928571428571427, Currency.USD), decimals=4) == "0.8929 USD"

    def test_negative(self):
        assert format_money(Money(-1120, Currency.KRW), decimals=0) == "-1,120 KRW"


class TestFormatEvaluation:
    def test_plain(self):
        result = EvaluationResult(21.8, Currency.USD)
        assert format_evaluation(result) == "Total: 21.80 USD"

    def test_with_title(self):
        result = EvaluationResult(72.5, Currency.EUR)
        assert format_evaluation(result, 1, title="Portfolio") == "Portfolio\nTotal: 72.5 EUR"


class TestFormatError:
    def test_domain_error(self):
        assert format_error(Error("USD->EUR")) == "Error: USD->EUR"

    def test_use_case_error(self):
        assert format_error(UseCaseError("No bank defined")) == "Error: No bank defined"


class TestFormatBank:
    def test_empty(self):
        assert format_bank(Bank.with_pivot_currency(Currency.EUR)) == "Pivot EUR: no exchange rates"

    def test_rates(self):
        bank = Bank.with_pivot_currency(Currency.EUR).add(ExchangeRate(1.2, Currency.USD)).unwrap()
        assert format_bank(bank, decimals=2) == "Pivot EUR:\n— 1 EUR = 1.20 USD"
