# tests/test_validators.py
"""
Validator Tests - Unit Tests for Parsing Currencies, Rates and Holdings

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- moneyproblem.shared.validators (parsers for testing)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from moneyproblem.domain import Currency, ExchangeRate, Money
from moneyproblem.shared.validators import (
    parse_currency,
    parse_decimals,
    parse_holding,
    parse_number,
    parse_rate,
    parse_rates,
    validate_currency_code,
)


class TestCurrencyCodes:
    def test_validate(self):
        assert validate_currency_code("usd")
        assert not validate_currency_code("ABC")
        assert not validate_currency_code("")

    def test_parse_unknown_raises_value_error(self):
        with pytest.raises(ValueError, match="Unsupported currency"):
            parse_currency("ABC")


class TestParseNumber:
    def test_separators(self):
        assert parse_number("1,344") == 1344
        assert parse_number("1_000.5") == 1000.5
        assert parse_number("-3") == -3
        assert parse_number("1,344.5") == 1344.5
        assert parse_number("-12,345,678") == -12345678

    @pytest.mark.parametrize("value", ["abc", "nan", "inf", "", "1,2", "1,5", "12,34", "1,2345", ",344"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_number(value)

    def test_decimal_comma_is_not_a_thousands_separator(self):
        with pytest.raises(ValueError, match="thousands separators"):
            parse_rate("USD=1,2")
        with pytest.raises(ValueError, match="thousands separators"):
            parse_holding("1,5:USD")


class TestParseDecimals:
    def test_bounds(self):
        assert parse_decimals("0") == 0
        assert parse_decimals("10") == 10

    @pytest.mark.parametrize("value", ["-1", "11", "2.5", "two"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_decimals(value)


class TestParseRates:
    def test_single(self):
        assert parse_rate("usd = 1.2") == ExchangeRate(1.2, Currency.USD)

    def test_non_positive_rate_is_left_to_the_bank(self):
        assert parse_rate("USD=0") == ExchangeRate(0, Currency.USD)

    @pytest.mark.parametrize("spec", ["USD", "USD=", "=1.2", "USD=1.2=3", "XYZ=1"])
    def test_invalid(self, spec):
        with pytest.raises(ValueError):
            parse_rate(spec)

    def test_list_with_commas(self):
        assert parse_rates("USD=1.2,KRW=1344") == [
            ExchangeRate(1.2, Currency.USD),
            ExchangeRate(1344, Currency.KRW),
        ]

    def test_list_with_semicolons(self):
        assert parse_rates("USD=1.2; KRW=1,344;") == [
            ExchangeRate(1.2, Currency.USD),
            ExchangeRate(1344, Currency.KRW),
        ]

    def test_empty(self):
        assert parse_rates("") == []
        assert parse_rates("  ") == []


class TestParseHolding:
    def test_valid(self):
        assert parse_holding("5:usd") == Money(5, Currency.USD)
        assert parse_holding("-1.5:KRW") == Money(-1.5, Currency.KRW)

    @pytest.mark.parametrize("spec", ["5", "5 USD", ":USD", "five:USD", "5:XYZ"])
    def test_invalid(self, spec):
        with pytest.raises(ValueError):
            parse_holding(spec)
