# src/moneyproblem/adapters/formatting/formatter.py
"""
Text Formatter - Presentation of Money, Results and Errors

Display rounding happens here only; the domain never rounds.

Files that USE this module:
- moneyproblem.app (prints evaluation results and errors)
- tests.test_formatter (unit tests)

Files that this module USES:
- moneyproblem.domain (Bank, Money)
- moneyproblem.application (EvaluationResult, UseCaseError)
"""
from __future__ import annotations

from typing import List, Optional, Union

from moneyproblem.application import EvaluationResult, UseCaseError
from moneyproblem.domain import Bank, Error, Money


def format_money(money: Money, decimals: int = 2) -> str:
    """
    Format money with thousands separators.

    Args:
        money: Money to format
        decimals: Number of decimal places (default: 2)

    Returns:
        e.g. "11,200.00 KRW"
    """
    return f"{money.amount:,.{decimals}f} {money.currency}"


def format_evaluation(result: EvaluationResult, decimals: int = 2, title: Optional[str] = None) -> str:
    """Format a portfolio evaluation, optionally under a title line."""
    line = f"Total: {format_money(Money(result.amount, result.currency), decimals)}"
    if title:
        return f"{title}\n{line}"
    return line


def format_error(error: Union[Error, UseCaseError]) -> str:
    return f"Error: {error.message}"


def format_bank(bank: Bank, decimals: int = 4) -> str:
    """
    Format the rate table, one line per currency.

    Returns:
        Lines such as "1 EUR = 1.2000 USD", or a note when the table is empty
    """
    if not bank.rates:
        return f"Pivot {bank.pivot}: no exchange rates"

    lines: List[str] = [f"Pivot {bank.pivot}:"]
    for currency, rate in bank.rates.items():
        lines.append(f"— 1 {bank.pivot} = {rate.rate:,.{decimals}f} {currency}")
    return "\n".join(lines)
