# src/moneyproblem/adapters/formatting/__init__.py
"""
Formatting Adapters - Text Output

This package contains text formatting for command line output.
"""

from moneyproblem.adapters.formatting.formatter import (
    format_bank,
    format_error,
    format_evaluation,
    format_money,
)

__all__ = [
    "format_bank",
    "format_error",
    "format_evaluation",
    "format_money",
]
