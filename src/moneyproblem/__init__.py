# src/moneyproblem/__init__.py
"""
MoneyProblem - Multi-Currency Portfolio Evaluation

Converts money between currencies through a pivot-centred bank of exchange
rates and evaluates portfolios of mixed currencies into a single total,
reporting every missing exchange rate at once.
"""

__version__ = "1.0.0"
