# src/moneyproblem/adapters/persistence/in_memory.py
"""
In-Memory Repositories - Current Bank and Portfolio

Keeps the current bank and portfolio for the lifetime of the process.
Nothing is written to disk.

Files that USE this module:
- moneyproblem.app (composition root wires these into the use cases)
- tests.test_use_cases (unit tests)

Files that this module USES:
- moneyproblem.domain (Bank, Portfolio)
"""
from __future__ import annotations

import logging
from typing import Optional

from moneyproblem.domain import Bank, Portfolio

logger = logging.getLogger(__name__)


class InMemoryBankRepository:
    """Holds at most one bank."""

    def __init__(self, bank: Optional[Bank] = None):
        self._bank = bank

    def get_bank(self) -> Optional[Bank]:
        return self._bank

    def save(self, bank: Bank) -> None:
        self._bank = bank
        logger.debug("Saved %r", bank)


class InMemoryPortfolioRepository:
    """Holds the current portfolio, empty by default."""

    def __init__(self, portfolio: Optional[Portfolio] = None):
        self._portfolio = portfolio if portfolio is not None else Portfolio()

    def get(self) -> Portfolio:
        return self._portfolio

    def save(self, portfolio: Portfolio) -> None:
        self._portfolio = portfolio
        logger.debug("Saved portfolio with %d holdings", len(portfolio))
