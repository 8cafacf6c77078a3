# src/moneyproblem/application/ports.py
"""
Repository Ports - Interfaces the Use Cases Depend On

Files that USE this module:
- moneyproblem.application.* (use cases receive repositories)
- moneyproblem.adapters.persistence.in_memory (implements these protocols)

Files that this module USES:
- moneyproblem.domain (Bank, Portfolio)
"""
from __future__ import annotations

from typing import Optional, Protocol

from moneyproblem.domain import Bank, Portfolio


class BankRepository(Protocol):
    """Supplies at most one current bank."""

    def get_bank(self) -> Optional[Bank]:
        ...

    def save(self, bank: Bank) -> None:
        ...


class PortfolioRepository(Protocol):
    """Supplies the current portfolio (empty until something is added)."""

    def get(self) -> Portfolio:
        ...

    def save(self, portfolio: Portfolio) -> None:
        ...
