# src/moneyproblem/adapters/persistence/__init__.py
"""
Persistence Adapters - Repository Implementations

This package contains implementations of the application's repository ports:
- In-memory storage for the current bank and portfolio
"""

from moneyproblem.adapters.persistence.in_memory import (
    InMemoryBankRepository,
    InMemoryPortfolioRepository,
)

__all__ = [
    "InMemoryBankRepository",
    "InMemoryPortfolioRepository",
]
