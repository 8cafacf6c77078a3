# src/moneyproblem/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains all adapters around the application:
- Persistence (repositories)
- Formatting (output)
"""

__all__ = []
