# src/moneyproblem/application/common.py
"""
Common Use-Case Types

Files that USE this module:
- moneyproblem.application.* (every use case returns UseCaseError on failure)
- moneyproblem.app (prints UseCaseError messages)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar

from moneyproblem.domain import Error, Result

C = TypeVar("C", contravariant=True)
T = TypeVar("T", covariant=True)


@dataclass(frozen=True)
class UseCaseError:
    """Uniform failure returned by every use case."""
    message: str

    @classmethod
    def from_error(cls, error: Error) -> "UseCaseError":
        return cls(error.message)


class UseCase(Protocol[C, T]):
    """A single application operation driven by a command."""

    def invoke(self, command: C) -> Result[T, UseCaseError]:
        ...
