# src/moneyproblem/domain/result.py
"""
Result - Success-or-Failure Values

Every fallible domain and use-case operation returns ``Ok(value)`` or
``Err(error)`` instead of raising. Callers branch on ``is_ok()`` or chain
with ``map`` / ``flat_map``.

Files that USE this module:
- moneyproblem.domain.bank, moneyproblem.domain.portfolio
- moneyproblem.application.* (use cases return results)

Files that this module USES:
- moneyproblem.domain.errors (UnwrapError)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from moneyproblem.domain.errors import UnwrapError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        return fn(self.value)

    def map_err(self, fn: Callable[[E], F]) -> "Ok[T]":
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self):
        raise UnwrapError(f"Called unwrap_err on Ok({self.value!r})")

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed result carrying an error."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> "Err[E]":
        return self

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Err[E]":
        return self

    def map_err(self, fn: Callable[[E], F]) -> "Err[F]":
        return Err(fn(self.error))

    def unwrap(self):
        raise UnwrapError(f"Called unwrap on Err({self.error!r})")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Ok[T], Err[E]]
