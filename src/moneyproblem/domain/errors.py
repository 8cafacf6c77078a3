# src/moneyproblem/domain/errors.py
"""
Domain Errors - Failure Values and Programmer-Error Exceptions

Two kinds of failure live here:
- ``Error``: a described failure returned as a value (inside ``Err``) by
  Bank and Portfolio operations. Never raised.
- ``DomainError`` and its subclasses: exceptions for broken preconditions
  (adding money in different currencies, unwrapping an ``Err``, ...).

Files that USE this module:
- moneyproblem.domain.bank (invalid_rate, missing_exchange_rate)
- moneyproblem.domain.portfolio (missing_exchange_rates)
- moneyproblem.domain.models (CurrencyMismatchError, InvalidMoneyError, UnknownCurrencyError)
- moneyproblem.domain.result (UnwrapError)
- moneyproblem.application.* (no_bank_defined)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Tuple

if TYPE_CHECKING:
    from moneyproblem.domain.models import Currency

MISSING_RATES_PREFIX = "Missing exchange rate(s): "
NO_BANK_DEFINED = "No bank defined"


class DomainError(Exception):
    """Base exception for domain errors."""
    pass


class CurrencyMismatchError(DomainError):
    """Raised when arithmetic is attempted on money in different currencies."""
    pass


class InvalidMoneyError(DomainError):
    """Raised when a money amount is not a finite number."""
    pass


class UnknownCurrencyError(DomainError):
    """Raised when a currency code is not supported."""
    pass


class UnwrapError(DomainError):
    """Raised when the wrong side of a result is unwrapped."""
    pass


@dataclass(frozen=True)
class Error:
    """
    A described failure.

    Attributes:
        message: Human-readable diagnostic
        causes: Leaf errors this one was combined from (empty for a leaf)
    """
    message: str
    causes: Tuple["Error", ...] = field(default=(), repr=False, compare=False)

    @property
    def leaves(self) -> Tuple["Error", ...]:
        """Leaf errors carried by this error, itself included when it is a leaf."""
        return self.causes or (self,)

    @staticmethod
    def combine(errors: Iterable["Error"], delimiter: str = ",") -> "Error":
        """
        Combine errors into one, keeping first-seen order and dropping duplicates.

        Args:
            errors: Errors to combine (at least one)
            delimiter: Separator placed between messages

        Returns:
            Error whose message joins every distinct leaf message

        Raises:
            ValueError: If no error is given
        """
        seen = set()
        leaves = []
        for error in errors:
            for leaf in error.leaves:
                if leaf.message not in seen:
                    seen.add(leaf.message)
                    leaves.append(leaf)

        if not leaves:
            raise ValueError("At least one error is required to combine")
        if len(leaves) == 1:
            return leaves[0]
        return Error(delimiter.join(leaf.message for leaf in leaves), tuple(leaves))


def invalid_rate(reason: str) -> Error:
    """Error for an exchange rate rejected by the bank."""
    return Error(f"Invalid exchange rate: {reason}")


def missing_exchange_rate(source: "Currency", target: "Currency") -> Error:
    """Error for a single missing conversion leg, keyed by the currency pair."""
    return Error(f"{source.value}->{target.value}")


def missing_exchange_rates(errors: Iterable[Error]) -> Error:
    """
    Aggregate conversion failures into one diagnostic.

    Example: ``Missing exchange rate(s): [USD->EUR],[KRW->EUR]``
    """
    leaves = Error.combine(errors).leaves
    message = ",".join(f"[{leaf.message}]" for leaf in leaves)
    return Error(MISSING_RATES_PREFIX + message, leaves)


def no_bank_defined() -> Error:
    return Error(NO_BANK_DEFINED)
