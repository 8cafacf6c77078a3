# src/moneyproblem/app.py
"""
Application Entry Point - Command Line Evaluation

This module serves as the composition root: it wires repositories into the
use cases, seeds the bank from settings and command line rates, fills the
portfolio and prints its evaluation.

Usage:
    moneyproblem 5:USD 10:EUR 4:KRW --to USD --rate USD=1.2 --rate KRW=1344

Files that USE this module:
- moneyproblem.__main__ (python -m moneyproblem)
- pyproject.toml console script "moneyproblem"

Files that this module USES:
- moneyproblem.shared.logging_conf (setup_logging for logging configuration)
- moneyproblem.shared.validators (parsing holdings and rates)
- moneyproblem.config (settings)
- moneyproblem.application (use cases)
- moneyproblem.adapters.persistence (in-memory repositories)
- moneyproblem.adapters.formatting (text output)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from moneyproblem.adapters.formatting import format_bank, format_error, format_evaluation
from moneyproblem.adapters.persistence import InMemoryBankRepository, InMemoryPortfolioRepository
from moneyproblem.application import (
    AddExchangeRate,
    AddExchangeRateUseCase,
    AddInPortfolio,
    AddInPortfolioUseCase,
    EvaluatePortfolio,
    EvaluatePortfolioUseCase,
    SetupBank,
    SetupBankUseCase,
)
from moneyproblem.config import Settings
from moneyproblem.domain import ExchangeRate
from moneyproblem.shared.logging_conf import setup_logging
from moneyproblem.shared.validators import parse_currency, parse_decimals, parse_holding, parse_rate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moneyproblem",
        description="Evaluate a multi-currency portfolio in one currency.",
    )
    parser.add_argument("holdings", nargs="*", type=parse_holding, metavar="AMOUNT:CUR",
                        help="Portfolio holding, e.g. 5:USD")
    parser.add_argument("--to", type=parse_currency, default=None, metavar="CUR",
                        help="Target currency (default: TARGET_CURRENCY)")
    parser.add_argument("--pivot", type=parse_currency, default=None, metavar="CUR",
                        help="Pivot currency of the bank (default: PIVOT_CURRENCY)")
    parser.add_argument("--rate", type=parse_rate, action="append", default=[], metavar="CUR=RATE",
                        help="Exchange rate from the pivot, repeatable; overrides EXCHANGE_RATES")
    parser.add_argument("--decimals", type=parse_decimals, default=None,
                        help="Decimals shown in the total (default: DISPLAY_DECIMALS)")
    parser.add_argument("--show-bank", action="store_true",
                        help="Print the rate table before the total")
    return parser


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    """
    Run the command line.

    Returns:
        Process exit code: 0 on success, 1 when the bank or the evaluation fails
    """
    if settings is None:
        from moneyproblem.config import settings

    args = build_parser().parse_args(argv)

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )

    pivot = args.pivot or settings.pivot_currency
    target = args.to or settings.target_currency
    decimals = settings.display_decimals if args.decimals is None else args.decimals
    rates: List[ExchangeRate] = settings.exchange_rate_list + args.rate

    bank_repository = InMemoryBankRepository()
    portfolio_repository = InMemoryPortfolioRepository()

    SetupBankUseCase(bank_repository).invoke(SetupBank(pivot))
    add_rate = AddExchangeRateUseCase(bank_repository)
    for rate in rates:
        result = add_rate.invoke(AddExchangeRate(rate.rate, rate.to))
        if result.is_err():
            print(format_error(result.error), file=sys.stderr)
            return 1

    add_holding = AddInPortfolioUseCase(portfolio_repository)
    for money in args.holdings:
        add_holding.invoke(AddInPortfolio(money.amount, money.currency))

    if args.show_bank:
        print(format_bank(bank_repository.get_bank()))

    logger.info("Evaluating %d holdings in %s (pivot %s, %d rates)",
                len(args.holdings), target, pivot, len(rates))
    result = EvaluatePortfolioUseCase(bank_repository, portfolio_repository).invoke(
        EvaluatePortfolio(target)
    )
    if result.is_err():
        print(format_error(result.error), file=sys.stderr)
        return 1

    print(format_evaluation(result.value, decimals))
    return 0


if __name__ == "__main__":
    sys.exit(main())
