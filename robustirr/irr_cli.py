"""CLI for computing the IRR of a cash flow series.

Usage:
    python -m robustirr.irr_cli -100 60 60
    python -m robustirr.irr_cli -1 1.1 --dates 2024-01-01 2024-02-01 --gips
    python -m robustirr.irr_cli -5 NA 3
    python -m robustirr.irr_cli --gips -- -1e3 1.1e3

argparse only reads plain negatives like -100 or -.5 as amounts. Put options
first and separate the amounts with -- when they use exponents (-1e3).
"""

import argparse
import logging
import sys
from datetime import date

from robustirr.config import settings
from robustirr.engine.irr import compute_irr
from robustirr.models.cashflow import CashFlowSeries
from robustirr.models.results import IRRResult

MISSING_TOKENS = {"na", "nan", "none", ""}


def parse_amount(value: str) -> float | None:
    if value.strip().lower() in MISSING_TOKENS:
        return None
    try:
        return float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")


def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date: {value!r}")


def print_result(result: IRRResult) -> None:
    print(f"\n{'=' * 60}")
    if not result.is_defined:
        print(f"  IRR: undefined ({result.reason.value})")
        print(f"{'=' * 60}\n")
        return

    label = "Period Return (GIPS)" if result.gips_adjusted else "IRR (annual)"
    print(f"  {label + ':':<22}{result.as_decimal():.2%}")
    print(f"{'=' * 60}")
    print(f"  Periodic rate:        {result.periodic_rate:.8f}")
    print(f"  Compounding / year:   {result.compounding_frequency}")
    if result.strategy:
        print(f"  Solver:               {result.strategy.value}")
    if result.bracket:
        print(f"  Bracket:              [{result.bracket.low:.2f}, {result.bracket.high:.2f}]")
    print(f"  Holding period:       {result.holding_period:g}")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Robust IRR for irregular cash flows")
    parser.add_argument("amounts", nargs="+", type=parse_amount, help="Signed cash flow amounts")
    parser.add_argument("--dates", nargs="+", type=parse_date, help="ISO dates, one per amount")
    parser.add_argument("--gips", action="store_true", help="Un-annualize holdings under a year")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    try:
        series = CashFlowSeries.build(args.amounts, args.dates)
    except ValueError as e:
        parser.error(str(e))

    result = compute_irr(series, gips=args.gips)
    print_result(result)
    return 0 if result.is_defined else 1


if __name__ == "__main__":
    sys.exit(main())
