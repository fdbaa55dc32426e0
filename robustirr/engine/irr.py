"""IRR of irregular, dated cash flows.

Scan for the bracket nearest zero, refine it (Brent for classic cash flows,
bisection otherwise), convert the periodic rate to an annual effective rate,
and optionally un-annualize sub-annual holdings per GIPS.

Pure functions. No I/O. Never raises for bad cash flows; undefined results
come back as IRRResult with a reason.
"""

import logging
import math
from datetime import date, datetime
from typing import Sequence

from robustirr.config import settings
from robustirr.engine.bracket import scan_bracket, scan_direction
from robustirr.engine.npv import npv
from robustirr.engine.refine import choose_strategy, refine
from robustirr.models.cashflow import Amount, CashFlowSeries
from robustirr.models.results import IRRResult, UndefinedReason

logger = logging.getLogger(__name__)


def annualize(periodic_rate: float, freq: int) -> float:
    """Annual effective rate: (1 + apr/freq)^freq - 1."""
    return (1.0 + periodic_rate / freq) ** freq - 1.0


def holding_period(series: CashFlowSeries) -> float:
    """Days (or periods) from first to last entry.

    A zero-valued first entry is ignored, so the period starts at the second one.
    """
    offsets = series.time_offsets()
    if len(offsets) < 2:
        return 0.0
    start = offsets[1] if series.amounts[0] == 0 else offsets[0]
    return offsets[-1] - start


def gips_adjust(annual_rate: float, duration: float, freq: int) -> float:
    """Actual holding-period return for holdings under a year, else unchanged."""
    if duration >= freq:
        return annual_rate
    return (1.0 + annual_rate) ** (duration / freq) - 1.0


def compute_irr(series: CashFlowSeries, gips: bool = False) -> IRRResult:
    """Annual effective IRR of a cash flow series.

    Dated series compound daily on actual/365; undated series treat each entry
    as one whole compounding period. With gips=True, holdings shorter than a
    year report the actual period return instead of an annualized one.
    """
    freq = series.compounding_frequency

    if series.has_missing():
        return _undefined(UndefinedReason.MISSING_AMOUNT, freq)
    if len(series) <= 1:
        return _undefined(UndefinedReason.TOO_SHORT, freq)

    amounts = series.float_amounts()
    if all(a <= 0 for a in amounts):
        return _undefined(UndefinedReason.NO_INFLOW, freq)
    if all(a >= 0 for a in amounts):
        return _undefined(UndefinedReason.NO_OUTFLOW, freq)

    offsets = series.time_offsets()
    duration = holding_period(series)
    total = math.fsum(amounts)
    if total == 0:
        return IRRResult(
            rate=0.0,
            periodic_rate=0.0,
            compounding_frequency=freq,
            gips_adjusted=gips and duration < freq,
            holding_period=duration,
            residual_npv=0.0,
        )

    strategy = choose_strategy(amounts)
    logger.debug("IRR search: %d flows, total %.6g, strategy %s", len(amounts), total, strategy.value)

    try:
        bracket = scan_bracket(amounts, offsets, freq, scan_direction(total))
        if bracket is None:
            return _undefined(UndefinedReason.NO_BRACKET, freq, strategy=strategy)

        periodic = refine(strategy, bracket, amounts, offsets, freq)
        if periodic is None:
            return _undefined(
                UndefinedReason.BRACKET_LOST, freq, strategy=strategy, bracket=bracket
            )

        residual = npv(periodic, amounts, offsets, freq)
        rate = annualize(periodic, freq)
    except OverflowError as e:
        return _undefined(UndefinedReason.NUMERIC_OVERFLOW, freq, strategy=strategy, detail=e)

    if abs(residual) > settings.npv_tolerance:
        logger.debug("Residual NPV %.3g at periodic rate %.10g", residual, periodic)

    adjusted = gips and duration < freq
    if adjusted:
        rate = gips_adjust(rate, duration, freq)

    return IRRResult(
        rate=rate,
        periodic_rate=periodic,
        compounding_frequency=freq,
        bracket=bracket,
        strategy=strategy,
        gips_adjusted=adjusted,
        holding_period=duration,
        residual_npv=residual,
    )


def irr(
    amounts: Sequence[Amount],
    dates: Sequence[date | datetime] | None = None,
    gips: bool = False,
) -> float | None:
    """IRR as a float, or None if undefined.

    Raises ValueError if dates is given with a different length than amounts.
    """
    return compute_irr(CashFlowSeries.build(amounts, dates), gips=gips).rate


def _undefined(reason: UndefinedReason, freq: int, detail=None, **kwargs) -> IRRResult:
    if detail is None:
        logger.debug("IRR undefined: %s", reason.value)
    else:
        logger.debug("IRR undefined: %s (%s)", reason.value, detail)
    return IRRResult.undefined(reason, compounding_frequency=freq, **kwargs)
