"""Net present value of a cash flow series at a candidate periodic rate.

Pure functions. No I/O.
"""

import math
from typing import Sequence

from robustirr.models.cashflow import CashFlowSeries


def npv(rate: float, amounts: Sequence[float], offsets: Sequence[float], freq: int) -> float:
    """NPV = sum(amount / (1 + rate/freq) ** offset).

    rate is a nominal periodic rate compounded freq times per year; offsets are
    elapsed days (freq=365) or periods (freq=1) from the first entry.

    Raises ValueError when 1 + rate/freq <= 0 and OverflowError when a
    discount factor or the sum leaves float range.
    """
    base = 1.0 + rate / freq
    if base <= 0:
        raise ValueError(f"Rate {rate} is outside the NPV domain (must exceed {-freq})")
    # Multiplying by base ** -t underflows to 0.0 instead of overflowing
    # for large upward candidates.
    total = sum(a * base ** -t for a, t in zip(amounts, offsets))
    # +inf and -inf terms sum to NaN, which has no sign
    if not math.isfinite(total):
        raise OverflowError(f"NPV at rate {rate} is not finite")
    return total


def sign(value: float) -> int:
    """-1, 0 or 1. NaN has no sign and raises ValueError."""
    if math.isnan(value):
        raise ValueError("NaN has no sign")
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def periodic_from_annual(rate: float, freq: int) -> float:
    """Nominal periodic rate equivalent to an annual effective rate."""
    return freq * ((1.0 + rate) ** (1.0 / freq) - 1.0)


def npv_at_annual_rate(rate: float, series: CashFlowSeries) -> float:
    """NPV of a series at an annual effective rate.

    The series must have no missing amounts; rate must exceed -1.
    """
    if rate <= -1.0:
        raise ValueError("Annual rate must exceed -100%")
    freq = series.compounding_frequency
    return npv(
        periodic_from_annual(rate, freq),
        series.float_amounts(),
        series.time_offsets(),
        freq,
    )
