"""Direction-aware bracket scan over candidate periodic rates.

Walks outward from 0 in 1% steps, downward for a net loss and upward for a net
profit, and stops at the first adjacent pair whose NPV signs differ. Stopping
at the first flip selects the root closest to zero on the profit/loss side.

Pure functions. No I/O.
"""

from typing import Sequence

from robustirr.engine.npv import npv, sign
from robustirr.models.results import RateBracket

RATE_STEP: float = 0.01
DOWNWARD_MAX_STEPS: int = 100  # down to -100% per compounding period
UPWARD_MAX_STEPS: int = 100_000  # up to +100,000%


def scan_direction(total: float) -> int:
    """-1 to search downward (net loss), 1 upward (net profit), 0 for no search."""
    return sign(total)


def scan_bracket(
    amounts: Sequence[float], offsets: Sequence[float], freq: int, direction: int
) -> RateBracket | None:
    """First sign-changing pair of adjacent candidate rates, or None if not found.

    Candidates are step * k rather than a running sum so the grid does not drift
    over 100,000 steps. Downward scans stop before any candidate that would put
    1 + rate/freq at or below zero.
    """
    if direction == 0:
        return None

    max_steps = DOWNWARD_MAX_STEPS if direction < 0 else UPWARD_MAX_STEPS
    step = RATE_STEP * direction

    prev_rate = 0.0
    prev_npv = npv(prev_rate, amounts, offsets, freq)
    for k in range(1, max_steps + 1):
        rate = step * k
        if 1.0 + rate / freq <= 0:
            return None
        value = npv(rate, amounts, offsets, freq)
        if sign(value) != sign(prev_npv):
            if rate < prev_rate:
                return RateBracket(low=rate, high=prev_rate, npv_low=value, npv_high=prev_npv)
            return RateBracket(low=prev_rate, high=rate, npv_low=prev_npv, npv_high=value)
        prev_rate, prev_npv = rate, value

    return None
