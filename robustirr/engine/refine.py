"""Refine a rate bracket to a single periodic rate estimate.

Classic cash flows (negative first, positive last) use Brent's method from
scipy. Anything else uses a fixed-budget bisection that tracks the sign at the
low endpoint, which works however many roots the series has.
"""

import logging
from typing import Sequence

from scipy.optimize import brentq

from robustirr.config import settings
from robustirr.engine.npv import npv, sign
from robustirr.models.results import RateBracket, SolverStrategy

logger = logging.getLogger(__name__)

BISECTION_ITERATIONS: int = 40


def choose_strategy(amounts: Sequence[float]) -> SolverStrategy:
    if amounts[0] < 0 and amounts[-1] > 0:
        return SolverStrategy.BRENT
    return SolverStrategy.BISECTION


def is_valid_bracket(bracket: RateBracket) -> bool:
    """Endpoints have opposite NPV signs, or one of them is exactly zero."""
    return sign(bracket.npv_low) * sign(bracket.npv_high) <= 0


def refine_brent(
    bracket: RateBracket, amounts: Sequence[float], offsets: Sequence[float], freq: int
) -> float | None:
    """Brent's method restricted to the bracket. None if the bracket is unusable."""
    if not is_valid_bracket(bracket):
        logger.debug("Bracket [%s, %s] lost its sign change", bracket.low, bracket.high)
        return None

    def f(rate: float) -> float:
        return npv(rate, amounts, offsets, freq)

    try:
        return brentq(
            f,
            bracket.low,
            bracket.high,
            xtol=settings.brent_xtol,
            rtol=settings.brent_rtol,
            maxiter=settings.brent_maxiter,
        )
    except (ValueError, RuntimeError) as e:
        logger.warning("Brent refinement failed in [%s, %s]: %s", bracket.low, bracket.high, e)
        return None


def refine_bisection(
    bracket: RateBracket,
    amounts: Sequence[float],
    offsets: Sequence[float],
    freq: int,
    iterations: int = BISECTION_ITERATIONS,
) -> float:
    """Sign-preserving bisection with a fixed iteration budget.

    The midpoint replaces the low end when its NPV sign matches the low end's,
    otherwise the high end. Returns the mean of the final two endpoints.
    """
    low, high = bracket.low, bracket.high
    low_sign = sign(bracket.npv_low)
    for _ in range(iterations):
        mid = (low + high) / 2.0
        if sign(npv(mid, amounts, offsets, freq)) == low_sign:
            low = mid
        else:
            high = mid
    return (low + high) / 2.0


def refine(
    strategy: SolverStrategy,
    bracket: RateBracket,
    amounts: Sequence[float],
    offsets: Sequence[float],
    freq: int,
) -> float | None:
    if strategy is SolverStrategy.BRENT:
        return refine_brent(bracket, amounts, offsets, freq)
    return refine_bisection(bracket, amounts, offsets, freq)
