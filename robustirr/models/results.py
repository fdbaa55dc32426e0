from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

FOUR_PLACES = Decimal("0.0001")


class SolverStrategy(str, Enum):
    BRENT = "brent"  # negative first, positive last
    BISECTION = "bisection"


class UndefinedReason(str, Enum):
    MISSING_AMOUNT = "missing_amount"
    TOO_SHORT = "too_short"
    NO_INFLOW = "no_inflow"  # all amounts <= 0
    NO_OUTFLOW = "no_outflow"  # all amounts >= 0
    NO_BRACKET = "no_bracket"
    BRACKET_LOST = "bracket_lost"
    NUMERIC_OVERFLOW = "numeric_overflow"


@dataclass(frozen=True)
class RateBracket:
    """Adjacent candidate periodic rates with NPV of differing sign. low < high."""

    low: float
    high: float
    npv_low: float
    npv_high: float


@dataclass(frozen=True)
class IRRResult:
    """Outcome of one IRR computation.

    rate is the annual effective IRR (GIPS-adjusted when gips_adjusted is set),
    or None when the IRR is undefined, in which case reason says why.
    """

    rate: float | None
    reason: UndefinedReason | None = None
    periodic_rate: float | None = None
    compounding_frequency: int = 1
    bracket: RateBracket | None = None
    strategy: SolverStrategy | None = None
    gips_adjusted: bool = False
    holding_period: float | None = None
    residual_npv: float | None = None

    @property
    def is_defined(self) -> bool:
        return self.rate is not None

    @classmethod
    def undefined(cls, reason: UndefinedReason, **kwargs) -> "IRRResult":
        return cls(rate=None, reason=reason, **kwargs)

    def as_decimal(self) -> Decimal | None:
        """Rate rounded to 4 places for display, None when undefined."""
        if self.rate is None:
            return None
        return Decimal(str(self.rate)).quantize(FOUR_PLACES, ROUND_HALF_UP)
