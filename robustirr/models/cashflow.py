"""Cash flow series: ordered (timestamp, amount) entries.

Loading from files is left to callers; these types only hold what they pass in.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Iterable, Sequence

Amount = float | int | Decimal | None
Timestamp = date | datetime

DAYS_PER_YEAR = 365  # actual/365
SECONDS_PER_DAY = 86400


def is_invalid_amount(amount: Amount) -> bool:
    """True for None and for non-finite floats or Decimals (NaN, infinity)."""
    if amount is None:
        return True
    if isinstance(amount, Decimal):
        return not amount.is_finite()
    return isinstance(amount, float) and not math.isfinite(amount)


def _as_utc(t: Timestamp) -> datetime:
    """Naive UTC datetime; plain dates sit at midnight."""
    if isinstance(t, datetime):
        if t.tzinfo is not None:
            return t.astimezone(timezone.utc).replace(tzinfo=None)
        return t
    return datetime(t.year, t.month, t.day)


def _is_aware(t: Timestamp) -> bool:
    return isinstance(t, datetime) and t.tzinfo is not None


def _elapsed_days(t0: Timestamp, t: Timestamp) -> float:
    # datetime is a subclass of date, so check it first
    if isinstance(t0, datetime) and isinstance(t, datetime):
        return (_as_utc(t) - _as_utc(t0)).total_seconds() / SECONDS_PER_DAY
    return float((_as_utc(t).date() - _as_utc(t0).date()).days)


@dataclass(frozen=True)
class CashFlow:
    amount: Amount
    timestamp: Timestamp | None = None  # None = implicit unit-spaced period


@dataclass(frozen=True)
class CashFlowSeries:
    """Ordered cash flows, ascending by timestamp when dated."""

    entries: tuple[CashFlow, ...]

    def __post_init__(self):
        dated = [e.timestamp is not None for e in self.entries]
        if any(dated) and not all(dated):
            raise ValueError("Cash flow entries must be either all dated or all undated")
        naive = [
            isinstance(e.timestamp, datetime) and not _is_aware(e.timestamp) for e in self.entries
        ]
        aware = [_is_aware(e.timestamp) for e in self.entries]
        if any(naive) and any(aware):
            raise ValueError("Cannot mix timezone-aware and naive datetimes")

    @classmethod
    def from_amounts(cls, amounts: Iterable[Amount]) -> "CashFlowSeries":
        """Undated series: entry k sits at period k."""
        return cls(tuple(CashFlow(amount=a) for a in amounts))

    @classmethod
    def from_dated(cls, pairs: Iterable[tuple[Timestamp, Amount]]) -> "CashFlowSeries":
        """Dated series from (timestamp, amount) pairs, sorted ascending (stable)."""
        ordered = sorted(pairs, key=lambda p: _as_utc(p[0]))
        return cls(tuple(CashFlow(amount=a, timestamp=t) for t, a in ordered))

    @classmethod
    def build(
        cls, amounts: Sequence[Amount], dates: Sequence[Timestamp] | None = None
    ) -> "CashFlowSeries":
        if dates is None:
            return cls.from_amounts(amounts)
        if len(dates) != len(amounts):
            raise ValueError("Cash flows and dates must have same length")
        return cls.from_dated(zip(dates, amounts))

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_dated(self) -> bool:
        return bool(self.entries) and self.entries[0].timestamp is not None

    @property
    def amounts(self) -> list[Amount]:
        return [e.amount for e in self.entries]

    def has_missing(self) -> bool:
        return any(is_invalid_amount(e.amount) for e in self.entries)

    def float_amounts(self) -> list[float]:
        """Amounts as floats. Only meaningful once has_missing() is False."""
        return [float(a) for a in self.amounts]

    @property
    def compounding_frequency(self) -> int:
        """365 for dated series (actual/365), 1 for unit periods."""
        return DAYS_PER_YEAR if self.is_dated else 1

    def time_offsets(self) -> list[float]:
        """Elapsed time from the first entry: days if dated, else periods."""
        if not self.is_dated:
            return [float(k) for k in range(len(self.entries))]
        t0 = self.entries[0].timestamp
        return [_elapsed_days(t0, e.timestamp) for e in self.entries]
