"""Canonical cash flow fixtures used across engine and API tests.

Dated series compound on actual/365; undated series use whole periods.
"""

import pytest
from datetime import date

from robustirr.models.cashflow import CashFlowSeries


def monthly_dates(start: date, count: int) -> list[date]:
    dates = []
    for k in range(count):
        month = start.month - 1 + k
        dates.append(date(start.year + month // 12, month % 12 + 1, start.day))
    return dates


@pytest.fixture
def one_month_ten_pct() -> CashFlowSeries:
    """Invest 1, get 1.1 back 31 days later."""
    return CashFlowSeries.from_dated([(date(2024, 1, 1), -1.0), (date(2024, 2, 1), 1.1)])


@pytest.fixture
def monthly_bond() -> CashFlowSeries:
    """Principal 1 at 10% paid monthly for 10 years, principal back at the end."""
    coupon = 0.1 / 12
    amounts = [-1.0] + [coupon] * 119 + [1.0 + coupon]
    return CashFlowSeries.build(amounts, monthly_dates(date(2010, 1, 15), len(amounts)))


@pytest.fixture
def classic_undated() -> CashFlowSeries:
    """-100 then two payments of 60: ~13.07% per period."""
    return CashFlowSeries.from_amounts([-100.0, 60.0, 60.0])


@pytest.fixture
def profitable_with_final_outflow() -> CashFlowSeries:
    """Roots at about -35.2% and +85.2%; net profit, last flow negative."""
    return CashFlowSeries.from_amounts([-100.0, 250.0, -120.0])
