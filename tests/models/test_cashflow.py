from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from robustirr.models.cashflow import CashFlow, CashFlowSeries, is_invalid_amount


class TestInvalidAmount:
    @pytest.mark.parametrize("amount", [None, float("nan"), float("inf"), Decimal("NaN"), Decimal("-Infinity")])
    def test_invalid(self, amount):
        assert is_invalid_amount(amount)

    @pytest.mark.parametrize("amount", [0, -1.5, 3, Decimal("12.50")])
    def test_valid(self, amount):
        assert not is_invalid_amount(amount)


class TestCashFlowSeries:
    def test_undated_offsets_are_periods(self):
        series = CashFlowSeries.from_amounts([-1, 0.5, 0.7])
        assert not series.is_dated
        assert series.compounding_frequency == 1
        assert series.time_offsets() == [0.0, 1.0, 2.0]

    def test_dated_offsets_are_days(self):
        series = CashFlowSeries.build([-1, 1.1], [date(2024, 1, 1), date(2024, 3, 1)])
        assert series.is_dated
        assert series.compounding_frequency == 365
        assert series.time_offsets() == [0.0, 60.0]

    def test_datetime_offsets_are_fractional(self):
        series = CashFlowSeries.from_dated([
            (datetime(2024, 1, 1, 0, 0), -1),
            (datetime(2024, 1, 2, 12, 0), 1.1),
        ])
        assert series.time_offsets() == [0.0, 1.5]

    def test_from_dated_sorts(self):
        series = CashFlowSeries.from_dated([(date(2024, 3, 1), 2), (date(2024, 1, 1), -1)])
        assert series.amounts == [-1, 2]

    def test_aware_datetimes_sort_by_instant(self):
        """12:00 in UTC+10 is 02:00 UTC, six hours before 08:00 UTC."""
        sydney = timezone(timedelta(hours=10))
        series = CashFlowSeries.from_dated([
            (datetime(2024, 1, 1, 8, 0, tzinfo=timezone.utc), 1.1),
            (datetime(2024, 1, 1, 12, 0, tzinfo=sydney), -1),
        ])
        assert series.amounts == [-1, 1.1]
        assert series.time_offsets() == [0.0, pytest.approx(0.25)]

    def test_mixed_naive_and_aware_datetimes(self):
        with pytest.raises(ValueError):
            CashFlowSeries.from_dated([
                (datetime(2024, 1, 1), -1),
                (datetime(2024, 2, 1, tzinfo=timezone.utc), 1.1),
            ])

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            CashFlowSeries.build([-1, 2, 3], [date(2024, 1, 1)])

    def test_mixed_dated_and_undated(self):
        with pytest.raises(ValueError):
            CashFlowSeries((CashFlow(-1, date(2024, 1, 1)), CashFlow(2)))

    def test_has_missing(self):
        assert CashFlowSeries.from_amounts([-1, None]).has_missing()
        assert not CashFlowSeries.from_amounts([-1, 2]).has_missing()

    def test_empty(self):
        series = CashFlowSeries.from_amounts([])
        assert len(series) == 0
        assert not series.is_dated
        assert series.time_offsets() == []
