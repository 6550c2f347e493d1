"""Tests for domain entities."""

import pytest
from datetime import date, datetime

from workhours.domain.entities import (
    Company,
    DateRange,
    EarningsBreakdown,
    PaymentAction,
    PaymentType,
    WorkRecord,
)


def _record(**kwargs) -> WorkRecord:
    return WorkRecord(id="r1", company_id="c1", date=date(2024, 1, 10), **kwargs)


class TestCompany:
    """Tests for Company entity."""

    def test_defaults(self):
        company = Company(id="c1", name="Acme", payment_type=PaymentType.HOURLY)
        assert company.month_start_day == 1
        assert company.hourly_rate is None
        assert company.point_rate is None

    def test_active_rate_follows_payment_type(self):
        hourly = Company(
            id="c1", name="A", payment_type=PaymentType.HOURLY, hourly_rate=30.0, point_rate=2.0
        )
        point = Company(
            id="c2", name="B", payment_type=PaymentType.POINT, hourly_rate=30.0, point_rate=2.0
        )
        assert hourly.active_rate == 30.0
        assert point.active_rate == 2.0

    def test_company_immutability(self):
        company = Company(id="c1", name="Acme", payment_type=PaymentType.HOURLY)
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            company.name = "Other"

    def test_display_names(self):
        assert PaymentType.HOURLY.display_name == "Hourly"
        assert PaymentType.POINT.display_name == "Point"
        assert PaymentAction.DUE.display_name == "Due"
        assert PaymentAction.WITHDRAWN.display_name == "Withdrawn"


class TestWorkRecordHours:
    """Tests for derived hour values on WorkRecord."""

    def test_hours_from_start_and_end(self):
        record = _record(
            start_time=datetime(2024, 1, 10, 9, 0), end_time=datetime(2024, 1, 10, 11, 30)
        )
        assert record.calculated_hours == 2.5

    def test_start_and_end_take_precedence_over_manual_hours(self):
        record = _record(
            start_time=datetime(2024, 1, 10, 9, 0),
            end_time=datetime(2024, 1, 10, 10, 0),
            hours_worked=8.0,
        )
        assert record.calculated_hours == 1.0

    def test_manual_hours_used_without_both_times(self):
        record = _record(start_time=datetime(2024, 1, 10, 9, 0), hours_worked=3.0)
        assert record.calculated_hours == 3.0

    def test_no_hour_fields_is_zero(self):
        assert _record().calculated_hours == 0.0
        assert _record().billable_hours == 0.0

    def test_end_before_start_clamps_to_zero(self):
        record = _record(
            start_time=datetime(2024, 1, 10, 17, 0),
            end_time=datetime(2024, 1, 10, 9, 0),
            break_duration=1.0,
        )
        assert record.calculated_hours == 0.0
        assert record.billable_hours == 0.0

    def test_break_subtracted(self):
        start = datetime(2024, 1, 10, 9, 0)
        record = _record(start_time=start, end_time=datetime(2024, 1, 10, 11, 0), break_duration=0.5)
        assert record.billable_hours == 1.5

    def test_break_longer_than_session_clamps_to_zero(self):
        record = _record(hours_worked=1.0, break_duration=2.0)
        assert record.billable_hours == 0.0


class TestEffectiveUnitRate:
    """Tests for per-unit rate fallback."""

    def test_record_rate_wins(self):
        company = Company(id="c1", name="A", payment_type=PaymentType.POINT, point_rate=5.0)
        assert _record(unit_rate=7.0).effective_unit_rate(company) == 7.0

    def test_record_rate_of_zero_is_not_overridden(self):
        company = Company(id="c1", name="A", payment_type=PaymentType.POINT, point_rate=5.0)
        assert _record(unit_rate=0.0).effective_unit_rate(company) == 0.0

    def test_company_rate_used_when_record_has_none(self):
        company = Company(id="c1", name="A", payment_type=PaymentType.POINT, point_rate=5.0)
        assert _record().effective_unit_rate(company) == 5.0

    def test_zero_when_no_rate_anywhere(self):
        company = Company(id="c1", name="A", payment_type=PaymentType.HOURLY, hourly_rate=30.0)
        assert _record().effective_unit_rate(company) == 0.0


class TestDateRange:
    """Tests for DateRange."""

    def test_contains_is_inclusive(self):
        rng = DateRange(start=date(2024, 1, 16), end=date(2024, 2, 15))
        assert rng.contains(date(2024, 1, 16))
        assert rng.contains(date(2024, 2, 15))
        assert not rng.contains(date(2024, 1, 15))
        assert not rng.contains(date(2024, 2, 16))

    def test_day_boundaries(self):
        rng = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
        assert rng.start_of_day == datetime(2024, 1, 1, 0, 0, 0)
        assert rng.end_of_day == datetime(2024, 1, 31, 23, 59, 59)
        assert rng.days == 31

    def test_str(self):
        rng = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
        assert str(rng) == "2024-01-01 - 2024-01-31"


class TestEarningsBreakdown:
    """Tests for EarningsBreakdown."""

    def test_zero(self):
        zero = EarningsBreakdown.zero()
        assert zero.total == 0.0
        assert zero == EarningsBreakdown()

    def test_addition_is_componentwise(self):
        a = EarningsBreakdown(hours=1, units=2, hourly_pay=3, piece_pay=4, transport_pay=5, total=12)
        b = EarningsBreakdown(hours=1, units=1, hourly_pay=1, piece_pay=1, transport_pay=1, total=3)
        assert a + b == EarningsBreakdown(
            hours=2, units=3, hourly_pay=4, piece_pay=5, transport_pay=6, total=15
        )
