"""Domain model entities for workhours.

These are pure data classes representing business concepts, independent of
database schema. Billing and earnings calculations operate on these values
only, so they can be reused with any persistence provider.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import Optional


class PaymentType(str, Enum):
    """How a company pays for work."""

    HOURLY = "hourly"
    POINT = "point"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class PaymentAction(str, Enum):
    """Action recorded against an invoice period."""

    DUE = "due"
    WITHDRAWN = "withdrawn"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class Company:
    """Company (client or employer) domain entity.

    Only the rate matching ``payment_type`` is meaningful for display, but
    earnings are computed from both rates (see ``compute_earnings``).
    """

    id: str
    name: str
    payment_type: PaymentType
    hourly_rate: Optional[float] = None
    point_rate: Optional[float] = None
    month_start_day: int = 1

    @property
    def active_rate(self) -> Optional[float]:
        """Rate matching the company's payment type."""
        if self.payment_type == PaymentType.HOURLY:
            return self.hourly_rate
        return self.point_rate


@dataclass(frozen=True)
class WorkRecord:
    """A logged work session or batch of piecework units."""

    id: str
    company_id: str
    date: date
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    hours_worked: Optional[float] = None
    break_duration: Optional[float] = None
    unit_count: Optional[float] = None
    unit_rate: Optional[float] = None
    transport_bill: Optional[float] = None

    @property
    def calculated_hours(self) -> float:
        """Raw worked hours.

        Start and end times take precedence over the manual ``hours_worked``
        value. A session ending before it starts counts as zero hours.
        """
        if self.start_time is not None and self.end_time is not None:
            elapsed = (self.end_time - self.start_time).total_seconds() / 3600.0
            return max(elapsed, 0.0)
        if self.hours_worked is not None:
            return self.hours_worked
        return 0.0

    @property
    def billable_hours(self) -> float:
        """Raw hours minus break time, never negative."""
        return max(self.calculated_hours - (self.break_duration or 0.0), 0.0)

    def effective_unit_rate(self, company: Company) -> float:
        """Resolve the per-unit rate: record override, company default, zero."""
        if self.unit_rate is not None:
            return self.unit_rate
        if company.point_rate is not None:
            return company.point_rate
        return 0.0


@dataclass(frozen=True)
class PaymentRecord:
    """Snapshot of an invoice total marked as due or withdrawn."""

    id: str
    company_id: str
    period_start: date
    period_end: date
    amount: float
    action: PaymentAction
    created_at: datetime


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days.

    ``is_fallback`` marks the degenerate single-day range returned when a
    billing period could not be computed.
    """

    start: date
    end: date
    is_fallback: bool = False

    @property
    def start_of_day(self) -> datetime:
        return datetime.combine(self.start, time.min)

    @property
    def end_of_day(self) -> datetime:
        return datetime.combine(self.end, time(23, 59, 59))

    @property
    def days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        """Return True if ``day`` falls within the range, bounds included."""
        return self.start <= day <= self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()} - {self.end.isoformat()}"


@dataclass(frozen=True)
class EarningsBreakdown:
    """Aggregated earnings for a set of work records."""

    hours: float = 0.0
    units: float = 0.0
    hourly_pay: float = 0.0
    piece_pay: float = 0.0
    transport_pay: float = 0.0
    total: float = 0.0

    @classmethod
    def zero(cls) -> "EarningsBreakdown":
        return cls()

    def __add__(self, other: "EarningsBreakdown") -> "EarningsBreakdown":
        if not isinstance(other, EarningsBreakdown):
            return NotImplemented
        return EarningsBreakdown(
            hours=self.hours + other.hours,
            units=self.units + other.units,
            hourly_pay=self.hourly_pay + other.hourly_pay,
            piece_pay=self.piece_pay + other.piece_pay,
            transport_pay=self.transport_pay + other.transport_pay,
            total=self.total + other.total,
        )


@dataclass(frozen=True)
class Invoice:
    """Earnings of one company over one billing period."""

    company: Company
    period: DateRange
    records: tuple[WorkRecord, ...]
    earnings: EarningsBreakdown


@dataclass(frozen=True)
class SummaryLine:
    """One company's row in a period summary."""

    company: Company
    period: DateRange
    earnings: EarningsBreakdown


@dataclass(frozen=True)
class PeriodSummary:
    """Earnings of every company for the periods enclosing a reference date."""

    reference_date: date
    lines: tuple[SummaryLine, ...] = field(default_factory=tuple)

    @property
    def grand_total(self) -> float:
        return sum(line.earnings.total for line in self.lines)
