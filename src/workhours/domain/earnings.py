"""Record selection and earnings aggregation."""

from typing import Iterable, Sequence

from workhours.domain.entities import (
    Company,
    DateRange,
    EarningsBreakdown,
    WorkRecord,
)


def select_records(
    records: Iterable[WorkRecord], company_id: str, date_range: DateRange
) -> list[WorkRecord]:
    """Select a company's work records dated within a range.

    Both range bounds are inclusive. Input order is preserved.

    Args:
        records: All work records
        company_id: Company ID to select
        date_range: Range the record date must fall in

    Returns:
        List of matching work records
    """
    return [
        record
        for record in records
        if record.company_id == company_id and date_range.contains(record.date)
    ]


def compute_earnings(
    company: Company, records: Sequence[WorkRecord]
) -> EarningsBreakdown:
    """Aggregate work records into an earnings breakdown.

    Hourly and piecework pay are always both summed, whatever the company's
    payment type: a record can carry hours and units at once, and absent
    fields simply contribute zero. The per-unit rate falls back from the
    record's own rate to the company's point rate, then to zero.

    Args:
        company: Company the records belong to
        records: Work records to aggregate

    Returns:
        EarningsBreakdown with hours, units and pay components
    """
    hours = 0.0
    units = 0.0
    piece_pay = 0.0
    transport_pay = 0.0

    for record in records:
        hours += record.billable_hours
        unit_count = record.unit_count or 0.0
        units += unit_count
        piece_pay += unit_count * record.effective_unit_rate(company)
        transport_pay += record.transport_bill or 0.0

    hourly_pay = hours * (company.hourly_rate or 0.0)

    return EarningsBreakdown(
        hours=hours,
        units=units,
        hourly_pay=hourly_pay,
        piece_pay=piece_pay,
        transport_pay=transport_pay,
        total=hourly_pay + piece_pay + transport_pay,
    )


def record_earnings(company: Company, record: WorkRecord) -> EarningsBreakdown:
    """Earnings breakdown for a single work record."""
    return compute_earnings(company, [record])
