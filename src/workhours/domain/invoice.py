"""Invoice and period summary domain service."""

from datetime import date
from typing import Optional

from workhours.database.base import Database
from workhours.domain.billing_period import resolve_period
from workhours.domain.company import CompanyService
from workhours.domain.earnings import compute_earnings, select_records
from workhours.domain.entities import (
    DateRange,
    Invoice,
    PaymentAction,
    PaymentRecord,
    PeriodSummary,
    SummaryLine,
)
from workhours.domain.errors import ValidationError
from workhours.domain.payment import PaymentService


class InvoiceService:
    """Service for building invoices and summaries from logged work."""

    def __init__(self, db: Database):
        """Initialize invoice service.

        Args:
            db: Database instance
        """
        self.db = db
        self.company_service = CompanyService(db)
        self.payment_service = PaymentService(db)

    def build_invoice(
        self,
        company_id: str,
        reference_date: Optional[date] = None,
        date_range: Optional[DateRange] = None,
    ) -> Invoice:
        """Build the invoice of a company for one period.

        The period is either given explicitly as ``date_range`` or resolved
        from the company's billing cycle around ``reference_date`` (today
        when neither is given).

        Args:
            company_id: Company ID
            reference_date: Any day in the wanted billing cycle
            date_range: Explicit custom range

        Returns:
            Invoice with the period, its records and the earnings

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If both reference_date and date_range are given
        """
        if reference_date is not None and date_range is not None:
            raise ValidationError("Specify either a reference date or a date range, not both")

        company = self.company_service.require_company(company_id)
        if date_range is None:
            date_range = resolve_period(
                company.month_start_day, reference_date or date.today()
            )

        records = select_records(self.db.load_work_records(), company.id, date_range)
        return Invoice(
            company=company,
            period=date_range,
            records=tuple(records),
            earnings=compute_earnings(company, records),
        )

    def mark_payment(self, invoice: Invoice, action: PaymentAction | str) -> PaymentRecord:
        """Record the invoice total as due or withdrawn.

        Raises:
            ValidationError: If the invoice has no work records
        """
        if not invoice.records:
            raise ValidationError(
                f"No work records for {invoice.company.name} in {invoice.period}"
            )
        return self.payment_service.record_payment(
            company_id=invoice.company.id,
            period_start=invoice.period.start,
            period_end=invoice.period.end,
            amount=invoice.earnings.total,
            action=action,
        )

    def period_summary(self, reference_date: Optional[date] = None) -> PeriodSummary:
        """Summarize every company's earnings for the cycles around a date.

        Each company uses its own billing cycle, so the periods in the
        summary may differ per company.
        """
        reference_date = reference_date or date.today()
        records = self.db.load_work_records()

        lines = []
        for company in self.company_service.list_companies():
            period = resolve_period(company.month_start_day, reference_date)
            selected = select_records(records, company.id, period)
            lines.append(
                SummaryLine(
                    company=company,
                    period=period,
                    earnings=compute_earnings(company, selected),
                )
            )

        return PeriodSummary(reference_date=reference_date, lines=tuple(lines))
