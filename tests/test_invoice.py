"""Tests for invoices, payment marking and the period summary."""

import pytest
from datetime import date, datetime

from workhours.cli.main import cli
from workhours.domain.entities import DateRange, PaymentAction
from workhours.domain.errors import NotFoundError, ValidationError


@pytest.fixture
def january_session(work_record_service, hourly_company):
    """A 9-17 session with a one hour break on Jan 10, 2024."""
    return work_record_service.add_record(
        hourly_company.id,
        date(2024, 1, 10),
        start_time=datetime(2024, 1, 10, 9, 0),
        end_time=datetime(2024, 1, 10, 17, 0),
        break_duration=1.0,
    )


class TestBuildInvoice:
    """Tests for InvoiceService.build_invoice."""

    def test_hourly_calendar_month(self, invoice_service, hourly_company, january_session):
        invoice = invoice_service.build_invoice(
            hourly_company.id, reference_date=date(2024, 1, 25)
        )

        assert invoice.company == hourly_company
        assert invoice.period == DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
        assert invoice.records == (january_session,)
        assert invoice.earnings.hours == 7.0
        assert invoice.earnings.total == 210.0

    def test_record_outside_cycle_is_excluded(
        self, invoice_service, work_record_service, hourly_company, january_session
    ):
        work_record_service.add_record(hourly_company.id, date(2024, 2, 1), hours_worked=5.0)

        invoice = invoice_service.build_invoice(
            hourly_company.id, reference_date=date(2024, 1, 1)
        )

        assert invoice.records == (january_session,)

    def test_mid_month_cycle(self, invoice_service, work_record_service, point_company):
        work_record_service.add_record(point_company.id, date(2024, 1, 20), unit_count=12.0)
        work_record_service.add_record(point_company.id, date(2024, 2, 16), unit_count=1.0)

        invoice = invoice_service.build_invoice(
            point_company.id, reference_date=date(2024, 1, 25)
        )

        assert invoice.period == DateRange(start=date(2024, 1, 16), end=date(2024, 2, 15))
        assert invoice.earnings.units == 12.0
        assert invoice.earnings.total == 60.0

    def test_custom_range(self, invoice_service, work_record_service, hourly_company, january_session):
        work_record_service.add_record(hourly_company.id, date(2024, 1, 20), hours_worked=2.0)

        invoice = invoice_service.build_invoice(
            hourly_company.id,
            date_range=DateRange(start=date(2024, 1, 15), end=date(2024, 1, 21)),
        )

        assert invoice.earnings.hours == 2.0
        assert invoice.earnings.total == 60.0

    def test_empty_period(self, invoice_service, hourly_company):
        invoice = invoice_service.build_invoice(
            hourly_company.id, reference_date=date(2024, 1, 10)
        )
        assert invoice.records == ()
        assert invoice.earnings.total == 0.0

    def test_rejects_both_reference_and_range(self, invoice_service, hourly_company):
        with pytest.raises(ValidationError):
            invoice_service.build_invoice(
                hourly_company.id,
                reference_date=date(2024, 1, 10),
                date_range=DateRange(start=date(2024, 1, 1), end=date(2024, 1, 2)),
            )

    def test_unknown_company(self, invoice_service):
        with pytest.raises(NotFoundError):
            invoice_service.build_invoice("missing", reference_date=date(2024, 1, 10))


class TestMarkPayment:
    """Tests for InvoiceService.mark_payment."""

    def test_records_invoice_total(
        self, invoice_service, payment_service, hourly_company, january_session
    ):
        invoice = invoice_service.build_invoice(
            hourly_company.id, reference_date=date(2024, 1, 10)
        )

        payment = invoice_service.mark_payment(invoice, "due")

        assert payment.company_id == hourly_company.id
        assert payment.period_start == date(2024, 1, 1)
        assert payment.period_end == date(2024, 1, 31)
        assert payment.amount == 210.0
        assert payment.action == PaymentAction.DUE
        assert [p.id for p in payment_service.list_payments()] == [payment.id]

    def test_requires_records(self, invoice_service, payment_service, hourly_company):
        invoice = invoice_service.build_invoice(
            hourly_company.id, reference_date=date(2024, 1, 10)
        )

        with pytest.raises(ValidationError):
            invoice_service.mark_payment(invoice, PaymentAction.WITHDRAWN)
        assert payment_service.list_payments() == []


class TestPeriodSummary:
    """Tests for InvoiceService.period_summary."""

    def test_each_company_uses_its_own_cycle(
        self, invoice_service, work_record_service, hourly_company, point_company, january_session
    ):
        work_record_service.add_record(point_company.id, date(2024, 1, 5), unit_count=4.0)

        report = invoice_service.period_summary(date(2024, 1, 10))

        by_name = {line.company.name: line for line in report.lines}
        assert by_name["Acme"].period == DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
        assert by_name["Acme"].earnings.total == 210.0
        assert by_name["Packing Co"].period == DateRange(
            start=date(2023, 12, 16), end=date(2024, 1, 15)
        )
        assert by_name["Packing Co"].earnings.total == 20.0
        assert report.grand_total == 230.0

    def test_no_companies(self, invoice_service):
        report = invoice_service.period_summary(date(2024, 1, 10))
        assert report.lines == ()
        assert report.grand_total == 0.0


def test_invoice_command(cli_runner, temp_db, hourly_company, january_session):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "invoice", "--company", "Acme", "--date", "2024-01-25"],
    )

    assert result.exit_code == 0
    assert "Invoice: Acme" in result.output
    assert "2024-01-01 - 2024-01-31" in result.output
    assert "Total hours" in result.output
    assert "7.00" in result.output
    assert "210.00" in result.output


def test_invoice_command_point_company(cli_runner, temp_db, work_record_service, point_company):
    work_record_service.add_record(point_company.id, date(2024, 1, 20), unit_count=12.0)

    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "invoice", "--company", "Packing Co",
            "--date", "2024-01-25",
        ],
    )

    assert result.exit_code == 0
    assert "Total units" in result.output
    assert "2024-01-16 - 2024-02-15" in result.output
    assert "60.00" in result.output


def test_invoice_mark_due(cli_runner, temp_db, payment_service, hourly_company, january_session):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "invoice", "--company", "Acme",
            "--date", "2024-01-25", "--mark-due",
        ],
    )

    assert result.exit_code == 0
    assert "Recorded due payment" in result.output
    [payment] = payment_service.list_payments()
    assert payment.amount == 210.0
    assert payment.action == PaymentAction.DUE


def test_invoice_mark_due_without_records(cli_runner, temp_db, payment_service, hourly_company):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "invoice", "--company", "Acme",
            "--date", "2024-01-25", "--mark-due",
        ],
    )

    assert result.exit_code == 1
    assert "No work records" in result.output
    assert payment_service.list_payments() == []


def test_invoice_rejects_mark_due_with_withdraw(cli_runner, temp_db, hourly_company):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "invoice", "--company", "Acme",
            "--mark-due", "--withdraw",
        ],
    )
    assert result.exit_code == 1
    assert "cannot be combined" in result.output


def test_invoice_custom_range(cli_runner, temp_db, hourly_company, january_session):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "invoice", "--company", "Acme",
            "--start-date", "2024-01-12", "--end-date", "2024-01-08",
        ],
    )

    assert result.exit_code == 0
    assert "2024-01-08 - 2024-01-12" in result.output
    assert "210.00" in result.output


def test_summary_command(cli_runner, temp_db, hourly_company, point_company, january_session):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "summary", "--date", "2024-01-10"]
    )

    assert result.exit_code == 0
    assert "Acme" in result.output
    assert "Packing Co" in result.output
    assert "Grand total" in result.output
    assert "210.00" in result.output


def test_summary_command_without_companies(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "summary"])
    assert result.exit_code == 0
    assert "No companies found" in result.output
