"""Invoice command."""

import click
from workhours.cli.company_resolution import resolve_company_or_exit
from workhours.cli.date_filters import resolve_cli_period
from workhours.cli.error_handling import handle_domain_error
from workhours.domain.company import CompanyService
from workhours.domain.entities import PaymentAction, PaymentType
from workhours.domain.invoice import InvoiceService


@click.command("invoice")
@click.option("--company", required=True, help="Company name or ID")
@click.option("--date", "reference_date", help="Any day in the billing cycle (default: today)")
@click.option("--start-date", help="Start of a custom range")
@click.option("--end-date", help="End of a custom range")
@click.option("--last-cycle", is_flag=True, help="Use the billing cycle before the current one")
@click.option("--mark-due", is_flag=True, help="Record the invoice total as due")
@click.option("--withdraw", is_flag=True, help="Record the invoice total as withdrawn")
@click.option("--verbose", "-v", is_flag=True, help="List the work records of the period")
@click.pass_context
def invoice(
    ctx,
    company: str,
    reference_date: str | None,
    start_date: str | None,
    end_date: str | None,
    last_cycle: bool,
    mark_due: bool,
    withdraw: bool,
    verbose: bool,
):
    """Show the invoice of a company for one billing period.

    Examples:
        workhours invoice --company Acme
        workhours invoice --company Acme --date 2024-01-25 --mark-due
        workhours invoice --company Acme --start-date 2024-01-01 --end-date 2024-01-07
    """
    if mark_due and withdraw:
        click.echo("Error: --mark-due and --withdraw cannot be combined.", err=True)
        ctx.exit(1)

    db = ctx.obj["db"]
    service = InvoiceService(db)
    company_obj = resolve_company_or_exit(ctx, CompanyService(db), company)
    period = resolve_cli_period(
        ctx,
        company_obj,
        reference_date=reference_date,
        start_date=start_date,
        end_date=end_date,
        last_cycle=last_cycle,
    )

    try:
        inv = service.build_invoice(company_obj.id, date_range=period)
    except ValueError as e:
        handle_domain_error(ctx, e)

    earnings = inv.earnings
    click.echo(f"\nInvoice: {company_obj.name}")
    click.echo("-" * 50)
    click.echo(f"{'Period':<20s} {str(inv.period):>29s}")
    if inv.period.is_fallback:
        click.echo("Warning: billing cycle could not be computed; showing a single day.", err=True)
    if company_obj.payment_type == PaymentType.HOURLY:
        click.echo(f"{'Total hours':<20s} {earnings.hours:>29.2f}")
        click.echo(f"{'Hourly pay':<20s} {earnings.hourly_pay:>29,.2f}")
        if earnings.piece_pay:
            click.echo(f"{'Units pay':<20s} {earnings.piece_pay:>29,.2f}")
    else:
        click.echo(f"{'Total units':<20s} {earnings.units:>29.2f}")
        click.echo(f"{'Units pay':<20s} {earnings.piece_pay:>29,.2f}")
        if earnings.hourly_pay:
            click.echo(f"{'Hourly pay':<20s} {earnings.hourly_pay:>29,.2f}")
    if earnings.transport_pay > 0:
        click.echo(f"{'Transport':<20s} {earnings.transport_pay:>29,.2f}")
    click.echo(f"{'Total earned':<20s} {earnings.total:>29,.2f}")

    if verbose:
        click.echo()
        for record in inv.records:
            click.echo(
                f"  {record.date} | {record.billable_hours:6.2f} h | "
                f"{record.unit_count or 0:6.2f} u | transport {record.transport_bill or 0:,.2f}"
            )

    action = PaymentAction.DUE if mark_due else PaymentAction.WITHDRAWN if withdraw else None
    if action is not None:
        try:
            payment = service.mark_payment(inv, action)
        except ValueError as e:
            handle_domain_error(ctx, e)
        click.echo(f"\nRecorded {payment.action.display_name.lower()} payment {payment.id[:8]}")


def register_commands(cli):
    """Register invoice command with main CLI."""
    cli.add_command(invoice)
