"""Payment ledger commands."""

import click
from workhours.cli.company_resolution import resolve_company_or_exit
from workhours.cli.error_handling import handle_domain_error
from workhours.domain.company import CompanyService
from workhours.domain.payment import PaymentService


@click.group()
def payment_group():
    """Manage payment records."""
    pass


@payment_group.command("list")
@click.option("--company", help="Company name or ID")
@click.pass_context
def list_payments(ctx, company: str | None):
    """List payment records, most recent first."""
    db = ctx.obj["db"]
    company_service = CompanyService(db)
    service = PaymentService(db)

    company_id = None
    if company is not None:
        company_id = resolve_company_or_exit(ctx, company_service, company).id

    payments = service.list_payments(company_id=company_id)
    if not payments:
        click.echo("No payment records yet.")
        return

    names = {c.id: c.name for c in company_service.list_companies()}
    click.echo("\nPayments:")
    click.echo("-" * 90)
    for payment in payments:
        click.echo(
            f"{payment.id[:8]} | {names.get(payment.company_id, 'Unknown Company'):20s} | "
            f"{payment.period_start} - {payment.period_end} | "
            f"{payment.action.display_name:9s} | {payment.amount:>10,.2f} | "
            f"recorded {payment.created_at:%Y-%m-%d}"
        )


@payment_group.command("delete")
@click.argument("payment_id")
@click.pass_context
def delete_payment(ctx, payment_id: str):
    """Delete a payment record.

    PAYMENT_ID can be the short ID shown by 'payment list'.
    """
    service = PaymentService(ctx.obj["db"])
    prefix = payment_id.strip().lower()
    if not prefix:
        click.echo("Error: Payment record ID cannot be empty", err=True)
        ctx.exit(1)
    matches = [p for p in service.list_payments() if p.id.startswith(prefix)]
    if len(matches) != 1:
        problem = "not found" if not matches else "is ambiguous"
        click.echo(f"Error: Payment record {payment_id} {problem}", err=True)
        ctx.exit(1)

    try:
        service.delete_payment(matches[0].id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted payment record {matches[0].id[:8]}")


def register_commands(cli):
    """Register payment commands with main CLI."""
    cli.add_command(payment_group, name="payment")
