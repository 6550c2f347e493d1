"""Summary command."""

import click
from workhours.domain.invoice import InvoiceService
from workhours.utils.date_parser import parse_date


@click.command("summary")
@click.option("--date", "reference_date", help="Any day in the billing cycles (default: today)")
@click.pass_context
def summary(ctx, reference_date: str | None):
    """Show every company's earnings for the current billing cycles.

    Each company is summarized over its own cycle around the given date.
    """
    service = InvoiceService(ctx.obj["db"])

    reference = None
    if reference_date is not None:
        try:
            reference = parse_date(reference_date)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    report = service.period_summary(reference)
    if not report.lines:
        click.echo("No companies found.")
        return

    click.echo(f"\nSummary for {report.reference_date}")
    click.echo("-" * 70)
    for line in report.lines:
        click.echo(
            f"{line.company.name:<25s} {str(line.period):<25s} {line.earnings.total:>18,.2f}"
        )
    click.echo("-" * 70)
    click.echo(f"{'Grand total':<51s} {report.grand_total:>18,.2f}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
