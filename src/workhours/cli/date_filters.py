"""CLI helpers for invoice period resolution."""

from datetime import date

import click

from workhours.domain.billing_period import custom_range, previous_period, resolve_period
from workhours.domain.entities import Company, DateRange
from workhours.utils.date_parser import parse_date


def _parse_or_exit(ctx, label: str, value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def resolve_cli_period(
    ctx,
    company: Company,
    *,
    reference_date: str | None,
    start_date: str | None,
    end_date: str | None,
    last_cycle: bool = False,
) -> DateRange:
    """Resolve the invoice period from CLI options.

    A reference date selects the company's billing cycle around it; a start
    and end date give a custom range; with no option the current cycle is
    used. ``last_cycle`` selects the cycle before the current one.
    """
    if (start_date is None) != (end_date is None):
        click.echo("Error: --start-date and --end-date must be given together.", err=True)
        ctx.exit(1)

    selectors = sum(
        1 for is_set in (reference_date is not None, start_date is not None, last_cycle) if is_set
    )
    if selectors > 1:
        click.echo(
            "Error: Use only one of --date, --start-date/--end-date or --last-cycle.",
            err=True,
        )
        ctx.exit(1)

    if start_date is not None:
        start = _parse_or_exit(ctx, "start date", start_date)
        end = _parse_or_exit(ctx, "end date", end_date)
        return custom_range(start, end)

    reference = date.today()
    if reference_date is not None:
        reference = _parse_or_exit(ctx, "date", reference_date)

    period = resolve_period(company.month_start_day, reference)
    if last_cycle:
        period = previous_period(company.month_start_day, period)
    return period
