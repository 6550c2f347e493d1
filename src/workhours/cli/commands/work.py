"""Work record commands."""

from datetime import date, datetime
from typing import Optional

import click
from workhours.cli.company_resolution import resolve_company_or_exit
from workhours.cli.error_handling import handle_domain_error
from workhours.domain.company import CompanyService
from workhours.domain.earnings import record_earnings
from workhours.domain.entities import WorkRecord
from workhours.domain.work_record import WorkRecordService
from workhours.utils.date_parser import parse_date, session_bounds
from workhours.utils.number_parser import parse_duration, parse_number


def _parse_optional(ctx, label: str, value: str | None, parser) -> Optional[float]:
    if value is None:
        return None
    try:
        return parser(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def _session_or_exit(
    ctx, day: date, start: str | None, end: str | None, hours: str | None = None
) -> tuple[Optional[datetime], Optional[datetime]]:
    if start is None and end is None:
        return None, None
    if hours is not None:
        click.echo("Error: --hours cannot be combined with --start/--end.", err=True)
        ctx.exit(1)
    if start is None or end is None:
        click.echo("Error: --start and --end must be given together.", err=True)
        ctx.exit(1)
    try:
        return session_bounds(day, start, end)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


def _resolve_record_or_exit(ctx, service: WorkRecordService, record_id: str) -> WorkRecord:
    """Find a work record by ID or unique ID prefix."""
    prefix = record_id.strip().lower()
    if not prefix:
        click.echo("Error: Work record ID cannot be empty", err=True)
        ctx.exit(1)
    matches = [r for r in service.list_records() if r.id.startswith(prefix)]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        click.echo(f"Error: Work record {record_id} not found", err=True)
    else:
        click.echo(f"Error: Work record ID prefix '{record_id}' is ambiguous", err=True)
    ctx.exit(1)


@click.group()
def work_group():
    """Log and manage work records."""
    pass


@work_group.command("add")
@click.option("--company", required=True, help="Company name or ID")
@click.option("--date", "date_str", default="today", show_default=True,
              help="Work date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--start", help="Start time (e.g., 09:00)")
@click.option("--end", help="End time (e.g., 17:00)")
@click.option("--hours", help="Hours worked, used when --start/--end are not given")
@click.option("--break", "break_str", help="Break duration (e.g., 0.5, 0:30, 30m)")
@click.option("--units", help="Piecework units")
@click.option("--unit-rate", help="Rate per unit (defaults to the company's point rate)")
@click.option("--transport", help="Transport bill")
@click.pass_context
def add_work(
    ctx,
    company: str,
    date_str: str,
    start: str | None,
    end: str | None,
    hours: str | None,
    break_str: str | None,
    units: str | None,
    unit_rate: str | None,
    transport: str | None,
):
    """Log a work session or piecework units.

    Examples:
        workhours work add --company Acme --date 2024-01-10 --start 09:00 --end 17:00 --break 1
        workhours work add --company Acme --hours 4.5 --transport 12
        workhours work add --company "Packing Co" --units 12
    """
    db = ctx.obj["db"]
    company_obj = resolve_company_or_exit(ctx, CompanyService(db), company)

    try:
        work_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    start_time, end_time = _session_or_exit(ctx, work_date, start, end, hours)

    service = WorkRecordService(db)
    try:
        record = service.add_record(
            company_id=company_obj.id,
            record_date=work_date,
            start_time=start_time,
            end_time=end_time,
            hours_worked=_parse_optional(ctx, "hours", hours, parse_duration),
            break_duration=_parse_optional(ctx, "break", break_str, parse_duration),
            unit_count=_parse_optional(ctx, "units", units, parse_number),
            unit_rate=_parse_optional(ctx, "unit rate", unit_rate, parse_number),
            transport_bill=_parse_optional(ctx, "transport", transport, parse_number),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    earnings = record_earnings(company_obj, record)
    click.echo(f"Logged work record {record.id[:8]}")
    click.echo(f"  Company: {company_obj.name}")
    click.echo(f"  Date: {record.date}")
    if earnings.hours:
        click.echo(f"  Billable hours: {earnings.hours:.2f}")
    if earnings.units:
        click.echo(f"  Units: {earnings.units:.2f}")
    click.echo(f"  Earned: {earnings.total:,.2f}")


@work_group.command("list")
@click.option("--company", help="Company name or ID")
@click.pass_context
def list_work(ctx, company: str | None):
    """List work records, most recent first."""
    db = ctx.obj["db"]
    company_service = CompanyService(db)
    service = WorkRecordService(db)

    company_id = None
    if company is not None:
        company_id = resolve_company_or_exit(ctx, company_service, company).id

    records = service.list_records(company_id=company_id)
    if not records:
        click.echo("No work records found.")
        return

    companies = {c.id: c for c in company_service.list_companies()}
    click.echo("\nWork records:")
    click.echo("-" * 80)
    for record in records:
        comp = companies.get(record.company_id)
        if comp is None:
            click.echo(f"{record.id[:8]} | {record.date} | Unknown Company")
            continue
        earnings = record_earnings(comp, record)
        click.echo(
            f"{record.id[:8]} | {record.date} | {comp.name:20s} | "
            f"{earnings.hours:6.2f} h | {earnings.units:6.2f} u | {earnings.total:>10,.2f}"
        )


@work_group.command("edit")
@click.argument("record_id")
@click.option("--date", "date_str", help="Work date")
@click.option("--start", help="Start time (e.g., 09:00)")
@click.option("--end", help="End time (e.g., 17:00)")
@click.option("--hours", help="Hours worked")
@click.option("--break", "break_str", help="Break duration")
@click.option("--units", help="Piecework units")
@click.option("--unit-rate", help="Rate per unit")
@click.option("--transport", help="Transport bill")
@click.pass_context
def edit_work(
    ctx,
    record_id: str,
    date_str: str | None,
    start: str | None,
    end: str | None,
    hours: str | None,
    break_str: str | None,
    units: str | None,
    unit_rate: str | None,
    transport: str | None,
):
    """Edit a work record.

    Updates only the fields that are provided. RECORD_ID can be the short
    ID shown by 'work list'. --hours turns a session into manual hours and
    --start/--end turn manual hours into a session.
    """
    service = WorkRecordService(ctx.obj["db"])
    record = _resolve_record_or_exit(ctx, service, record_id)

    changes = {}
    if date_str is not None:
        try:
            changes["date"] = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)
    if start is not None or end is not None:
        day = changes.get("date", record.date)
        changes["start_time"], changes["end_time"] = _session_or_exit(ctx, day, start, end, hours)
        changes["hours_worked"] = None
    elif hours is not None:
        # Session times take precedence over manual hours, so drop them
        changes["start_time"] = changes["end_time"] = None
    elif "date" in changes and record.start_time is not None and record.end_time is not None:
        # Keep the session times on the new day
        changes["start_time"] = datetime.combine(changes["date"], record.start_time.time())
        changes["end_time"] = datetime.combine(changes["date"], record.end_time.time())

    for key, label, value, parser in (
        ("hours_worked", "hours", hours, parse_duration),
        ("break_duration", "break", break_str, parse_duration),
        ("unit_count", "units", units, parse_number),
        ("unit_rate", "unit rate", unit_rate, parse_number),
        ("transport_bill", "transport", transport, parse_number),
    ):
        if value is not None:
            changes[key] = _parse_optional(ctx, label, value, parser)

    if not changes:
        click.echo("Nothing to update.")
        return

    try:
        service.update_record(record.id, **changes)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated work record {record.id[:8]}")


@work_group.command("delete")
@click.argument("record_id")
@click.pass_context
def delete_work(ctx, record_id: str):
    """Delete a work record."""
    service = WorkRecordService(ctx.obj["db"])
    record = _resolve_record_or_exit(ctx, service, record_id)

    try:
        service.delete_record(record.id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted work record {record.id[:8]}")


def register_commands(cli):
    """Register work commands with main CLI."""
    cli.add_command(work_group, name="work")
