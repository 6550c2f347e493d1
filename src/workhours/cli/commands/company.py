"""Company management commands."""

import click
from workhours.cli.company_resolution import resolve_company_or_exit
from workhours.cli.error_handling import handle_domain_error
from workhours.domain.company import CompanyService
from workhours.domain.entities import Company, PaymentType
from workhours.domain.work_record import WorkRecordService
from workhours.utils.number_parser import parse_number

PAYMENT_TYPE_CHOICE = click.Choice([t.value for t in PaymentType], case_sensitive=False)
START_DAY_CHOICE = click.Choice(["1", "16"])


def _rate_label(company: Company) -> str:
    rate = company.active_rate
    if rate is None:
        return "-"
    if company.payment_type == PaymentType.POINT:
        return f"{rate:,.2f}/unit"
    return f"{rate:,.2f}/h"


def _parse_rate_or_exit(ctx, rate: str) -> float:
    try:
        return parse_number(rate)
    except ValueError as e:
        click.echo(f"Error: Invalid rate: {e}", err=True)
        ctx.exit(1)


@click.group()
def company_group():
    """Manage companies."""
    pass


@company_group.command("add")
@click.argument("name", metavar="COMPANY_NAME")
@click.option(
    "--type", "payment_type", type=PAYMENT_TYPE_CHOICE, default="hourly", show_default=True,
    help="Payment model",
)
@click.option("--rate", required=True, help="Hourly rate, or rate per unit for point companies")
@click.option(
    "--start-day", type=START_DAY_CHOICE, default="1", show_default=True,
    help="Billing cycle start day (1 = calendar month, 16 = 16th to 15th)",
)
@click.pass_context
def add_company(ctx, name: str, payment_type: str, rate: str, start_day: str):
    """Register a new company.

    Examples:
        workhours company add "Acme" --rate 30
        workhours company add "Packing Co" --type point --rate 5 --start-day 16
    """
    service = CompanyService(ctx.obj["db"])
    rate_value = _parse_rate_or_exit(ctx, rate)
    is_point = payment_type.lower() == PaymentType.POINT.value

    try:
        company = service.create_company(
            name=name,
            payment_type=payment_type,
            hourly_rate=None if is_point else rate_value,
            point_rate=rate_value if is_point else None,
            month_start_day=int(start_day),
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created company '{company.name}' (ID: {company.id[:8]})")


@company_group.command("list")
@click.pass_context
def list_companies(ctx):
    """List all companies."""
    service = CompanyService(ctx.obj["db"])

    companies = service.list_companies()
    if not companies:
        click.echo("No companies found.")
        return

    click.echo("\nCompanies:")
    click.echo("-" * 70)
    for comp in companies:
        click.echo(
            f"ID: {comp.id[:8]} | {comp.name:20s} | {comp.payment_type.display_name:6s} | "
            f"Rate: {_rate_label(comp):>12s} | Cycle starts: {comp.month_start_day}"
        )


@company_group.command("show")
@click.argument("company", metavar="COMPANY")
@click.pass_context
def show_company(ctx, company: str):
    """Show a company with its all-time totals.

    COMPANY can be a company name or ID.
    """
    from workhours.domain.earnings import compute_earnings

    db = ctx.obj["db"]
    company_obj = resolve_company_or_exit(ctx, CompanyService(db), company)
    records = WorkRecordService(db).list_records(company_id=company_obj.id)
    earnings = compute_earnings(company_obj, records)

    click.echo(f"{company_obj.name} (ID: {company_obj.id})")
    click.echo(f"  Payment type: {company_obj.payment_type.display_name}")
    click.echo(f"  Rate: {_rate_label(company_obj)}")
    click.echo(f"  Billing cycle starts on day {company_obj.month_start_day}")
    click.echo(f"  Work records: {len(records)}")
    if company_obj.payment_type == PaymentType.HOURLY:
        click.echo(f"  Total hours: {earnings.hours:.2f}")
    else:
        click.echo(f"  Total units: {earnings.units:.2f}")
    click.echo(f"  Total earned: {earnings.total:,.2f}")


@company_group.command("edit")
@click.argument("company", metavar="COMPANY")
@click.option("--name", help="New company name")
@click.option("--type", "payment_type", type=PAYMENT_TYPE_CHOICE, help="New payment model")
@click.option("--hourly-rate", help="New hourly rate")
@click.option("--point-rate", help="New rate per unit")
@click.option("--start-day", type=START_DAY_CHOICE, help="New billing cycle start day")
@click.pass_context
def edit_company(
    ctx,
    company: str,
    name: str | None,
    payment_type: str | None,
    hourly_rate: str | None,
    point_rate: str | None,
    start_day: str | None,
) -> None:
    """Edit a company.

    Updates only the fields that are provided.

    Examples:
        workhours company edit "Acme" --hourly-rate 35
        workhours company edit "Acme" --start-day 16
    """
    service = CompanyService(ctx.obj["db"])
    company_obj = resolve_company_or_exit(ctx, service, company)

    changes = {}
    if name is not None:
        changes["name"] = name
    if payment_type is not None:
        changes["payment_type"] = payment_type
    if hourly_rate is not None:
        changes["hourly_rate"] = _parse_rate_or_exit(ctx, hourly_rate)
    if point_rate is not None:
        changes["point_rate"] = _parse_rate_or_exit(ctx, point_rate)
    if start_day is not None:
        changes["month_start_day"] = int(start_day)

    if not changes:
        click.echo("Nothing to update.")
        return

    try:
        updated = service.update_company(company_obj.id, **changes)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated company '{updated.name}'")


@company_group.command("delete")
@click.argument("company", metavar="COMPANY")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_company(ctx, company: str, yes: bool) -> None:
    """Delete a company and all of its work records.

    COMPANY can be a company name or ID. Payment records are kept.

    Examples:
        workhours company delete "Acme"
        workhours company delete 3f2a9c1d --yes
    """
    db = ctx.obj["db"]
    service = CompanyService(db)
    company_obj = resolve_company_or_exit(ctx, service, company)
    record_count = len(WorkRecordService(db).list_records(company_id=company_obj.id))

    if not yes and not click.confirm(
        f"Delete company '{company_obj.name}' and its {record_count} work "
        f"record{'s' if record_count != 1 else ''}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        removed = service.delete_company(company_obj.id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(
        f"Deleted company '{company_obj.name}' "
        f"({removed} work record{'s' if removed != 1 else ''} removed)"
    )


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
