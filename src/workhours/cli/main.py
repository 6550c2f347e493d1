"""Main CLI entry point."""

import logging

import click
from workhours.database.factories import create_sqlite_database

# Import and register all commands at module level
from workhours.cli.commands import (
    company,
    work,
    invoice,
    summary,
    payment,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides WORKHOURS_DB_PATH environment variable)",
    envvar="WORKHOURS_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Workhours - time tracking and invoicing.

    Register companies, log work sessions or piecework against them and
    compute earnings per billing cycle.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
company.register_commands(cli)
work.register_commands(cli)
invoice.register_commands(cli)
summary.register_commands(cli)
payment.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
