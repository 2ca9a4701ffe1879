"""Main CLI entry point."""

import logging

import click
from invoicekit.database.factories import DB_PATH_ENV_VAR, create_sqlite_database

# Import and register all commands at module level
from invoicekit.cli.commands import (
    calc,
    company,
    customer,
    service,
    invoice,
    stats,
    seed,
)

# Commands that run without opening the database
NO_DATABASE_COMMANDS = {"calc"}


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Invoicekit - Invoice management application.

    Keep companies, customers and billable services, create invoices, and
    calculate totals and due dates with cent-exact arithmetic.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and ctx.invoked_subcommand not in NO_DATABASE_COMMANDS:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
company.register_commands(cli)
customer.register_commands(cli)
service.register_commands(cli)
invoice.register_commands(cli)
stats.register_commands(cli)
seed.register_commands(cli)
calc.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
