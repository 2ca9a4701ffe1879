"""Seed the database with sample data."""

import click
from invoicekit.domain.seed import seed_database


@click.command("seed")
@click.pass_context
def seed(ctx):
    """Create sample companies, customers, services and an invoice.

    Does nothing if the database already contains companies.
    """
    result = seed_database(ctx.obj["db"])
    if result is None:
        click.echo("Database already has data, skipping seed.")
        return

    click.echo(
        f"Created {result.companies} companies, {result.customers} customers, "
        f"{result.services} services and {result.invoices} invoice."
    )


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
