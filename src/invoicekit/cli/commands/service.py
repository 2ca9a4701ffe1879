"""Billable service commands."""

import click
from invoicekit.cli.error_handling import handle_domain_error
from invoicekit.cli.party_resolution import resolve_company_or_exit
from invoicekit.domain.calculator import format_money
from invoicekit.domain.company import CompanyService
from invoicekit.domain.service_catalog import ServiceCatalogService
from invoicekit.utils.amount_parser import parse_amount


@click.group()
def service_group():
    """Manage billable services."""
    pass


@service_group.command("create")
@click.argument("description")
@click.option("--rate", required=True, help="Default rate (e.g., 150 or 125.50)")
@click.option("--company", help="Company name or ID (defaults to the default company)")
@click.pass_context
def create_service(ctx, description: str, rate: str, company: str | None):
    """Create a billable service.

    Examples:
        invoicekit service create "Web Development" --rate 150
        invoicekit service create "Consulting" --rate 175 --company "Acme Corp"
    """
    db = ctx.obj["db"]
    company_service = CompanyService(db)

    if company is not None:
        company_id = resolve_company_or_exit(ctx, company_service, company)
    else:
        default = company_service.get_default_company()
        if default is None:
            click.echo("Error: No default company set. Use --company.", err=True)
            ctx.exit(1)
        company_id = default.id

    try:
        default_rate = parse_amount(rate)
    except ValueError as e:
        click.echo(f"Error: Invalid rate: {e}", err=True)
        ctx.exit(1)

    try:
        service_id = ServiceCatalogService(db).create_service(description, default_rate, company_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created service '{description}' at {format_money(default_rate)} (ID: {service_id})")


@service_group.command("list")
@click.option("--company", help="Only services of this company (name or ID)")
@click.pass_context
def list_services(ctx, company: str | None):
    """List billable services."""
    db = ctx.obj["db"]

    company_id = None
    if company is not None:
        company_id = resolve_company_or_exit(ctx, CompanyService(db), company)

    services = ServiceCatalogService(db).list_services(company_id=company_id)
    if not services:
        click.echo("No services found.")
        return

    click.echo("\nServices:")
    click.echo("-" * 70)
    for svc in services:
        click.echo(
            f"ID: {svc.id:3d} | {svc.description:25s} | {format_money(svc.default_rate):>12s} | "
            f"Company: {svc.company_id}"
        )


@service_group.command("delete")
@click.argument("service_id", type=int)
@click.pass_context
def delete_service(ctx, service_id: int):
    """Delete a service by ID."""
    try:
        ServiceCatalogService(ctx.obj["db"]).delete_service(service_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted service {service_id}")


def register_commands(cli):
    """Register service commands with main CLI."""
    cli.add_command(service_group, name="service")
