"""Company management commands."""

import click
from invoicekit.cli.error_handling import handle_domain_error
from invoicekit.cli.party_resolution import resolve_company_or_exit
from invoicekit.domain.company import CompanyService
from invoicekit.domain.entities import Address


def address_options(func):
    """Attach the postal address options shared by company and customer commands."""
    options = [
        click.option("--country", default="", help="Country"),
        click.option("--zip", "zip_code", default="", help="ZIP / postal code"),
        click.option("--state", default="", help="State or region"),
        click.option("--city", default="", help="City"),
        click.option("--street", default="", help="Street address"),
    ]
    for option in options:
        func = option(func)
    return func


@click.group()
def company_group():
    """Manage issuing companies."""
    pass


@company_group.command("create")
@click.argument("name", metavar="COMPANY_NAME")
@click.option("--email", required=True, help="Billing email address")
@click.option("--phone", help="Phone number")
@click.option("--tax-id", help="Tax identifier")
@address_options
@click.option("--default", "is_default", is_flag=True, help="Make this the default issuing company")
@click.pass_context
def create_company(
    ctx,
    name: str,
    email: str,
    phone: str | None,
    tax_id: str | None,
    street: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
    is_default: bool,
):
    """Create a new company.

    Examples:
        invoicekit company create "Acme Corp" --email billing@acme.com --default
        invoicekit company create "Tech LLC" --email ap@tech.io --city Austin --state TX
    """
    service = CompanyService(ctx.obj["db"])
    address = Address(street=street, city=city, state=state, zip_code=zip_code, country=country)

    try:
        company_id = service.create_company(
            name=name, email=email, address=address, phone=phone, tax_id=tax_id, is_default=is_default
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created company '{name}' (ID: {company_id})")
    if is_default:
        click.echo("Set as default company")


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
    for company in companies:
        marker = " [default]" if company.is_default else ""
        click.echo(f"ID: {company.id:3d} | {company.name:25s} | {company.email}{marker}")


@company_group.command("set-default")
@click.argument("company", metavar="COMPANY")
@click.pass_context
def set_default_company(ctx, company: str):
    """Make COMPANY (name or ID) the default issuing company."""
    service = CompanyService(ctx.obj["db"])
    company_id = resolve_company_or_exit(ctx, service, company)

    try:
        service.set_default_company(company_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Company {company_id} is now the default")


@company_group.command("delete")
@click.argument("company", metavar="COMPANY")
@click.pass_context
def delete_company(ctx, company: str):
    """Delete COMPANY (name or ID) and its services.

    Companies that have issued invoices cannot be deleted.
    """
    service = CompanyService(ctx.obj["db"])
    company_id = resolve_company_or_exit(ctx, service, company)

    try:
        service.delete_company(company_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted company {company_id}")


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
