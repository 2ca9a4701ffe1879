"""Customer management commands."""

import click
from invoicekit.cli.commands.company import address_options
from invoicekit.cli.error_handling import handle_domain_error
from invoicekit.cli.party_resolution import resolve_customer_or_exit
from invoicekit.domain.customer import CustomerService
from invoicekit.domain.entities import Address


@click.group()
def customer_group():
    """Manage customers."""
    pass


@customer_group.command("create")
@click.argument("name", metavar="CUSTOMER_NAME")
@click.option("--email", required=True, help="Accounts payable email address")
@click.option("--phone", help="Phone number")
@click.option("--tax-id", help="Tax identifier")
@address_options
@click.pass_context
def create_customer(
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
):
    """Create a new customer.

    Examples:
        invoicekit customer create "Startup Inc" --email finance@startup.io
    """
    service = CustomerService(ctx.obj["db"])
    address = Address(street=street, city=city, state=state, zip_code=zip_code, country=country)

    try:
        customer_id = service.create_customer(
            name=name, email=email, address=address, phone=phone, tax_id=tax_id
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created customer '{name}' (ID: {customer_id})")


@customer_group.command("list")
@click.pass_context
def list_customers(ctx):
    """List all customers."""
    service = CustomerService(ctx.obj["db"])

    customers = service.list_customers()
    if not customers:
        click.echo("No customers found.")
        return

    click.echo("\nCustomers:")
    click.echo("-" * 70)
    for customer in customers:
        click.echo(f"ID: {customer.id:3d} | {customer.name:25s} | {customer.email}")


@customer_group.command("delete")
@click.argument("customer", metavar="CUSTOMER")
@click.pass_context
def delete_customer(ctx, customer: str):
    """Delete CUSTOMER (name or ID).

    Customers with invoices cannot be deleted.
    """
    service = CustomerService(ctx.obj["db"])
    customer_id = resolve_customer_or_exit(ctx, service, customer)

    try:
        service.delete_customer(customer_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted customer {customer_id}")


def register_commands(cli):
    """Register customer commands with main CLI."""
    cli.add_command(customer_group, name="customer")
