"""Invoice commands."""

from datetime import datetime, time

import click
from invoicekit.cli.error_handling import handle_domain_error
from invoicekit.cli.party_resolution import resolve_company_or_exit, resolve_customer_or_exit
from invoicekit.domain.calculator import (
    aggregate_invoice_totals,
    calculate_line_subtotal,
    calculate_line_tax,
    calculate_line_total,
    format_money,
)
from invoicekit.domain.company import CompanyService
from invoicekit.domain.customer import CustomerService
from invoicekit.domain.entities import CURRENCY_CODES, Invoice, InvoiceStatus
from invoicekit.domain.invoice import InvoiceService
from invoicekit.domain.payment_terms import PaymentTerms
from invoicekit.domain.service_catalog import ServiceCatalogService
from invoicekit.utils.date_parser import PERIODS, get_date_range, parse_date
from invoicekit.utils.line_item_parser import (
    ITEM_FORMAT,
    SERVICE_ITEM_FORMAT,
    parse_line_item,
    parse_service_item,
)

STATUS_CHOICES = [status.value for status in InvoiceStatus]
TERMS_CHOICES = [terms.value for terms in PaymentTerms]


def resolve_invoice_or_exit(ctx: click.Context, service: InvoiceService, invoice: str) -> Invoice:
    """Look up an invoice by ID or invoice number, or exit with a CLI error."""
    try:
        if invoice.isdigit():
            return service.require_invoice(int(invoice))
        return service.get_invoice_by_number(invoice)
    except ValueError as e:
        handle_domain_error(ctx, e)


def echo_line_items(invoice: Invoice) -> None:
    """Print the line item table of an invoice."""
    click.echo(f"{'Description':30s} {'Qty':>8s} {'Price':>12s} {'Tax %':>7s} {'Tax':>10s} {'Total':>12s}")
    click.echo("-" * 84)
    for item in invoice.items:
        subtotal = calculate_line_subtotal(item.quantity, item.unit_price)
        tax = calculate_line_tax(subtotal, item.tax_rate)
        total = calculate_line_total(item.quantity, item.unit_price, item.tax_rate)
        click.echo(
            f"{item.description[:30]:30s} {item.quantity.normalize():>8f} "
            f"{format_money(item.unit_price, invoice.currency):>12s} "
            f"{item.tax_rate.normalize():>7f} {format_money(tax, invoice.currency):>10s} "
            f"{format_money(total, invoice.currency):>12s}"
        )


@click.group()
def invoice_group():
    """Create and manage invoices."""
    pass


@invoice_group.command("create")
@click.option("--customer", required=True, help="Customer name or ID")
@click.option("--company", help="Company name or ID (defaults to the default company)")
@click.option("--item", "items", multiple=True, help=f"Line item as {ITEM_FORMAT} (repeatable)")
@click.option(
    "--service", "service_items", multiple=True,
    help=f"Line item at a service's default rate as {SERVICE_ITEM_FORMAT} (repeatable)",
)
@click.option("--currency", type=click.Choice(CURRENCY_CODES, case_sensitive=False), default="USD", help="Currency (default: USD)")
@click.option("--terms", type=click.Choice(TERMS_CHOICES, case_sensitive=False), default="NET_30", help="Payment terms (default: NET_30)")
@click.option("--due-date", help="Explicit due date (overrides --terms), e.g. 2025-02-15")
@click.option("--notes", help="Notes printed on the invoice")
@click.option("--terms-text", help="Terms and conditions text")
@click.pass_context
def create_invoice(
    ctx,
    customer: str,
    company: str | None,
    items: tuple[str, ...],
    service_items: tuple[str, ...],
    currency: str,
    terms: str,
    due_date: str | None,
    notes: str | None,
    terms_text: str | None,
):
    """Create a draft invoice.

    Service lines are added after --item lines, in the order given.

    Examples:
        invoicekit invoice create --customer "Startup Inc" --item "Web Development:1.5:150:10"
        invoicekit invoice create --customer 2 --service 1:8.25 --service 3:4.5:10 --terms NET_15
    """
    db = ctx.obj["db"]
    company_service = CompanyService(db)

    customer_id = resolve_customer_or_exit(ctx, CustomerService(db), customer)
    if company is not None:
        company_id = resolve_company_or_exit(ctx, company_service, company)
    else:
        default = company_service.get_default_company()
        if default is None:
            click.echo("Error: No default company set. Use --company.", err=True)
            ctx.exit(1)
        company_id = default.id

    if not items and not service_items:
        click.echo("Error: Provide at least one --item or --service line.", err=True)
        ctx.exit(1)

    line_items = []
    try:
        line_items.extend(parse_line_item(text) for text in items)
        catalog = ServiceCatalogService(db)
        for text in service_items:
            service_id, quantity, tax_rate = parse_service_item(text)
            line_items.append(catalog.to_line_item(service_id, quantity, tax_rate))
    except ValueError as e:
        handle_domain_error(ctx, e)

    due = None
    if due_date:
        try:
            due = datetime.combine(parse_date(due_date), time.min)
        except ValueError as e:
            click.echo(f"Error: Invalid due date: {e}", err=True)
            ctx.exit(1)

    service = InvoiceService(db)
    try:
        invoice_id = service.create_invoice(
            company_id=company_id,
            customer_id=customer_id,
            items=line_items,
            currency=currency,
            payment_terms=terms,
            due_date=due,
            notes=notes,
            terms_and_conditions=terms_text,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    invoice = service.require_invoice(invoice_id)
    totals = aggregate_invoice_totals(invoice.items)
    click.echo(f"Created invoice {invoice.invoice_number} (ID: {invoice_id})")
    click.echo(f"  Due: {invoice.due_date:%Y-%m-%d}")
    click.echo(f"  Total: {format_money(totals.total, invoice.currency)}")


@invoice_group.command("list")
@click.option("--status", type=click.Choice(STATUS_CHOICES, case_sensitive=False), help="Filter by status")
@click.option("--customer", help="Filter by customer name or ID")
@click.option("--period", type=click.Choice(PERIODS, case_sensitive=False), help="Only invoices created in this period")
@click.pass_context
def list_invoices(ctx, status: str | None, customer: str | None, period: str | None):
    """List invoices, newest first."""
    db = ctx.obj["db"]
    customer_service = CustomerService(db)

    customer_id = None
    if customer is not None:
        customer_id = resolve_customer_or_exit(ctx, customer_service, customer)

    start = end = None
    if period is not None:
        start, end = get_date_range(period)

    invoices = InvoiceService(db).list_invoices(
        status=status, customer_id=customer_id, start_date=start, end_date=end
    )
    if not invoices:
        click.echo("No invoices found.")
        return

    customers = {c.id: c.name for c in customer_service.list_customers()}

    click.echo(f"\n{'ID':>4s} | {'Number':16s} | {'Customer':20s} | {'Status':9s} | {'Due':10s} | {'Total':>14s}")
    click.echo("-" * 90)
    for invoice in invoices:
        totals = aggregate_invoice_totals(invoice.items)
        click.echo(
            f"{invoice.id:4d} | {invoice.invoice_number:16s} | "
            f"{customers.get(invoice.customer_id, '?')[:20]:20s} | {invoice.status.value:9s} | "
            f"{invoice.due_date:%Y-%m-%d} | {format_money(totals.total, invoice.currency):>14s}"
        )


@invoice_group.command("show")
@click.argument("invoice", metavar="INVOICE")
@click.pass_context
def show_invoice(ctx, invoice: str):
    """Show an invoice with its lines and totals.

    INVOICE can be an invoice ID or number (e.g., INV-202501-0042).
    """
    db = ctx.obj["db"]
    inv = resolve_invoice_or_exit(ctx, InvoiceService(db), invoice)
    company = CompanyService(db).get_company(inv.company_id)
    customer = CustomerService(db).get_customer(inv.customer_id)

    click.echo(f"\nInvoice {inv.invoice_number} ({inv.status.value})")
    click.echo(f"  Created: {inv.created_at:%Y-%m-%d}")
    click.echo(f"  Due:     {inv.due_date:%Y-%m-%d} ({inv.payment_terms.value})")
    if company is not None:
        click.echo(f"  From:    {company.name} <{company.email}>")
    if customer is not None:
        click.echo(f"  To:      {customer.name} <{customer.email}>")
    click.echo("")

    echo_line_items(inv)

    totals = aggregate_invoice_totals(inv.items)
    click.echo("-" * 84)
    click.echo(f"{'Subtotal:':>70s} {format_money(totals.subtotal, inv.currency):>13s}")
    click.echo(f"{'Tax:':>70s} {format_money(totals.total_tax, inv.currency):>13s}")
    click.echo(f"{'Total:':>70s} {format_money(totals.total, inv.currency):>13s}")

    if inv.notes:
        click.echo(f"\nNotes: {inv.notes}")
    if inv.terms_and_conditions:
        click.echo(f"Terms: {inv.terms_and_conditions}")


@invoice_group.command("status")
@click.argument("invoice", metavar="INVOICE")
@click.argument("status", type=click.Choice(STATUS_CHOICES, case_sensitive=False))
@click.pass_context
def update_status(ctx, invoice: str, status: str):
    """Set the status of INVOICE (ID or number)."""
    service = InvoiceService(ctx.obj["db"])
    inv = resolve_invoice_or_exit(ctx, service, invoice)

    try:
        service.update_status(inv.id, status)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Invoice {inv.invoice_number} is now {status.upper()}")


@invoice_group.command("delete")
@click.argument("invoice", metavar="INVOICE")
@click.pass_context
def delete_invoice(ctx, invoice: str):
    """Delete INVOICE (ID or number) and its line items."""
    service = InvoiceService(ctx.obj["db"])
    inv = resolve_invoice_or_exit(ctx, service, invoice)

    try:
        service.delete_invoice(inv.id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted invoice {inv.invoice_number}")


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoice_group, name="invoice")
