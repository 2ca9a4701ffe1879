"""Stand-alone calculation commands that need no database."""

from datetime import datetime, time

import click
from invoicekit.domain.calculator import (
    aggregate_invoice_totals,
    apply_discount,
    calculate_discount,
    calculate_line_total,
    format_money,
)
from invoicekit.domain.entities import CURRENCY_CODES
from invoicekit.domain.payment_terms import PaymentTerms, get_due_date, payment_term_days
from invoicekit.utils.amount_parser import parse_amount
from invoicekit.utils.date_parser import parse_date
from invoicekit.utils.line_item_parser import ITEM_FORMAT, parse_line_item


@click.group()
def calc_group():
    """Calculate totals and due dates without touching the database."""
    pass


@calc_group.command("totals")
@click.option("--item", "items", multiple=True, required=True, help=f"Line item as {ITEM_FORMAT} (repeatable)")
@click.option("--discount", help="Discount percentage applied to the subtotal")
@click.option("--currency", type=click.Choice(CURRENCY_CODES, case_sensitive=False), default="USD", help="Currency (default: USD)")
@click.pass_context
def calc_totals(ctx, items: tuple[str, ...], discount: str | None, currency: str):
    """Print line totals and invoice totals for the given items.

    Example:
        invoicekit calc totals --item "Design:8.25:125.50:10" --item "Review:2:100"
    """
    try:
        line_items = [parse_line_item(text) for text in items]
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    for item in line_items:
        line_total = calculate_line_total(item.quantity, item.unit_price, item.tax_rate)
        click.echo(f"{item.description[:40]:40s} {format_money(line_total, currency):>14s}")

    totals = aggregate_invoice_totals(line_items)
    if discount is not None:
        try:
            discount_pct = parse_amount(discount.rstrip("%"))
        except ValueError as e:
            click.echo(f"Error: Invalid discount: {e}", err=True)
            ctx.exit(1)
        click.echo(f"{'Discount:':40s} {format_money(-calculate_discount(totals.subtotal, discount_pct), currency):>14s}")
        totals = apply_discount(totals, discount_pct)

    click.echo("-" * 55)
    click.echo(f"{'Subtotal:':40s} {format_money(totals.subtotal, currency):>14s}")
    click.echo(f"{'Tax:':40s} {format_money(totals.total_tax, currency):>14s}")
    click.echo(f"{'Total:':40s} {format_money(totals.total, currency):>14s}")


@calc_group.command("due-date")
@click.argument("terms")
@click.option("--created", help="Creation date (default: today), e.g. 2025-01-01 or 'yesterday'")
@click.pass_context
def calc_due_date(ctx, terms: str, created: str | None):
    """Print the due date for payment TERMS.

    Unknown terms fall back to NET_30.
    """
    created_on = None
    if created is not None:
        try:
            created_on = datetime.combine(parse_date(created), time.min)
        except ValueError as e:
            click.echo(f"Error: Invalid creation date: {e}", err=True)
            ctx.exit(1)

    if terms.upper() not in PaymentTerms.__members__:
        click.echo(f"Unknown payment terms '{terms}', using NET_30", err=True)

    due = get_due_date(terms.upper(), created_on)
    click.echo(f"{due:%Y-%m-%d} ({payment_term_days(terms.upper())} days)")


def register_commands(cli):
    """Register calc commands with main CLI."""
    cli.add_command(calc_group, name="calc")
