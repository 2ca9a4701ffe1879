"""Invoice calculations built on the cents-based money helpers.

All functions are pure. Rounding happens at fixed points so that results
are reproducible:

- a line's tax is computed on the already rounded line subtotal;
- invoice totals are folded over the items left to right, rounding the
  running sums after every item.

Summing the same items in a different order can therefore differ by a cent
in rare cases; callers must keep the entry order of the items.
"""

from dataclasses import replace
from decimal import Decimal
from typing import Iterable, Sequence

from invoicekit.domain.entities import InvoiceTotals, LineItem
from invoicekit.utils.money import (
    Numeric,
    add_money,
    multiply_money,
    percentage_of,
    round_money,
    subtract_money,
    to_decimal,
)

ZERO = Decimal("0.00")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "CA$",
    "AUD": "A$",
    "JPY": "¥",
    "INR": "₹",
}


def calculate_line_subtotal(quantity: Numeric, unit_price: Numeric) -> Decimal:
    """Calculate the subtotal of a single line item."""
    return round_money(multiply_money(quantity, unit_price))


def calculate_line_tax(subtotal: Numeric, tax_rate: Numeric) -> Decimal:
    """Calculate the tax of a single line item from its rounded subtotal."""
    return round_money(percentage_of(subtotal, tax_rate))


def calculate_line_total(quantity: Numeric, unit_price: Numeric, tax_rate: Numeric) -> Decimal:
    """Calculate the total of a single line item including tax."""
    subtotal = calculate_line_subtotal(quantity, unit_price)
    tax = calculate_line_tax(subtotal, tax_rate)
    return round_money(add_money(subtotal, tax))


def aggregate_invoice_totals(items: Iterable[LineItem]) -> InvoiceTotals:
    """Aggregate line items into invoice totals.

    Args:
        items: Line items in entry order

    Returns:
        InvoiceTotals; an empty list gives all zeros
    """
    subtotal = tax = total = ZERO

    for item in items:
        item_subtotal = calculate_line_subtotal(item.quantity, item.unit_price)
        item_tax = calculate_line_tax(item_subtotal, item.tax_rate)

        subtotal = round_money(add_money(subtotal, item_subtotal))
        tax = round_money(add_money(tax, item_tax))
        total = round_money(add_money(total, add_money(item_subtotal, item_tax)))

    return InvoiceTotals(subtotal=subtotal, total_tax=tax, total=total)


def calculate_discount(subtotal: Numeric, discount_percentage: Numeric) -> Decimal:
    """Calculate the discount amount for a subtotal."""
    return round_money(percentage_of(subtotal, discount_percentage))


def apply_discount(totals: InvoiceTotals, discount_percentage: Numeric) -> InvoiceTotals:
    """Apply a percentage discount to the subtotal.

    Tax is left as it was computed on the undiscounted lines; the total is
    rebuilt from the discounted subtotal and that tax.
    """
    discount = calculate_discount(totals.subtotal, discount_percentage)
    subtotal = round_money(subtract_money(totals.subtotal, discount))
    return InvoiceTotals(
        subtotal=subtotal,
        total_tax=totals.total_tax,
        total=round_money(add_money(subtotal, totals.total_tax)),
    )


def format_money(amount: Numeric, currency_code: str = "USD") -> str:
    """Format an amount as currency text, e.g. ``$1,234.50``."""
    value = round_money(amount)
    digits = f"{abs(value):,.2f}"
    sign = "-" if value < 0 else ""

    symbol = CURRENCY_SYMBOLS.get(currency_code)
    if symbol is None:
        return f"{sign}{currency_code} {digits}"
    return f"{sign}{symbol}{digits}"


def calculate_total_hours(items: Iterable[LineItem]) -> Decimal:
    """Sum the quantities (hours) of all line items."""
    return sum((to_decimal(item.quantity) for item in items), Decimal(0))


def calculate_average_rate(items: Sequence[LineItem]) -> Decimal:
    """Calculate the average hourly rate across line items."""
    if not items:
        return ZERO

    total_amount = sum(
        (to_decimal(item.quantity) * to_decimal(item.unit_price) for item in items),
        Decimal(0),
    )
    total_hours = calculate_total_hours(items)
    if total_hours <= 0:
        return ZERO
    return round_money(total_amount / total_hours)


def group_items_by_description(items: Iterable[LineItem]) -> dict[str, tuple[LineItem, ...]]:
    """Group line items by description, keeping first-seen order."""
    groups: dict[str, list[LineItem]] = {}
    for item in items:
        groups.setdefault(item.description, []).append(item)
    return {description: tuple(group) for description, group in groups.items()}


def merge_items_by_description(items: Iterable[LineItem]) -> list[LineItem]:
    """Merge line items sharing a description into one item each.

    Quantities are summed; unit price and tax rate are averaged, the price
    rounded to cents. Other fields come from the first item of each group.
    """
    merged = []
    for group in group_items_by_description(items).values():
        count = len(group)
        quantity = sum((to_decimal(item.quantity) for item in group), Decimal(0))
        unit_price = sum((to_decimal(item.unit_price) for item in group), Decimal(0)) / count
        tax_rate = sum((to_decimal(item.tax_rate) for item in group), Decimal(0)) / count
        merged.append(
            replace(
                group[0],
                quantity=quantity,
                unit_price=round_money(unit_price),
                tax_rate=tax_rate,
            )
        )
    return merged
