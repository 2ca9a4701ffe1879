"""Parsing of line items given on the command line."""

from decimal import Decimal

from invoicekit.domain.entities import LineItem
from invoicekit.utils.amount_parser import parse_amount

ITEM_FORMAT = "DESCRIPTION:QUANTITY:UNIT_PRICE[:TAX_RATE]"
SERVICE_ITEM_FORMAT = "SERVICE_ID:QUANTITY[:TAX_RATE]"


def _parse_tax_rate(text: str) -> Decimal:
    # Allow a trailing percent sign, e.g. "8.25%"
    return parse_amount(text.strip().rstrip("%"))


def parse_line_item(text: str) -> LineItem:
    """Parse a line item like ``"Web Development:1.5:150:10"``.

    The tax rate is optional and defaults to 0. The description may not
    contain a colon.

    Args:
        text: Line item in DESCRIPTION:QUANTITY:UNIT_PRICE[:TAX_RATE] form

    Returns:
        LineItem

    Raises:
        ValueError: If the text has the wrong shape or a number is invalid
    """
    parts = text.split(":")
    if len(parts) not in (3, 4):
        raise ValueError(f"Invalid line item '{text}'. Expected {ITEM_FORMAT}")

    description = parts[0].strip()
    if not description:
        raise ValueError(f"Invalid line item '{text}': description is empty")

    return LineItem(
        description=description,
        quantity=parse_amount(parts[1]),
        unit_price=parse_amount(parts[2]),
        tax_rate=_parse_tax_rate(parts[3]) if len(parts) == 4 else Decimal(0),
    )


def parse_service_item(text: str) -> tuple[int, Decimal, Decimal]:
    """Parse a service line like ``"3:2.5:10"``.

    Returns:
        Tuple of (service_id, quantity, tax_rate)

    Raises:
        ValueError: If the text has the wrong shape or a number is invalid
    """
    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise ValueError(f"Invalid service line '{text}'. Expected {SERVICE_ITEM_FORMAT}")

    try:
        service_id = int(parts[0])
    except ValueError:
        raise ValueError(f"Invalid service ID '{parts[0]}' in '{text}'") from None

    tax_rate = _parse_tax_rate(parts[2]) if len(parts) == 3 else Decimal(0)
    return service_id, parse_amount(parts[1]), tax_rate
