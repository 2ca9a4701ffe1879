"""Utility functions for invoicekit."""

from invoicekit.utils.date_parser import parse_date
from invoicekit.utils.amount_parser import parse_amount
from invoicekit.utils.money import (
    to_cents,
    from_cents,
    multiply_money,
    add_money,
    subtract_money,
    percentage_of,
    round_money,
    parse_decimal_input,
)

__all__ = [
    "parse_date",
    "parse_amount",
    "to_cents",
    "from_cents",
    "multiply_money",
    "add_money",
    "subtract_money",
    "percentage_of",
    "round_money",
    "parse_decimal_input",
]
