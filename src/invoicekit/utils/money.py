"""Currency-safe arithmetic helpers.

Every operation converts its operands to an integer number of cents, does
the arithmetic on integers and converts back, so results never carry binary
floating-point noise (``0.1 + 0.2`` is exactly ``0.30``). Floats are read
through their shortest decimal representation before conversion.

All functions are pure and return ``Decimal`` values at cent precision.
Decimal work runs in a local context wide enough for the operands, so
arbitrarily large amounts are rounded exactly instead of raising.
"""

import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

Numeric = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
HUNDRED = Decimal(100)

# Default decimal precision; widened per operation when operands need more
MIN_PRECISION = 28

# Longest leading decimal literal, e.g. "10" in "10abc" or "1" in "1,234.56"
LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def _digits(value: Decimal) -> int:
    # Digits of the integer part plus the fraction, positive exponents included
    if not value.is_finite():
        return 0
    _, digits, exponent = value.as_tuple()
    return len(digits) + max(exponent, 0)


def _exact(*values: Decimal):
    """Local decimal context wide enough to compute with ``values`` exactly."""
    return localcontext(prec=max(MIN_PRECISION, sum(_digits(value) for value in values) + 4))


def _round_to_int(value: Decimal) -> int:
    # Halves go away from zero
    with _exact(value):
        return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _divide_by_hundred(value: int) -> int:
    # Integer division by 100, halves away from zero
    quotient, remainder = divmod(abs(value), 100)
    if remainder >= 50:
        quotient += 1
    return quotient if value >= 0 else -quotient


def to_cents(amount: Numeric) -> int:
    """Convert a decimal amount to cents.

    Args:
        amount: Decimal amount (e.g., 10.99)

    Returns:
        Amount in cents (e.g., 1099)
    """
    value = to_decimal(amount)
    with _exact(value):
        return _round_to_int(value * HUNDRED)


def from_cents(cents: int) -> Decimal:
    """Convert cents back to a decimal amount (1099 -> 10.99)."""
    return Decimal(f"{cents}E-2")


def multiply_money(a: Numeric, b: Numeric) -> Decimal:
    """Multiply two amounts, e.g. quantity by rate.

    Both operands are scaled to cents, so the raw product is scaled by
    10,000; one factor of 100 is removed before rounding to whole cents.

    Args:
        a: First amount
        b: Second amount

    Returns:
        Product rounded to cents
    """
    return from_cents(_divide_by_hundred(to_cents(a) * to_cents(b)))


def add_money(*amounts: Numeric) -> Decimal:
    """Add any number of amounts. No amounts gives zero."""
    return from_cents(sum(to_cents(amount) for amount in amounts))


def subtract_money(from_amount: Numeric, amount: Numeric) -> Decimal:
    """Subtract ``amount`` from ``from_amount``."""
    return from_cents(to_cents(from_amount) - to_cents(amount))


def percentage_of(amount: Numeric, percentage: Numeric) -> Decimal:
    """Calculate a percentage of an amount, e.g. tax.

    Args:
        amount: Base amount
        percentage: Percentage, where 10 means 10%

    Returns:
        Percentage amount rounded to cents (8.25% of 150 is 12.38)
    """
    cents = Decimal(to_cents(amount))
    rate = to_decimal(percentage)
    with _exact(cents, rate):
        return from_cents(_round_to_int(cents * rate / HUNDRED))


def round_money(amount: Numeric) -> Decimal:
    """Round an amount to 2 decimal places, halves rounding up.

    10.995 rounds to 11.00 and 10.994 to 10.99.
    """
    value = to_decimal(amount)
    with _exact(value):
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def parse_decimal_input(value: str, default: Numeric = 0) -> Numeric:
    """Parse the leading number of free-form text into a rounded amount.

    Leading whitespace is skipped and the longest decimal literal at the
    start is used, so ``"10abc"`` gives 10 and ``"1,234.56"`` gives 1.
    Text without a leading number returns ``default`` unchanged instead of
    raising, so callers that must tell "invalid" apart from a valid zero
    need to validate first (``parse_amount`` is the strict parser).

    Args:
        value: Text to parse
        default: Value returned when no number is found

    Returns:
        Parsed amount rounded to cents, or ``default``
    """
    match = LEADING_NUMBER.match(value or "")
    if match is None:
        return default
    return round_money(Decimal(match.group(1)))
