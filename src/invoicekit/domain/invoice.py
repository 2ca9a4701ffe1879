"""Invoice domain service."""

import logging
import random
from datetime import date, datetime, time, timedelta, UTC
from typing import Optional, Sequence, Union

from invoicekit.database.base import Database
from invoicekit.domain.calculator import aggregate_invoice_totals
from invoicekit.domain.entities import (
    CURRENCY_CODES,
    Invoice as InvoiceEntity,
    InvoiceStatus,
    InvoiceTotals,
    LineItem,
)
from invoicekit.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    company_not_found,
    customer_not_found,
    invoice_not_found,
    invoice_number_not_found,
)
from invoicekit.domain.payment_terms import PaymentTerms, get_due_date
from invoicekit.utils.money import round_money, to_decimal

logger = logging.getLogger(__name__)

# Attempts at drawing an unused invoice number before giving up
MAX_NUMBER_ATTEMPTS = 20


def generate_invoice_number(now: Optional[datetime] = None) -> str:
    """Generate an invoice number like ``INV-202509-0123``."""
    if now is None:
        now = datetime.now(UTC)
    return f"INV-{now:%Y%m}-{random.randrange(10000):04d}"


def normalize_line_item(item: LineItem) -> LineItem:
    """Validate a line item and coerce its numbers to Decimal.

    The unit price is rounded to cents; quantity and tax rate keep their
    precision.

    Raises:
        ValidationError: If quantity is not positive or price/tax is negative
    """
    quantity = to_decimal(item.quantity)
    unit_price = round_money(item.unit_price)
    tax_rate = to_decimal(item.tax_rate)

    if quantity <= 0:
        raise ValidationError(f"Quantity must be positive, got {quantity}")
    if unit_price < 0:
        raise ValidationError(f"Unit price cannot be negative, got {unit_price}")
    if tax_rate < 0:
        raise ValidationError(f"Tax rate cannot be negative, got {tax_rate}")

    return LineItem(
        quantity=quantity,
        unit_price=unit_price,
        tax_rate=tax_rate,
        description=(item.description or "").strip(),
    )


def _parse_enum(enum_cls, value, label: str):
    if isinstance(value, str):
        value = value.strip().upper()
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"Invalid {label} '{value}'. Expected one of: {choices}") from None


class InvoiceService:
    """Service for creating and tracking invoices."""

    def __init__(self, db: Database):
        """Initialize invoice service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_invoice(
        self,
        company_id: int,
        customer_id: int,
        items: Sequence[LineItem],
        currency: str = "USD",
        payment_terms: Union[PaymentTerms, str] = PaymentTerms.NET_30,
        due_date: Optional[datetime] = None,
        notes: Optional[str] = None,
        terms_and_conditions: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> int:
        """Create a draft invoice.

        Args:
            company_id: Issuing company ID
            customer_id: Billed customer ID
            items: Line items, stored in the given order
            currency: ISO currency code
            payment_terms: Payment terms; used to derive the due date
            due_date: Explicit due date overriding the payment terms
            notes: Optional notes shown on the invoice
            terms_and_conditions: Optional terms text
            created_at: Creation time (defaults to now)

        Returns:
            Invoice ID

        Raises:
            NotFoundError: If company or customer doesn't exist
            ValidationError: If items, currency or payment terms are invalid
            ConflictError: If no unused invoice number could be generated
        """
        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))
        if self.db.get_customer(customer_id) is None:
            raise NotFoundError(customer_not_found(customer_id))

        if not items:
            raise ValidationError("An invoice needs at least one line item")
        lines = [normalize_line_item(item) for item in items]

        currency = (currency or "").upper()
        if currency not in CURRENCY_CODES:
            raise ValidationError(
                f"Unsupported currency '{currency}'. Expected one of: {', '.join(CURRENCY_CODES)}"
            )
        terms = _parse_enum(PaymentTerms, payment_terms, "payment terms")

        if created_at is None:
            created_at = datetime.now(UTC)
        if due_date is None:
            due_date = get_due_date(terms, created_at)

        invoice_number = self._unused_invoice_number(created_at)
        invoice_id = self.db.create_invoice(
            invoice_number=invoice_number,
            company_id=company_id,
            customer_id=customer_id,
            created_at=created_at,
            due_date=due_date,
            status=InvoiceStatus.DRAFT.value,
            currency=currency,
            payment_terms=terms.value,
            items=lines,
            notes=notes,
            terms_and_conditions=terms_and_conditions,
        )
        logger.info("Created invoice %s (%s) with %d lines", invoice_id, invoice_number, len(lines))
        return invoice_id

    def _unused_invoice_number(self, now: datetime) -> str:
        for _ in range(MAX_NUMBER_ATTEMPTS):
            number = generate_invoice_number(now)
            if self.db.get_invoice_by_number(number) is None:
                return number
            logger.debug("Invoice number %s already taken", number)
        raise ConflictError(f"Could not generate an unused invoice number for {now:%Y-%m}")

    def get_invoice(self, invoice_id: int) -> Optional[InvoiceEntity]:
        """Get invoice by ID, or None if not found."""
        return self.db.get_invoice(invoice_id)

    def require_invoice(self, invoice_id: int) -> InvoiceEntity:
        """Get invoice by ID, raising if it does not exist."""
        invoice = self.db.get_invoice(invoice_id)
        if invoice is None:
            raise NotFoundError(invoice_not_found(invoice_id))
        return invoice

    def get_invoice_by_number(self, invoice_number: str) -> InvoiceEntity:
        """Get invoice by its number.

        Raises:
            NotFoundError: If no invoice has that number
        """
        invoice = self.db.get_invoice_by_number(invoice_number)
        if invoice is None:
            raise NotFoundError(invoice_number_not_found(invoice_number))
        return invoice

    def list_invoices(
        self,
        status: Optional[Union[InvoiceStatus, str]] = None,
        customer_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[InvoiceEntity]:
        """List invoices, newest first.

        Args:
            status: Optional status filter
            customer_id: Optional customer filter
            start_date: Optional first creation day (inclusive)
            end_date: Optional last creation day (inclusive)

        Returns:
            List of invoice entities
        """
        status_value = None
        if status is not None:
            status_value = _parse_enum(InvoiceStatus, status, "status").value

        start = datetime.combine(start_date, time.min) if start_date else None
        end = datetime.combine(end_date + timedelta(days=1), time.min) if end_date else None

        return self.db.list_invoices(
            status=status_value, customer_id=customer_id, start_date=start, end_date=end
        )

    def update_status(self, invoice_id: int, status: Union[InvoiceStatus, str]) -> None:
        """Change the status of an invoice.

        Raises:
            NotFoundError: If invoice not found
            ValidationError: If status is not a known InvoiceStatus
        """
        new_status = _parse_enum(InvoiceStatus, status, "status")
        invoice = self.require_invoice(invoice_id)
        self.db.update_invoice_status(invoice_id, new_status.value)
        logger.info(
            "Invoice %s status %s -> %s", invoice.invoice_number, invoice.status.value, new_status.value
        )

    def delete_invoice(self, invoice_id: int) -> None:
        """Delete an invoice and its line items.

        Raises:
            NotFoundError: If invoice not found
        """
        self.require_invoice(invoice_id)
        self.db.delete_invoice(invoice_id)
        logger.info("Deleted invoice %s", invoice_id)

    def calculate_totals(self, invoice_id: int) -> InvoiceTotals:
        """Calculate subtotal, tax and total of a stored invoice."""
        invoice = self.require_invoice(invoice_id)
        return aggregate_invoice_totals(invoice.items)
