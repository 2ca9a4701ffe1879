"""Domain model entities for invoicekit.

These are pure data classes representing business concepts, independent of
database schema. Monetary values are Decimals; totals are always derived
from line items and never stored.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from invoicekit.domain.payment_terms import PaymentTerms

CURRENCY_CODES = ("USD", "EUR", "GBP", "CAD", "AUD", "JPY", "INR")


class InvoiceStatus(str, Enum):
    """Invoice lifecycle status."""

    DRAFT = "DRAFT"
    PENDING = "PENDING"
    PAID = "PAID"
    OVERDUE = "OVERDUE"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class Address:
    """Postal address of a company or customer."""

    street: str
    city: str
    state: str
    zip_code: str
    country: str

    def format_lines(self) -> list[str]:
        """Return the address as printable lines."""
        return [self.street, f"{self.city}, {self.state} {self.zip_code}", self.country]


@dataclass(frozen=True)
class Company:
    """Issuing company domain entity."""

    id: int
    name: str
    email: str
    address: Address
    created_at: datetime
    phone: Optional[str] = None
    tax_id: Optional[str] = None
    is_default: bool = False


@dataclass(frozen=True)
class Customer:
    """Billed customer domain entity."""

    id: int
    name: str
    email: str
    address: Address
    created_at: datetime
    phone: Optional[str] = None
    tax_id: Optional[str] = None


@dataclass(frozen=True)
class Service:
    """Billable service offered by a company at a default rate."""

    id: int
    description: str
    default_rate: Decimal
    company_id: int
    created_at: datetime


@dataclass(frozen=True)
class LineItem:
    """Invoice line item.

    Quantity may be fractional (e.g. partial hours). ``tax_rate`` is a
    percentage, so 10 means 10%.
    """

    quantity: Decimal
    unit_price: Decimal
    tax_rate: Decimal = Decimal(0)
    description: str = ""
    id: Optional[int] = None


@dataclass(frozen=True)
class InvoiceTotals:
    """Totals derived from an invoice's line items."""

    subtotal: Decimal
    total_tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class Invoice:
    """Invoice domain entity."""

    id: int
    invoice_number: str
    created_at: datetime
    due_date: datetime
    status: InvoiceStatus
    company_id: int
    customer_id: int
    currency: str
    payment_terms: PaymentTerms
    items: tuple[LineItem, ...] = ()
    notes: Optional[str] = None
    terms_and_conditions: Optional[str] = None


@dataclass(frozen=True)
class InvoiceStats:
    """Aggregate figures across all invoices."""

    invoice_count: int
    status_counts: dict[InvoiceStatus, int] = field(default_factory=dict)
    total_billed: Decimal = Decimal(0)
    total_paid: Decimal = Decimal(0)
    total_outstanding: Decimal = Decimal(0)
