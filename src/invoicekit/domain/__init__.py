"""Domain layer for invoicekit application.

Only entities and pure calculations are re-exported here; the services
depend on the database layer and are imported from their own modules.
"""

from invoicekit.domain.entities import (
    CURRENCY_CODES,
    Address,
    Company,
    Customer,
    Service,
    LineItem,
    Invoice,
    InvoiceStatus,
    InvoiceTotals,
    InvoiceStats,
)
from invoicekit.domain.payment_terms import PaymentTerms, get_due_date, payment_term_days
from invoicekit.domain.calculator import (
    calculate_line_subtotal,
    calculate_line_tax,
    calculate_line_total,
    aggregate_invoice_totals,
)

__all__ = [
    "CURRENCY_CODES",
    "Address",
    "Company",
    "Customer",
    "Service",
    "LineItem",
    "Invoice",
    "InvoiceStatus",
    "InvoiceTotals",
    "InvoiceStats",
    "PaymentTerms",
    "get_due_date",
    "payment_term_days",
    "calculate_line_subtotal",
    "calculate_line_tax",
    "calculate_line_total",
    "aggregate_invoice_totals",
]
