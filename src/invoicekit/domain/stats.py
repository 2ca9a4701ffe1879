"""Invoice statistics domain service."""

from invoicekit.database.base import Database
from invoicekit.domain.calculator import aggregate_invoice_totals
from invoicekit.domain.entities import InvoiceStats, InvoiceStatus
from invoicekit.utils.money import add_money

# Statuses whose invoices still await payment
OUTSTANDING_STATUSES = (InvoiceStatus.PENDING, InvoiceStatus.OVERDUE)


class StatsService:
    """Service for computing figures across all invoices."""

    def __init__(self, db: Database):
        """Initialize stats service.

        Args:
            db: Database instance
        """
        self.db = db

    def build_stats(self) -> InvoiceStats:
        """Count invoices per status and sum billed, paid and outstanding totals.

        Cancelled invoices are counted but not billed.
        """
        status_counts = {status: 0 for status in InvoiceStatus}
        billed = paid = outstanding = add_money()

        invoices = self.db.list_invoices()
        for invoice in invoices:
            status_counts[invoice.status] += 1
            if invoice.status == InvoiceStatus.CANCELLED:
                continue

            total = aggregate_invoice_totals(invoice.items).total
            billed = add_money(billed, total)
            if invoice.status == InvoiceStatus.PAID:
                paid = add_money(paid, total)
            elif invoice.status in OUTSTANDING_STATUSES:
                outstanding = add_money(outstanding, total)

        return InvoiceStats(
            invoice_count=len(invoices),
            status_counts=status_counts,
            total_billed=billed,
            total_paid=paid,
            total_outstanding=outstanding,
        )
