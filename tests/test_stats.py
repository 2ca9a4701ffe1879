"""Tests for invoice statistics."""

import pytest
from decimal import Decimal

from invoicekit.cli.main import cli
from invoicekit.domain.entities import InvoiceStatus, LineItem
from invoicekit.domain.stats import StatsService


@pytest.fixture
def stats_service(temp_db):
    """Create a StatsService with a temporary database."""
    return StatsService(temp_db)


def _invoice(invoice_service, company, customer, amount, status):
    invoice_id = invoice_service.create_invoice(
        company.id, customer.id, [LineItem(quantity=Decimal(1), unit_price=Decimal(amount))]
    )
    invoice_service.update_status(invoice_id, status)
    return invoice_id


def test_empty_stats(stats_service):
    """Test statistics of an empty database."""
    stats = stats_service.build_stats()

    assert stats.invoice_count == 0
    assert all(count == 0 for count in stats.status_counts.values())
    assert stats.total_billed == 0


def test_stats_by_status(stats_service, invoice_service, sample_company, sample_customer):
    """Test counts and billed, paid and outstanding sums."""
    args = (invoice_service, sample_company, sample_customer)
    _invoice(*args, "100.10", InvoiceStatus.PAID)
    _invoice(*args, "200.20", InvoiceStatus.PENDING)
    _invoice(*args, "300.30", InvoiceStatus.OVERDUE)
    _invoice(*args, "400.40", InvoiceStatus.DRAFT)
    _invoice(*args, "999.99", InvoiceStatus.CANCELLED)

    stats = stats_service.build_stats()

    assert stats.invoice_count == 5
    assert stats.status_counts[InvoiceStatus.CANCELLED] == 1
    assert stats.status_counts[InvoiceStatus.PAID] == 1
    assert stats.total_billed == Decimal("1001.00")
    assert stats.total_paid == Decimal("100.10")
    assert stats.total_outstanding == Decimal("500.50")


def test_stats_uses_line_totals(stats_service, sample_invoice):
    """Test that totals come from line items, tax included."""
    stats = stats_service.build_stats()

    assert stats.status_counts[InvoiceStatus.DRAFT] == 1
    assert stats.total_billed == Decimal("2115.17")
    assert stats.total_outstanding == 0


def test_stats_cli(cli_runner, temp_db, sample_invoice, invoice_service):
    """Test the stats command output."""
    invoice_service.update_status(sample_invoice.id, InvoiceStatus.PENDING)

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "stats"])

    assert result.exit_code == 0
    assert "Pending:" in result.output
    assert "$2,115.17" in result.output


def test_stats_cli_empty(cli_runner, temp_db):
    """Test the stats command without invoices."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "stats"])

    assert result.exit_code == 0
    assert "No invoices found" in result.output
