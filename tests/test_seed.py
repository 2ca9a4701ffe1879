"""Tests for sample data seeding."""

from decimal import Decimal

from invoicekit.cli.main import cli
from invoicekit.domain.calculator import aggregate_invoice_totals
from invoicekit.domain.entities import InvoiceStatus
from invoicekit.domain.seed import SeedResult, seed_database


def test_seed_database(temp_db):
    """Test that seeding creates the sample records."""
    result = seed_database(temp_db)

    assert result == SeedResult(companies=2, customers=3, services=8, invoices=1)
    assert temp_db.get_default_company().name == "Acme Corp"
    assert len(temp_db.list_customers()) == 3


def test_seeded_invoice_totals(temp_db):
    """Test the sample invoice lines and totals."""
    seed_database(temp_db)

    (invoice,) = temp_db.list_invoices()
    totals = aggregate_invoice_totals(invoice.items)

    assert invoice.status == InvoiceStatus.PENDING
    assert [item.description for item in invoice.items] == ["Web Development", "UI/UX Design", "Project Management"]
    assert totals.subtotal == Decimal("9400")
    assert totals.total_tax == Decimal("940")
    assert totals.total == Decimal("10340")


def test_seed_skips_populated_database(temp_db, sample_company):
    """Test that existing data is left alone."""
    assert seed_database(temp_db) is None
    assert len(temp_db.list_companies()) == 1


def test_seed_cli(cli_runner, temp_db):
    """Test the seed command twice."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "seed"])
    assert result.exit_code == 0
    assert "Created 2 companies, 3 customers, 8 services and 1 invoice." in result.output

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "seed"])
    assert result.exit_code == 0
    assert "skipping seed" in result.output
