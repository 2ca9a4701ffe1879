"""Tests for the billable service catalog."""

import pytest
from decimal import Decimal

from invoicekit.cli.main import cli
from invoicekit.domain.errors import NotFoundError, ValidationError


class TestServiceCatalogService:
    """Tests for ServiceCatalogService."""

    def test_create_service_rounds_rate(self, catalog, sample_company):
        """Test that the default rate is stored in cents."""
        service_id = catalog.create_service("Web Development", "150.005", sample_company.id)
        service = catalog.get_service(service_id)

        assert service.description == "Web Development"
        assert service.default_rate == Decimal("150.01")
        assert service.company_id == sample_company.id

    def test_create_service_validation(self, catalog, sample_company):
        """Test blank descriptions and negative rates."""
        with pytest.raises(ValidationError, match="description is required"):
            catalog.create_service("  ", 100, sample_company.id)
        with pytest.raises(ValidationError, match="cannot be negative"):
            catalog.create_service("Refund", -1, sample_company.id)

    def test_create_service_unknown_company(self, catalog):
        """Test that services need an existing company."""
        with pytest.raises(NotFoundError, match="Company 3 not found"):
            catalog.create_service("Design", 120, 3)

    def test_list_services_by_company(self, catalog, sample_company, company_service, sample_address):
        """Test filtering services by company."""
        other_id = company_service.create_company(name="Other", email="o@o.com", address=sample_address)
        catalog.create_service("Web Development", 150, sample_company.id)
        catalog.create_service("Audit", 90, other_id)

        assert [s.description for s in catalog.list_services(sample_company.id)] == ["Web Development"]
        assert len(catalog.list_services()) == 2

    def test_delete_service(self, catalog, sample_company):
        """Test deleting a service."""
        service_id = catalog.create_service("Design", 120, sample_company.id)
        catalog.delete_service(service_id)

        assert catalog.get_service(service_id) is None
        with pytest.raises(NotFoundError):
            catalog.delete_service(service_id)

    def test_to_line_item(self, catalog, sample_company):
        """Test building a line item at the default rate."""
        service_id = catalog.create_service("Web Development", 150, sample_company.id)

        item = catalog.to_line_item(service_id, 1.5, 10)

        assert item.description == "Web Development"
        assert item.quantity == Decimal("1.5")
        assert item.unit_price == Decimal("150")
        assert item.tax_rate == Decimal("10")


def test_service_create_uses_default_company(cli_runner, temp_db, sample_company):
    """Test that services go to the default company when --company is omitted."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "create", "Consulting", "--rate", "175"]
    )

    assert result.exit_code == 0
    assert "Created service 'Consulting' at $175.00" in result.output


def test_service_create_without_default_company(cli_runner, temp_db):
    """Test that a company is required when no default exists."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "create", "Consulting", "--rate", "175"]
    )

    assert result.exit_code == 1
    assert "No default company set" in result.output


def test_service_create_invalid_rate(cli_runner, temp_db, sample_company):
    """Test a rate that is not a number."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "create", "Consulting", "--rate", "lots"]
    )

    assert result.exit_code == 1
    assert "Invalid rate" in result.output


def test_service_list_cli(cli_runner, temp_db, sample_company, catalog):
    """Test listing services of a company."""
    catalog.create_service("Web Development", Decimal("1500"), sample_company.id)

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "service", "list", "--company", "Acme Corp"]
    )

    assert result.exit_code == 0
    assert "Web Development" in result.output
    assert "$1,500.00" in result.output
