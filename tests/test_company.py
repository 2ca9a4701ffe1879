"""Tests for company service and commands."""

import logging

import pytest
from invoicekit.cli.main import cli
from invoicekit.domain.errors import DependencyError, NotFoundError, ValidationError


class TestCompanyService:
    """Tests for CompanyService."""

    def test_create_company(self, company_service, sample_address):
        """Test creating a company."""
        company_id = company_service.create_company(
            name="  Acme Corp ", email="billing@acme.com", address=sample_address
        )
        company = company_service.get_company(company_id)

        assert company.name == "Acme Corp"
        assert company.address == sample_address
        assert company.is_default is False

    @pytest.mark.parametrize("name,email", [("", "a@b.com"), ("   ", "a@b.com"), ("Acme", "not-an-email"), ("Acme", "")])
    def test_create_company_invalid(self, company_service, sample_address, name, email):
        """Test that blank names and bad emails are rejected."""
        with pytest.raises(ValidationError):
            company_service.create_company(name=name, email=email, address=sample_address)

    def test_only_one_default(self, company_service, sample_company, sample_address):
        """Test that creating a new default clears the old one."""
        new_id = company_service.create_company(
            name="Tech Solutions LLC", email="ap@tech.io", address=sample_address, is_default=True
        )

        assert company_service.get_default_company().id == new_id
        assert company_service.get_company(sample_company.id).is_default is False
        assert sum(c.is_default for c in company_service.list_companies()) == 1

    def test_set_default_company(self, company_service, sample_company, sample_address):
        """Test switching the default company."""
        other_id = company_service.create_company(name="Other", email="o@o.com", address=sample_address)

        company_service.set_default_company(other_id)

        assert company_service.get_default_company().id == other_id

    def test_set_default_missing(self, company_service):
        """Test that an unknown company cannot become default."""
        with pytest.raises(NotFoundError, match="Company 99 not found"):
            company_service.set_default_company(99)

    def test_delete_company(self, company_service, sample_company):
        """Test deleting a company without invoices."""
        company_service.delete_company(sample_company.id)
        assert company_service.get_company(sample_company.id) is None

    def test_delete_company_with_invoices(self, company_service, sample_invoice):
        """Test that companies with invoices cannot be deleted."""
        with pytest.raises(DependencyError, match="1 invoice"):
            company_service.delete_company(sample_invoice.company_id)

    def test_require_company_missing(self, company_service):
        """Test require_company raises for unknown IDs."""
        with pytest.raises(NotFoundError):
            company_service.require_company(5)


def test_company_create_cli(cli_runner, temp_db):
    """Test creating a default company from the command line."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "company", "create", "Acme Corp",
            "--email", "billing@acme.com", "--city", "San Francisco", "--default",
        ],
    )

    assert result.exit_code == 0
    assert "Created company 'Acme Corp'" in result.output
    assert "Set as default company" in result.output


def test_company_create_cli_invalid_email(cli_runner, temp_db):
    """Test that validation errors exit with status 1."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "company", "create", "Acme", "--email", "nope"]
    )

    assert result.exit_code == 1
    assert "Invalid email address" in result.output


def test_company_list_cli(cli_runner, temp_db, sample_company):
    """Test that the default company is marked in the list."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "company", "list"])

    assert result.exit_code == 0
    assert "Acme Corp" in result.output
    assert "[default]" in result.output


def test_company_list_empty_cli(cli_runner, temp_db):
    """Test listing companies when none exist."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "company", "list"])

    assert result.exit_code == 0
    assert "No companies found" in result.output


def test_company_set_default_by_name_cli(cli_runner, temp_db, sample_company, company_service, sample_address):
    """Test set-default resolves company names case-insensitively."""
    other_id = company_service.create_company(name="Tech Solutions LLC", email="ap@tech.io", address=sample_address)

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "company", "set-default", "tech solutions llc"]
    )

    assert result.exit_code == 0
    assert f"Company {other_id} is now the default" in result.output


def test_company_delete_unknown_cli(cli_runner, temp_db):
    """Test deleting an unknown company."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "company", "delete", "Nobody"])

    assert result.exit_code == 1
    assert "Company 'Nobody' not found" in result.output


def test_failed_command_is_logged(cli_runner, temp_db, caplog):
    """Test that a failing command is logged at debug level."""
    caplog.set_level(logging.DEBUG, logger="invoicekit.cli.error_handling")
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "company", "delete", "Nobody"])

    assert result.exit_code == 1
    assert "'cli company delete' failed: Company 'Nobody' not found" in caplog.text


def test_company_delete_with_invoice_cli(cli_runner, temp_db, sample_invoice):
    """Test that a blocked delete points at the invoice list."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "company", "delete", str(sample_invoice.company_id)]
    )

    assert result.exit_code == 1
    assert "Cannot delete company" in result.output
    assert "Hint: see 'invoice list'" in result.output
