"""Shared pytest fixtures for invoicekit tests."""

import tempfile
import os
from decimal import Decimal
import pytest

from invoicekit.database.factories import create_sqlite_database
from invoicekit.domain.company import CompanyService
from invoicekit.domain.customer import CustomerService
from invoicekit.domain.entities import Address, LineItem
from invoicekit.domain.invoice import InvoiceService
from invoicekit.domain.service_catalog import ServiceCatalogService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def company_service(temp_db):
    """Create a CompanyService with a temporary database."""
    return CompanyService(temp_db)


@pytest.fixture
def customer_service(temp_db):
    """Create a CustomerService with a temporary database."""
    return CustomerService(temp_db)


@pytest.fixture
def catalog(temp_db):
    """Create a ServiceCatalogService with a temporary database."""
    return ServiceCatalogService(temp_db)


@pytest.fixture
def invoice_service(temp_db):
    """Create an InvoiceService with a temporary database."""
    return InvoiceService(temp_db)


@pytest.fixture
def sample_address():
    """A postal address for companies and customers."""
    return Address(
        street="123 Business Ave",
        city="San Francisco",
        state="CA",
        zip_code="94102",
        country="USA",
    )


@pytest.fixture
def sample_company(company_service, sample_address):
    """Create a default sample company."""
    company_id = company_service.create_company(
        name="Acme Corp",
        email="billing@acme.com",
        address=sample_address,
        tax_id="US-123456789",
        is_default=True,
    )
    return company_service.get_company(company_id)


@pytest.fixture
def sample_customer(customer_service):
    """Create a sample customer."""
    customer_id = customer_service.create_customer(
        name="Client Company",
        email="accounts@client.com",
        address=Address("456 Client Street", "New York", "NY", "10001", "USA"),
    )
    return customer_service.get_customer(customer_id)


@pytest.fixture
def sample_items():
    """Three hourly line items in entry order."""
    return [
        LineItem(description="Web Development", quantity=Decimal("8.25"), unit_price=Decimal("125.50"), tax_rate=Decimal(10)),
        LineItem(description="UI/UX Design", quantity=Decimal("4.5"), unit_price=Decimal("100"), tax_rate=Decimal(10)),
        LineItem(description="Consulting", quantity=Decimal("2.75"), unit_price=Decimal("175"), tax_rate=Decimal(0)),
    ]


@pytest.fixture
def sample_invoice(invoice_service, sample_company, sample_customer, sample_items):
    """Create a sample draft invoice."""
    invoice_id = invoice_service.create_invoice(
        company_id=sample_company.id,
        customer_id=sample_customer.id,
        items=sample_items,
    )
    return invoice_service.get_invoice(invoice_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
