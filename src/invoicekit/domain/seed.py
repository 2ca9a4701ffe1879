"""Sample data for a fresh database."""

import logging
from dataclasses import dataclass
from decimal import Decimal

from invoicekit.database.base import Database
from invoicekit.domain.company import CompanyService
from invoicekit.domain.customer import CustomerService
from invoicekit.domain.entities import Address, InvoiceStatus, LineItem
from invoicekit.domain.invoice import InvoiceService
from invoicekit.domain.payment_terms import PaymentTerms
from invoicekit.domain.service_catalog import ServiceCatalogService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedResult:
    """Counts of records created by ``seed_database``."""

    companies: int
    customers: int
    services: int
    invoices: int


SAMPLE_COMPANIES = [
    # (name, email, phone, address, tax_id, is_default)
    (
        "Acme Corp",
        "billing@acme.com",
        "+1 (555) 123-4567",
        Address("123 Business Ave", "San Francisco", "CA", "94102", "USA"),
        "US-123456789",
        True,
    ),
    (
        "Tech Solutions LLC",
        "invoices@techsolutions.io",
        "+1 (555) 987-6543",
        Address("456 Innovation Way", "Austin", "TX", "78701", "USA"),
        "US-987654321",
        False,
    ),
]

SAMPLE_CUSTOMERS = [
    # (name, email, phone, address, tax_id)
    (
        "Client Company",
        "accounts@client.com",
        "+1 (555) 987-6543",
        Address("456 Client Street", "New York", "NY", "10001", "USA"),
        None,
    ),
    (
        "Startup Inc",
        "finance@startup.io",
        "+1 (555) 555-1234",
        Address("789 Startup Lane", "Seattle", "WA", "98101", "USA"),
        "US-555123456",
    ),
    (
        "Global Enterprises",
        "ap@globalent.com",
        None,
        Address("321 Corporate Blvd", "Chicago", "IL", "60601", "USA"),
        None,
    ),
]

# Services of the default company: (description, default rate)
SAMPLE_SERVICES = [
    ("Web Development", Decimal("150.00")),
    ("UI/UX Design", Decimal("120.00")),
    ("Project Management", Decimal("100.00")),
    ("Consulting", Decimal("175.00")),
    ("Code Review", Decimal("125.00")),
    ("Technical Writing", Decimal("85.00")),
    ("Database Design", Decimal("140.00")),
    ("API Development", Decimal("160.00")),
]

# Lines of the sample invoice: (service description, hours)
SAMPLE_INVOICE_HOURS = [
    ("Web Development", Decimal(40)),
    ("UI/UX Design", Decimal(20)),
    ("Project Management", Decimal(10)),
]
SAMPLE_TAX_RATE = Decimal(10)


def seed_database(db: Database) -> SeedResult | None:
    """Insert sample companies, customers, services and one invoice.

    Nothing is written when the database already contains a company.

    Args:
        db: Database instance

    Returns:
        SeedResult with created counts, or None if seeding was skipped
    """
    company_service = CompanyService(db)
    if company_service.list_companies():
        logger.info("Database already has data, skipping seed")
        return None

    company_ids = [
        company_service.create_company(
            name=name, email=email, address=address, phone=phone, tax_id=tax_id, is_default=is_default
        )
        for name, email, phone, address, tax_id, is_default in SAMPLE_COMPANIES
    ]
    default_company_id = company_ids[0]

    customer_service = CustomerService(db)
    customer_ids = [
        customer_service.create_customer(name=name, email=email, address=address, phone=phone, tax_id=tax_id)
        for name, email, phone, address, tax_id in SAMPLE_CUSTOMERS
    ]

    catalog = ServiceCatalogService(db)
    service_ids = {
        description: catalog.create_service(description, rate, default_company_id)
        for description, rate in SAMPLE_SERVICES
    }

    items: list[LineItem] = [
        catalog.to_line_item(service_ids[description], hours, SAMPLE_TAX_RATE)
        for description, hours in SAMPLE_INVOICE_HOURS
    ]
    invoice_service = InvoiceService(db)
    invoice_id = invoice_service.create_invoice(
        company_id=default_company_id,
        customer_id=customer_ids[0],
        items=items,
        currency="USD",
        payment_terms=PaymentTerms.NET_30,
        notes="Thank you for your business!",
        terms_and_conditions=(
            "Payment is due within 30 days. Late payments may incur a 1.5% monthly interest."
        ),
    )
    invoice_service.update_status(invoice_id, InvoiceStatus.PENDING)

    result = SeedResult(
        companies=len(company_ids),
        customers=len(customer_ids),
        services=len(service_ids),
        invoices=1,
    )
    logger.info("Seeded database: %s", result)
    return result
