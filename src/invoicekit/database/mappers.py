"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the flat address columns and
string enums of the schema never leak into the domain entities.
"""

from decimal import Decimal

from invoicekit.domain import entities as domain
from invoicekit.domain.payment_terms import PaymentTerms
from invoicekit.database.models import (
    Company as ORMCompany,
    Customer as ORMCustomer,
    Service as ORMService,
    Invoice as ORMInvoice,
    InvoiceLine as ORMInvoiceLine,
)


def address_to_domain(orm_party: ORMCompany | ORMCustomer) -> domain.Address:
    """Build a domain Address from the address columns of a company or customer."""
    return domain.Address(
        street=orm_party.street,
        city=orm_party.city,
        state=orm_party.state,
        zip_code=orm_party.zip_code,
        country=orm_party.country,
    )


def company_to_domain(orm_company: ORMCompany) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    return domain.Company(
        id=orm_company.id,
        name=orm_company.name,
        email=orm_company.email,
        address=address_to_domain(orm_company),
        created_at=orm_company.created_at,
        phone=orm_company.phone,
        tax_id=orm_company.tax_id,
        is_default=bool(orm_company.is_default),
    )


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(
        id=orm_customer.id,
        name=orm_customer.name,
        email=orm_customer.email,
        address=address_to_domain(orm_customer),
        created_at=orm_customer.created_at,
        phone=orm_customer.phone,
        tax_id=orm_customer.tax_id,
    )


def service_to_domain(orm_service: ORMService) -> domain.Service:
    """Convert SQLAlchemy Service model to domain Service entity."""
    return domain.Service(
        id=orm_service.id,
        description=orm_service.description,
        default_rate=Decimal(orm_service.default_rate),
        company_id=orm_service.company_id,
        created_at=orm_service.created_at,
    )


def invoice_line_to_domain(orm_line: ORMInvoiceLine) -> domain.LineItem:
    """Convert SQLAlchemy InvoiceLine model to domain LineItem entity."""
    return domain.LineItem(
        id=orm_line.id,
        description=orm_line.description,
        quantity=Decimal(orm_line.quantity),
        unit_price=Decimal(orm_line.unit_price),
        tax_rate=Decimal(orm_line.tax_rate),
    )


def invoice_to_domain(orm_invoice: ORMInvoice) -> domain.Invoice:
    """Convert SQLAlchemy Invoice model (with its lines) to domain Invoice entity."""
    return domain.Invoice(
        id=orm_invoice.id,
        invoice_number=orm_invoice.invoice_number,
        created_at=orm_invoice.created_at,
        due_date=orm_invoice.due_date,
        status=domain.InvoiceStatus(orm_invoice.status),
        company_id=orm_invoice.company_id,
        customer_id=orm_invoice.customer_id,
        currency=orm_invoice.currency,
        payment_terms=PaymentTerms(orm_invoice.payment_terms),
        items=tuple(invoice_line_to_domain(line) for line in orm_invoice.lines),
        notes=orm_invoice.notes,
        terms_and_conditions=orm_invoice.terms_and_conditions,
    )
