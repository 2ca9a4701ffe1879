"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from invoicekit.domain.entities import (
    Address,
    Company,
    Customer,
    Service,
    Invoice,
    LineItem,
)


class Database(ABC):
    """Abstract database interface for invoicekit."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Company operations
    @abstractmethod
    def create_company(
        self,
        name: str,
        email: str,
        address: Address,
        phone: Optional[str] = None,
        tax_id: Optional[str] = None,
        is_default: bool = False,
    ) -> int:
        """Create a company. Returns company ID."""
        pass

    @abstractmethod
    def get_company(self, company_id: int) -> Optional[Company]:
        """Get company by ID."""
        pass

    @abstractmethod
    def get_default_company(self) -> Optional[Company]:
        """Get the company flagged as default, if any."""
        pass

    @abstractmethod
    def list_companies(self) -> list[Company]:
        """List all companies ordered by name."""
        pass

    @abstractmethod
    def set_default_company(self, company_id: Optional[int]) -> None:
        """Flag one company as default and clear the flag on all others.

        Passing None clears the flag everywhere.
        """
        pass

    @abstractmethod
    def delete_company(self, company_id: int) -> None:
        """Delete a company and its services."""
        pass

    @abstractmethod
    def count_company_invoices(self, company_id: int) -> int:
        """Count invoices issued by a company."""
        pass

    # Customer operations
    @abstractmethod
    def create_customer(
        self,
        name: str,
        email: str,
        address: Address,
        phone: Optional[str] = None,
        tax_id: Optional[str] = None,
    ) -> int:
        """Create a customer. Returns customer ID."""
        pass

    @abstractmethod
    def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID."""
        pass

    @abstractmethod
    def list_customers(self) -> list[Customer]:
        """List all customers ordered by name."""
        pass

    @abstractmethod
    def delete_customer(self, customer_id: int) -> None:
        """Delete a customer."""
        pass

    @abstractmethod
    def count_customer_invoices(self, customer_id: int) -> int:
        """Count invoices billed to a customer."""
        pass

    # Service operations
    @abstractmethod
    def create_service(self, description: str, default_rate: Decimal, company_id: int) -> int:
        """Create a billable service. Returns service ID."""
        pass

    @abstractmethod
    def get_service(self, service_id: int) -> Optional[Service]:
        """Get service by ID."""
        pass

    @abstractmethod
    def list_services(self, company_id: Optional[int] = None) -> list[Service]:
        """List services ordered by description, optionally filtered by company."""
        pass

    @abstractmethod
    def delete_service(self, service_id: int) -> None:
        """Delete a service."""
        pass

    # Invoice operations
    @abstractmethod
    def create_invoice(
        self,
        invoice_number: str,
        company_id: int,
        customer_id: int,
        created_at: datetime,
        due_date: datetime,
        status: str,
        currency: str,
        payment_terms: str,
        items: list[LineItem],
        notes: Optional[str] = None,
        terms_and_conditions: Optional[str] = None,
    ) -> int:
        """Create an invoice with its line items in the given order. Returns invoice ID."""
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: int) -> Optional[Invoice]:
        """Get invoice by ID, including line items."""
        pass

    @abstractmethod
    def get_invoice_by_number(self, invoice_number: str) -> Optional[Invoice]:
        """Get invoice by invoice number."""
        pass

    @abstractmethod
    def list_invoices(
        self,
        status: Optional[str] = None,
        customer_id: Optional[int] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Invoice]:
        """List invoices, newest first, with optional filters.

        Args:
            status: Optional status filter
            customer_id: Optional customer ID filter
            start_date: Optional lower bound on creation time (inclusive)
            end_date: Optional upper bound on creation time (exclusive)
        """
        pass

    @abstractmethod
    def update_invoice_status(self, invoice_id: int, status: str) -> None:
        """Update invoice status."""
        pass

    @abstractmethod
    def delete_invoice(self, invoice_id: int) -> None:
        """Delete an invoice and its line items."""
        pass
