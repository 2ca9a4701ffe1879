"""Customer domain service."""

import logging
from typing import Optional

from invoicekit.database.base import Database
from invoicekit.domain.company import validate_party
from invoicekit.domain.entities import Address, Customer as CustomerEntity
from invoicekit.domain.errors import (
    DependencyError,
    NotFoundError,
    customer_not_found,
    delete_blocked,
)

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for managing customers."""

    def __init__(self, db: Database):
        """Initialize customer service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_customer(
        self,
        name: str,
        email: str,
        address: Address,
        phone: Optional[str] = None,
        tax_id: Optional[str] = None,
    ) -> int:
        """Create a customer.

        Returns:
            Customer ID

        Raises:
            ValidationError: If name or email is invalid
        """
        validate_party(name, email)
        customer_id = self.db.create_customer(
            name=name.strip(),
            email=email.strip(),
            address=address,
            phone=phone,
            tax_id=tax_id,
        )
        logger.info("Created customer %s (%s)", customer_id, name)
        return customer_id

    def get_customer(self, customer_id: int) -> Optional[CustomerEntity]:
        """Get customer by ID, or None if not found."""
        return self.db.get_customer(customer_id)

    def require_customer(self, customer_id: int) -> CustomerEntity:
        """Get customer by ID, raising if it does not exist."""
        customer = self.db.get_customer(customer_id)
        if customer is None:
            raise NotFoundError(customer_not_found(customer_id))
        return customer

    def list_customers(self) -> list[CustomerEntity]:
        """List all customers ordered by name."""
        return self.db.list_customers()

    def delete_customer(self, customer_id: int) -> None:
        """Delete a customer.

        Raises:
            NotFoundError: If customer not found
            DependencyError: If invoices are billed to the customer
        """
        self.require_customer(customer_id)

        invoice_count = self.db.count_customer_invoices(customer_id)
        if invoice_count > 0:
            raise DependencyError(delete_blocked("customer", customer_id, invoice_count))

        self.db.delete_customer(customer_id)
        logger.info("Deleted customer %s", customer_id)
