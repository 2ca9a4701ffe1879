"""Service catalog domain service.

A service is something a company bills for, with a default hourly or unit
rate that pre-fills invoice lines.
"""

import logging
from typing import Optional

from invoicekit.database.base import Database
from invoicekit.domain.entities import LineItem, Service as ServiceEntity
from invoicekit.domain.errors import (
    NotFoundError,
    ValidationError,
    company_not_found,
    service_not_found,
)
from invoicekit.utils.money import Numeric, round_money, to_decimal

logger = logging.getLogger(__name__)


class ServiceCatalogService:
    """Service for managing billable services."""

    def __init__(self, db: Database):
        """Initialize service catalog.

        Args:
            db: Database instance
        """
        self.db = db

    def create_service(self, description: str, default_rate: Numeric, company_id: int) -> int:
        """Create a billable service for a company.

        Args:
            description: Service description (e.g. "Web Development")
            default_rate: Default rate, rounded to cents
            company_id: Owning company ID

        Returns:
            Service ID

        Raises:
            ValidationError: If description is blank or rate is negative
            NotFoundError: If company doesn't exist
        """
        if not description or not description.strip():
            raise ValidationError("Service description is required")

        rate = round_money(default_rate)
        if rate < 0:
            raise ValidationError(f"Default rate cannot be negative: {rate}")

        if self.db.get_company(company_id) is None:
            raise NotFoundError(company_not_found(company_id))

        service_id = self.db.create_service(
            description=description.strip(), default_rate=rate, company_id=company_id
        )
        logger.info("Created service %s (%s) for company %s", service_id, description, company_id)
        return service_id

    def get_service(self, service_id: int) -> Optional[ServiceEntity]:
        """Get service by ID, or None if not found."""
        return self.db.get_service(service_id)

    def require_service(self, service_id: int) -> ServiceEntity:
        """Get service by ID, raising if it does not exist."""
        service = self.db.get_service(service_id)
        if service is None:
            raise NotFoundError(service_not_found(service_id))
        return service

    def list_services(self, company_id: Optional[int] = None) -> list[ServiceEntity]:
        """List services, optionally only those of one company."""
        return self.db.list_services(company_id=company_id)

    def delete_service(self, service_id: int) -> None:
        """Delete a service.

        Raises:
            NotFoundError: If service not found
        """
        self.require_service(service_id)
        self.db.delete_service(service_id)
        logger.info("Deleted service %s", service_id)

    def to_line_item(self, service_id: int, quantity: Numeric, tax_rate: Numeric = 0) -> LineItem:
        """Build an invoice line billed at the service's default rate."""
        service = self.require_service(service_id)
        return LineItem(
            description=service.description,
            quantity=to_decimal(quantity),
            unit_price=service.default_rate,
            tax_rate=to_decimal(tax_rate),
        )
