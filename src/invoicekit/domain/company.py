"""Company domain service."""

import logging
from typing import Optional

from invoicekit.database.base import Database
from invoicekit.domain.entities import Address, Company as CompanyEntity
from invoicekit.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    company_not_found,
    delete_blocked,
)

logger = logging.getLogger(__name__)


def validate_party(name: str, email: str) -> None:
    """Validate the fields shared by companies and customers.

    Raises:
        ValidationError: If name is blank or email is not an address
    """
    if not name or not name.strip():
        raise ValidationError("Name is required")
    if not email or "@" not in email:
        raise ValidationError(f"Invalid email address '{email}'")


class CompanyService:
    """Service for managing issuing companies."""

    def __init__(self, db: Database):
        """Initialize company service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_company(
        self,
        name: str,
        email: str,
        address: Address,
        phone: Optional[str] = None,
        tax_id: Optional[str] = None,
        is_default: bool = False,
    ) -> int:
        """Create a company.

        Only one company can be the default; creating a new default clears
        the flag on the previous one.

        Args:
            name: Company name
            email: Billing email address
            address: Postal address
            phone: Optional phone number
            tax_id: Optional tax identifier
            is_default: Make this the default issuing company

        Returns:
            Company ID

        Raises:
            ValidationError: If name or email is invalid
        """
        validate_party(name, email)

        company_id = self.db.create_company(
            name=name.strip(),
            email=email.strip(),
            address=address,
            phone=phone,
            tax_id=tax_id,
        )
        if is_default:
            self.db.set_default_company(company_id)

        logger.info("Created company %s (%s)", company_id, name)
        return company_id

    def get_company(self, company_id: int) -> Optional[CompanyEntity]:
        """Get company by ID.

        Args:
            company_id: Company ID

        Returns:
            Company entity or None if not found
        """
        return self.db.get_company(company_id)

    def require_company(self, company_id: int) -> CompanyEntity:
        """Get company by ID, raising if it does not exist."""
        company = self.db.get_company(company_id)
        if company is None:
            raise NotFoundError(company_not_found(company_id))
        return company

    def get_default_company(self) -> Optional[CompanyEntity]:
        """Get the default issuing company, if one is set."""
        return self.db.get_default_company()

    def list_companies(self) -> list[CompanyEntity]:
        """List all companies.

        Returns:
            List of company entities ordered by name
        """
        return self.db.list_companies()

    def set_default_company(self, company_id: int) -> None:
        """Make a company the default issuing company.

        Raises:
            NotFoundError: If company not found
        """
        self.require_company(company_id)
        self.db.set_default_company(company_id)
        logger.info("Company %s is now the default", company_id)

    def delete_company(self, company_id: int) -> None:
        """Delete a company together with its services.

        Args:
            company_id: Company ID to delete

        Raises:
            NotFoundError: If company not found
            DependencyError: If the company has issued invoices
        """
        self.require_company(company_id)

        invoice_count = self.db.count_company_invoices(company_id)
        if invoice_count > 0:
            raise DependencyError(delete_blocked("company", company_id, invoice_count))

        self.db.delete_company(company_id)
        logger.info("Deleted company %s", company_id)
