"""Utility for resolving company and customer names to IDs."""

from typing import Callable, Optional, Sequence

from invoicekit.domain.company import CompanyService
from invoicekit.domain.customer import CustomerService
from invoicekit.domain.errors import NotFoundError


def _resolve(
    value: str | int,
    kind: str,
    get_by_id: Callable[[int], Optional[object]],
    list_all: Callable[[], Sequence],
) -> int:
    """Resolve a name or ID using the given lookups.

    Numeric values (ints or digit strings) are treated as IDs; anything else
    is matched against names exactly, then case-insensitively.
    """
    try:
        entity_id = int(value)
    except (ValueError, TypeError):
        entity_id = None

    if entity_id is not None:
        if get_by_id(entity_id) is None:
            raise NotFoundError(f"{kind} ID {entity_id} not found")
        return entity_id

    entities = list_all()
    for entity in entities:
        if entity.name == value:
            return entity.id
    for entity in entities:
        if entity.name.lower() == str(value).lower():
            return entity.id

    raise NotFoundError(f"{kind} '{value}' not found")


def resolve_company(company_service: CompanyService, company: str | int) -> int:
    """Resolve company name or ID to company ID.

    Args:
        company_service: CompanyService instance
        company: Company name, or ID as int or numeric string

    Returns:
        Company ID

    Raises:
        NotFoundError: If company is not found
    """
    return _resolve(company, "Company", company_service.get_company, company_service.list_companies)


def resolve_customer(customer_service: CustomerService, customer: str | int) -> int:
    """Resolve customer name or ID to customer ID.

    Raises:
        NotFoundError: If customer is not found
    """
    return _resolve(customer, "Customer", customer_service.get_customer, customer_service.list_customers)
