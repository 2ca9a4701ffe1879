"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def company_not_found(company_id: int) -> str:
    """Return message for missing company."""
    return f"Company {company_id} not found"


def customer_not_found(customer_id: int) -> str:
    """Return message for missing customer."""
    return f"Customer {customer_id} not found"


def service_not_found(service_id: int) -> str:
    """Return message for missing service."""
    return f"Service {service_id} not found"


def invoice_not_found(invoice_id: int) -> str:
    """Return message for missing invoice by ID."""
    return f"Invoice {invoice_id} not found"


def invoice_number_not_found(invoice_number: str) -> str:
    """Return message for missing invoice by number."""
    return f"Invoice '{invoice_number}' not found"


def delete_blocked(kind: str, entity_id: int, invoice_count: int) -> str:
    """Return message when a company or customer still has invoices."""
    return (
        f"Cannot delete {kind} {entity_id}: it has "
        f"{invoice_count} invoice{'s' if invoice_count != 1 else ''}. "
        "Please delete them first."
    )
