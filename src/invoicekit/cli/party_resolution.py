"""CLI helpers for company and customer resolution."""

from __future__ import annotations

import click
from invoicekit.cli.error_handling import handle_domain_error
from invoicekit.domain.company import CompanyService
from invoicekit.domain.customer import CustomerService
from invoicekit.utils.party_resolver import resolve_company, resolve_customer


def resolve_company_or_exit(
    ctx: click.Context, company_service: CompanyService, company: str | int
) -> int:
    """Resolve company name or ID, or exit with a CLI error."""
    try:
        return resolve_company(company_service, company)
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def resolve_customer_or_exit(
    ctx: click.Context, customer_service: CustomerService, customer: str | int
) -> int:
    """Resolve customer name or ID, or exit with a CLI error."""
    try:
        return resolve_customer(customer_service, customer)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
